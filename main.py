from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from helper.tortoise_config import lifespan
from controller.draft_controller import router as draft_router
from controller.generation_controller import router as generation_router
from controller.blog_post_controller import router as blog_post_router
from controller.wordpress_controller import router as wordpress_router
from controller.profile_settings_controller import router as profile_settings_router


app = FastAPI(lifespan=lifespan)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allows all origins
    allow_credentials=True,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)


app.include_router(draft_router, prefix="/api", tags=["drafts"])
app.include_router(generation_router, prefix="/api", tags=["generation"])
app.include_router(blog_post_router, prefix="/api", tags=["blog-posts"])
app.include_router(wordpress_router, prefix="/api", tags=["wordpress"])
app.include_router(profile_settings_router, prefix="/api", tags=["profile-settings"])


@app.get('/')
def default_api():
    return "SEO Blog Generator API"
