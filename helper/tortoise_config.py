from tortoise import Tortoise
import os
import dotenv
from helper.log_helper import init_logger, logger

dotenv.load_dotenv()

MODEL_MODULES = [
    'models.blog_draft',
    'models.blog_post',
    'models.keyword',
    'models.heading',
    'models.profile',
]

TORTOISE_CONFIG = {
    'connections': {
        'default': os.getenv('DATABASE_URL', 'sqlite://db.sqlite3')
    },
    'apps': {
        'models': {
            'models': ['aerich.models', *MODEL_MODULES],
            'default_connection': 'default'
        },
    },
}

async def lifespan(_):
    init_logger()
    await Tortoise.init(config=TORTOISE_CONFIG)
    await Tortoise.generate_schemas()
    logger.info("Initializing LifeSpan")
    yield
    await Tortoise.close_connections()
