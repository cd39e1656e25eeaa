from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from tortoise.exceptions import BaseORMException
from typing import Optional

from helper.exceptions import WordPressError
from helper.settings_helper import get_profile_settings
from helper.wordpress_helper import WordPressClient

router = APIRouter()


class WordPressCredentials(BaseModel):
    user_id: str
    wordpress_url: Optional[str] = None
    username: Optional[str] = None
    app_password: Optional[str] = None

class PublishPost(BaseModel):
    title: str
    content: str
    meta_description: str = ""
    slug: str = ""

class PublishRequest(WordPressCredentials):
    post: PublishPost

class UploadImageRequest(WordPressCredentials):
    image_url: str
    file_name: Optional[str] = None


async def _client_for(request: WordPressCredentials) -> WordPressClient:
    """Credentials sent with the request win over the ones stored in the profile."""
    try:
        settings = await get_profile_settings(request.user_id)
    except BaseORMException as e:
        raise HTTPException(status_code=500, detail=f"Error loading WordPress settings: {str(e)}")
    return WordPressClient(
        request.wordpress_url or settings["wordpress_url"],
        request.username or settings["wordpress_username"],
        request.app_password or settings["wordpress_app_password"],
    )


@router.post("/wordpress/publish")
async def publish_to_wordpress(request: PublishRequest):
    try:
        client = await _client_for(request)
        return await client.publish_post(
            title=request.post.title,
            content=request.post.content,
            meta_description=request.post.meta_description,
            slug=request.post.slug,
        )
    except WordPressError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.post("/wordpress/upload-image")
async def upload_wordpress_image(request: UploadImageRequest):
    try:
        client = await _client_for(request)
        return await client.upload_image(request.image_url, request.file_name)
    except WordPressError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
