from fastapi import APIRouter, HTTPException, Path, Query
from fastapi.responses import Response
from pydantic import BaseModel
from tortoise.exceptions import BaseORMException, DoesNotExist
from typing import List, Literal, Optional

from helper.blog_post_helper import export_fields, post_to_dict, post_with_children, save_blog_post
from helper.draft_schema import Draft, FaqItem, MetaTags
from helper.export_helper import (
    DOCX_MEDIA_TYPE,
    MARKDOWN_MEDIA_TYPE,
    export_filename,
    to_docx,
    to_markdown,
)
from models.blog_post import BlogPost

router = APIRouter()


class SaveBlogPostRequest(BaseModel):
    draft: Draft
    seo_score: Optional[int] = None

class ExportRequest(BaseModel):
    meta_tags: MetaTags
    short_intro: str = ""
    content: str = ""
    faq_content: List[FaqItem] = []


def _export_response(fmt: str, meta_tags: MetaTags, short_intro: str, content: str, faq_content: List[FaqItem]):
    if fmt == "docx":
        body = to_docx(meta_tags, short_intro, content, faq_content)
        media_type, filename = DOCX_MEDIA_TYPE, export_filename(meta_tags, "docx")
    else:
        body = to_markdown(meta_tags, short_intro, content, faq_content)
        media_type, filename = MARKDOWN_MEDIA_TYPE, export_filename(meta_tags, "md")
    return Response(
        content=body,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/blog-posts")
async def create_blog_post(request: SaveBlogPostRequest):
    try:
        post = await save_blog_post(request.draft, request.seo_score)
    except BaseORMException as e:
        raise HTTPException(status_code=500, detail=f"Error saving blog post: {str(e)}")
    return {"message": "Blog post saved successfully", "blog_post": post_to_dict(post)}


@router.get("/blog-posts")
async def list_blog_posts(user_id: str = Query(..., description="User ID to filter posts")):
    try:
        posts = await BlogPost.filter(user_id=user_id).order_by('-created_at', '-id')
    except BaseORMException as e:
        raise HTTPException(status_code=500, detail=f"Error fetching blog posts: {str(e)}")
    return [post_to_dict(post) for post in posts]


@router.get("/blog-posts/{post_id}")
async def get_blog_post(post_id: int = Path(..., description="ID of the blog post to fetch")):
    try:
        post = await BlogPost.get(id=post_id)
        return await post_with_children(post)
    except DoesNotExist:
        raise HTTPException(status_code=404, detail="Blog post not found")
    except BaseORMException as e:
        raise HTTPException(status_code=500, detail=f"Error fetching blog post: {str(e)}")


@router.delete("/blog-posts/{post_id}")
async def delete_blog_post(post_id: int):
    try:
        deleted = await BlogPost.filter(id=post_id).delete()
    except BaseORMException as e:
        raise HTTPException(status_code=500, detail=f"Error deleting blog post: {str(e)}")
    if not deleted:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return {"message": "Blog post deleted successfully."}


@router.get("/blog-posts/{post_id}/export")
async def export_blog_post(post_id: int, format: Literal["markdown", "docx"] = "markdown"):
    try:
        post = await BlogPost.get(id=post_id)
    except DoesNotExist:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return _export_response(format, *export_fields(post))


@router.post("/export/{fmt}")
async def export_content(request: ExportRequest, fmt: Literal["markdown", "docx"]):
    return _export_response(fmt, request.meta_tags, request.short_intro, request.content, request.faq_content)
