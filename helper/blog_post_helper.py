from typing import Any, Dict, List, Optional

from tortoise.transactions import in_transaction

from helper.draft_schema import Draft, FaqItem, MetaTags
from helper.log_helper import get_logger
from helper.seo_scoring import count_words
from models.blog_post import BlogPost
from models.heading import Heading
from models.keyword import Keyword, KeywordTypeEnum

logger = get_logger("blog_post")


def keyword_rows(draft: Draft) -> List[Dict[str, str]]:
    rows = []
    for keyword_type in KeywordTypeEnum:
        for text in getattr(draft.keywords, keyword_type.value):
            rows.append({"keyword_type": keyword_type, "keyword_text": text})
    return rows


def heading_rows(draft: Draft) -> List[Dict[str, Any]]:
    # h1 first, then every h2 in outline order; h3s stay in the draft only
    rows = [{"heading_level": "h1", "heading_text": draft.headings.h1, "order_index": 0}]
    for index, h2 in enumerate(draft.headings.h2s):
        rows.append({"heading_level": "h2", "heading_text": h2, "order_index": index + 1})
    return rows


async def save_blog_post(draft: Draft, seo_score: Optional[int] = None) -> BlogPost:
    """Finalize a draft into a blog_posts row with its keyword and heading rows."""
    async with in_transaction():
        post = await BlogPost.create(
            user_id=draft.user_id,
            title=draft.meta_tags.title,
            meta_title=draft.meta_tags.title,
            meta_description=draft.meta_tags.description,
            url_slug=draft.meta_tags.slug,
            h1_title=draft.headings.h1,
            short_intro=draft.short_intro,
            content=draft.content,
            faq_content=[faq.model_dump() for faq in draft.faq_content],
            word_count=count_words(draft.content),
            seo_score=seo_score,
            status="draft",
        )
        await Keyword.bulk_create([Keyword(blog_post=post, **row) for row in keyword_rows(draft)])
        await Heading.bulk_create([Heading(blog_post=post, **row) for row in heading_rows(draft)])
    logger.info(f"Saved blog post {post.id} for user {draft.user_id}")
    return post


def post_to_dict(post: BlogPost) -> Dict[str, Any]:
    return {
        "id": post.id,
        "user_id": post.user_id,
        "title": post.title,
        "meta_title": post.meta_title,
        "meta_description": post.meta_description,
        "url_slug": post.url_slug,
        "h1_title": post.h1_title,
        "short_intro": post.short_intro,
        "content": post.content,
        "faq_content": post.faq_content or [],
        "word_count": post.word_count,
        "seo_score": post.seo_score,
        "status": post.status,
        "created_at": post.created_at.isoformat() if post.created_at else None,
    }


async def post_with_children(post: BlogPost) -> Dict[str, Any]:
    data = post_to_dict(post)
    data["keywords"] = [
        {"keyword_type": k.keyword_type.value, "keyword_text": k.keyword_text}
        for k in await Keyword.filter(blog_post_id=post.id).order_by("id")
    ]
    data["headings"] = [
        {"heading_level": h.heading_level, "heading_text": h.heading_text, "order_index": h.order_index}
        for h in await Heading.filter(blog_post_id=post.id).order_by("order_index")
    ]
    return data


def export_fields(post: BlogPost):
    meta_tags = MetaTags(
        title=post.meta_title or post.title,
        description=post.meta_description or "",
        slug=post.url_slug or "",
    )
    faqs = [FaqItem.model_validate(faq) for faq in (post.faq_content or [])]
    return meta_tags, post.short_intro or "", post.content or "", faqs
