from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from typing import List, Literal

from helper.blog_generation_helper import BlogGenerationHelper
from helper.draft_schema import FaqItem, Headings, Keywords, MetaTags
from helper.exceptions import GatewayError
from helper.log_helper import get_logger

router = APIRouter()
logger = get_logger("generation_controller")


class KeywordsRequest(BaseModel):
    primary_keywords: List[str] = Field(..., min_length=1)
    type: Literal["secondary", "semantic", "lsi"]

class KeywordSetRequest(BaseModel):
    keywords: Keywords

class IntroRequest(BaseModel):
    keywords: Keywords
    meta_tags: MetaTags

class ContentRequest(BaseModel):
    keywords: Keywords
    meta_tags: MetaTags
    headings: Headings
    short_intro: str = ""
    faq_content: List[FaqItem] = []
    framework: str = "HYBRID"
    location: str = "Chennai"
    brand_name: str = ""
    target_word_count: int = 1500
    keyword_density: float = 1.5
    include_cta_types: List[str] = ["course", "alsoRead", "related"]

class FaqRequest(BaseModel):
    keywords: Keywords
    meta_tags: MetaTags
    faq_framework: str = "AEO_LLMO"
    location: str = "Chennai"
    brand_name: str = ""
    faq_count: int = 20
    min_words_per_answer: int = 40
    keyword_density: float = 1.5

class ContentOnlyRequest(BaseModel):
    content: str

class LinksRequest(BaseModel):
    keywords: Keywords
    meta_tags: MetaTags
    content: str


def get_generation_helper() -> BlogGenerationHelper:
    return BlogGenerationHelper()


def _gateway_error(action: str, e: GatewayError) -> HTTPException:
    logger.error(f"Error {action}: {e}")
    return HTTPException(status_code=e.status_code, detail=f"Error {action}: {str(e)}")


@router.post("/generate/keywords")
async def generate_keywords(request: KeywordsRequest, helper: BlogGenerationHelper = Depends(get_generation_helper)):
    try:
        keywords = await helper.generate_keywords(request.primary_keywords, request.type)
    except GatewayError as e:
        raise _gateway_error("generating keywords", e)
    return {"keywords": keywords}


@router.post("/generate/meta")
async def generate_meta(request: KeywordSetRequest, helper: BlogGenerationHelper = Depends(get_generation_helper)):
    try:
        meta_tags = await helper.generate_meta(request.keywords)
    except GatewayError as e:
        raise _gateway_error("generating meta tags", e)
    return meta_tags.model_dump()


@router.post("/generate/headings")
async def generate_headings(request: KeywordSetRequest, helper: BlogGenerationHelper = Depends(get_generation_helper)):
    try:
        headings = await helper.generate_headings(request.keywords)
    except GatewayError as e:
        raise _gateway_error("generating headings", e)
    return headings.model_dump()


@router.post("/generate/intro")
async def generate_intro(request: IntroRequest, helper: BlogGenerationHelper = Depends(get_generation_helper)):
    try:
        intro = await helper.generate_intro(request.keywords, request.meta_tags)
    except GatewayError as e:
        raise _gateway_error("generating introduction", e)
    return {"intro": intro}


@router.post("/generate/content")
async def generate_content(request: ContentRequest, helper: BlogGenerationHelper = Depends(get_generation_helper)):
    try:
        return await helper.generate_content(
            keywords=request.keywords,
            meta_tags=request.meta_tags,
            headings=request.headings,
            short_intro=request.short_intro,
            faq_content=request.faq_content,
            framework=request.framework,
            location=request.location,
            brand_name=request.brand_name,
            target_word_count=request.target_word_count,
            keyword_density=request.keyword_density,
            include_cta_types=request.include_cta_types,
        )
    except GatewayError as e:
        raise _gateway_error("generating content", e)


@router.post("/generate/faq")
async def generate_faq(request: FaqRequest, helper: BlogGenerationHelper = Depends(get_generation_helper)):
    try:
        faqs = await helper.generate_faq(
            keywords=request.keywords,
            meta_tags=request.meta_tags,
            faq_framework=request.faq_framework,
            location=request.location,
            brand_name=request.brand_name,
            faq_count=request.faq_count,
            min_words_per_answer=request.min_words_per_answer,
            keyword_density=request.keyword_density,
        )
    except GatewayError as e:
        raise _gateway_error("generating FAQs", e)
    return {"faqs": [faq.model_dump(mode="json") for faq in faqs]}


@router.post("/generate/quality")
async def check_content_quality(request: ContentOnlyRequest, helper: BlogGenerationHelper = Depends(get_generation_helper)):
    try:
        analysis = await helper.check_quality(request.content)
    except GatewayError as e:
        raise _gateway_error("analyzing content", e)
    return analysis.model_dump()


@router.post("/generate/humanize")
async def humanize_content(request: ContentOnlyRequest, helper: BlogGenerationHelper = Depends(get_generation_helper)):
    try:
        humanized = await helper.humanize(request.content)
    except GatewayError as e:
        raise _gateway_error("humanizing content", e)
    return {"humanized_content": humanized}


@router.post("/generate/links")
async def generate_links(request: LinksRequest, helper: BlogGenerationHelper = Depends(get_generation_helper)):
    try:
        links = await helper.suggest_links(request.keywords, request.meta_tags, request.content)
    except GatewayError as e:
        raise _gateway_error("generating link suggestions", e)
    return {"links": [link.model_dump() for link in links]}
