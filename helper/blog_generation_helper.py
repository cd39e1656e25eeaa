import json
import re
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError

from helper import prompts_helper as prompts
from helper.ai_gateway import AIGateway
from helper.draft_schema import FaqItem, Headings, Keywords, MetaTags
from helper.exceptions import GatewayResponseError
from helper.log_helper import ai_dbg
from helper.seo_scoring import seo_score


class FaqIntent(str, Enum):
    INFORMATIONAL = "Informational"
    NAVIGATIONAL = "Navigational"
    TRANSACTIONAL = "Transactional"


class FaqEntry(BaseModel):
    intent: FaqIntent
    question: str = Field(description="Core question - NO brand name, includes location and superlatives")
    conversational_variation: str = Field(description="Conversational variant")
    longtail_variation: str = Field(description="Long-tail variant")
    answer: str = Field(description="Answer following the formula with brand, location, superlatives, tech, experts, outcomes")
    named_entities: List[str]
    conceptual_entities: List[str]


class GenerateFaqs(BaseModel):
    """Generate optimized FAQs"""
    faqs: List[FaqEntry]


class AnalyzeContentQuality(BaseModel):
    """Analyze content quality metrics"""
    grammar_score: float = Field(description="Grammar quality score 0-100")
    spelling_issues: List[str] = Field(description="List of spelling/grammar issues found")
    ai_detection_score: float = Field(description="How AI-like the content is (0-100, higher = more AI-like)")
    humanization_suggestions: List[str] = Field(description="Suggestions to make content more human-like")
    overall_quality: float = Field(description="Overall content quality score 0-100")


class LinkSuggestion(BaseModel):
    anchor: str
    url: str
    type: str


def strip_code_fences(text: str) -> str:
    # matches ```json ... ``` or ``` ... ```
    match = re.search(r"```(?:json)?\s*([\s\S]*?)\s*```", text)
    if match:
        return match.group(1).strip()
    return text.strip()


def parse_json(text: str, pattern: Optional[str] = None) -> Any:
    """
    Parse the JSON the model returned. With ``pattern`` the first match
    (e.g. the first ``{...}`` block) is parsed instead of the whole text.
    """
    cleaned = strip_code_fences(text)
    if pattern:
        match = re.search(pattern, cleaned)
        if match:
            cleaned = match.group(0)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        ai_dbg("gateway.parse_error", {"raw": text})
        raise GatewayResponseError(f"Gateway response is not valid JSON: {e}") from e


class BlogGenerationHelper:
    def __init__(self, gateway: AIGateway = None):
        self.gateway = gateway or AIGateway()

    async def generate_keywords(self, primary_keywords: List[str], keyword_type: str) -> List[str]:
        raw = await self.gateway.complete(
            "generate keywords", prompts.keywords_prompt(primary_keywords, keyword_type)
        )
        keywords = parse_json(raw)
        if not isinstance(keywords, list):
            raise GatewayResponseError("Expected a JSON array of keywords")
        return [str(k) for k in keywords]

    async def generate_meta(self, keywords: Keywords) -> MetaTags:
        raw = await self.gateway.complete(
            "generate meta tags", prompts.meta_prompt(keywords), system=prompts.META_SYSTEM
        )
        return self._validate(MetaTags, parse_json(raw, r"\{[\s\S]*\}"))

    async def generate_headings(self, keywords: Keywords) -> Headings:
        raw = await self.gateway.complete(
            "generate headings", prompts.headings_prompt(keywords), system=prompts.HEADINGS_SYSTEM
        )
        return self._validate(Headings, parse_json(raw, r"\{[\s\S]*\}"))

    async def generate_intro(self, keywords: Keywords, meta_tags: MetaTags) -> str:
        return await self.gateway.complete(
            "generate introduction", prompts.intro_prompt(keywords, meta_tags), system=prompts.INTRO_SYSTEM
        )

    async def generate_content(
        self,
        keywords: Keywords,
        meta_tags: MetaTags,
        headings: Headings,
        short_intro: str = "",
        faq_content: List[FaqItem] = None,
        framework: str = "HYBRID",
        location: str = "Chennai",
        brand_name: str = "",
        target_word_count: int = 1500,
        keyword_density: float = 1.5,
        include_cta_types: List[str] = None,
    ) -> dict:
        faq_content = faq_content or []
        include_cta_types = include_cta_types if include_cta_types is not None else ["course", "alsoRead", "related"]
        system = prompts.content_system(
            framework, location, brand_name, target_word_count, keyword_density, include_cta_types
        )
        user = prompts.content_prompt(
            keywords, meta_tags, headings, short_intro, faq_content, framework, location,
            brand_name, target_word_count, keyword_density, include_cta_types,
        )
        content = await self.gateway.complete("generate content", user, system=system)
        return {
            "content": content,
            "seo_score": seo_score(content, keywords, headings, meta_tags, target_word_count),
        }

    async def generate_faq(
        self,
        keywords: Keywords,
        meta_tags: MetaTags,
        faq_framework: str = "AEO_LLMO",
        location: str = "Chennai",
        brand_name: str = "",
        faq_count: int = 20,
        min_words_per_answer: int = 40,
        keyword_density: float = 1.5,
    ) -> List[FaqEntry]:
        system = prompts.faq_system(
            faq_framework, location, brand_name, faq_count, min_words_per_answer, keyword_density
        )
        user = prompts.faq_prompt(
            keywords, meta_tags, faq_framework, location, brand_name, faq_count,
            min_words_per_answer, keyword_density,
        )
        result = await self.gateway.structured("generate FAQs", user, GenerateFaqs, system=system)
        return result.faqs

    async def check_quality(self, content: str) -> AnalyzeContentQuality:
        return await self.gateway.structured(
            "analyze content quality", prompts.quality_prompt(content), AnalyzeContentQuality,
            system=prompts.QUALITY_SYSTEM,
        )

    async def humanize(self, content: str) -> str:
        return await self.gateway.complete(
            "humanize content", prompts.humanize_prompt(content), system=prompts.HUMANIZE_SYSTEM
        )

    async def suggest_links(self, keywords: Keywords, meta_tags: MetaTags, content: str) -> List[LinkSuggestion]:
        raw = await self.gateway.complete(
            "generate link suggestions", prompts.links_prompt(keywords, meta_tags, content)
        )
        links = parse_json(raw)
        if not isinstance(links, list):
            raise GatewayResponseError("Expected a JSON array of links")
        return [self._validate(LinkSuggestion, link) for link in links]

    @staticmethod
    def _validate(model, data):
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise GatewayResponseError(f"Unexpected {model.__name__} shape from gateway: {e}") from e
