import re
from typing import List

from helper.draft_schema import Headings, Keywords, MetaTags


def count_words(text: str) -> int:
    return len(text.split()) if text else 0


def count_keyword(text: str, keyword: str) -> int:
    if not keyword:
        return 0
    return len(re.findall(re.escape(keyword), text, flags=re.IGNORECASE))


def has_all_headings(text: str, h2s: List[str]) -> bool:
    lowered = text.lower()
    return all(h2.lower() in lowered for h2 in h2s)


def seo_score(content: str, keywords: Keywords, headings: Headings, meta_tags: MetaTags,
              target_word_count: int = 1500) -> int:
    """
    Post-hoc score out of 100:
    30 for reaching the word target, 25 for 5-15 uses of the first primary keyword,
    25 when every H2 appears in the text and 20 when the meta title does.
    """
    primary = keywords.primary[0] if keywords.primary else ""
    score = 0
    if count_words(content) >= target_word_count:
        score += 30
    if 5 <= count_keyword(content, primary) <= 15:
        score += 25
    if has_all_headings(content, headings.h2s):
        score += 25
    if meta_tags.title in content:
        score += 20
    return score
