from typing import List

from helper.draft_schema import FaqItem, Headings, Keywords, MetaTags

KEYWORD_TYPE_HINTS = {
    "secondary": "Secondary keywords should be supporting keywords that expand on the primary keywords.",
    "semantic": "Semantic keywords should be contextually relevant terms.",
    "lsi": "LSI keywords should be terms that search engines associate with this topic.",
}

CONTENT_FRAMEWORKS = {
    "SAGE": {
        "name": "SAGE Framework",
        "formula": "(Structure × 0.3) + (Authority × 0.25) + (Guidance × 0.25) + (Engagement × 0.2)",
        "rules": (
            "- Structure: semantic HTML hierarchy (h2, h3, p, ul) with a clear flow.\n"
            "- Authority: industry data, expert insights, credible sources.\n"
            "- Guidance: step-by-step instructions and actionable tips.\n"
            "- Engagement: analogies, examples, relatable scenarios."
        ),
    },
    "READ": {
        "name": "READ Framework",
        "formula": "(Rhythm × 0.25) + (Engagement × 0.3) + (Accessibility × 0.25) + (Direction × 0.2)",
        "rules": (
            "- Rhythm: mix 5–10 word and 20–25 word sentences.\n"
            "- Engagement: active voice, conversational \"you\" tone.\n"
            "- Accessibility: simple language, paragraphs of 3–4 lines at most.\n"
            "- Direction: clear transitions and logical flow."
        ),
    },
    "CRAFT": {
        "name": "C.R.A.F.T Framework",
        "formula": "(Clarity × 0.25) + (Relevance × 0.25) + (Accuracy × 0.2) + (Factual × 0.2) + (Terseness × 0.1)",
        "rules": (
            "- Clear: simple, direct language.\n"
            "- Relevant: stay on topic and answer the search intent.\n"
            "- Accurate: up-to-date data.\n"
            "- Factual: evidence-based statements.\n"
            "- Terse: no fluff."
        ),
    },
    "HUMAIZE": {
        "name": "HUMAIZE Framework",
        "formula": "(Human-tone × 0.35) + (Natural-flow × 0.35) + (Context × 0.3)",
        "rules": (
            "- Conversational, warm and relatable.\n"
            "- Varied sentence structures and real-world examples.\n"
            "- Knowledgeable-friend tone with natural transitions.\n"
            "- Keep AI detection under 20%."
        ),
    },
    "HYBRID": {
        "name": "Hybrid Multi-Framework",
        "formula": "(SAGE × 0.3) + (READ × 0.25) + (CRAFT × 0.25) + (HUMAIZE × 0.2)",
        "rules": "Combine SAGE (structure) + READ (readability) + C.R.A.F.T (clarity) + HUMAIZE (human tone).",
    },
}

FAQ_FRAMEWORKS = {
    "AEO_LLMO": {
        "name": "AEO & LLMO Framework",
        "formula": "(AEO × 0.5) + (LLMO × 0.3) + (Entity-Rich × 0.2)",
    },
    "CRAFT": {
        "name": "C.R.A.F.T Framework",
        "formula": "(Clear × 0.25) + (Relevant × 0.25) + (Accurate × 0.2) + (Factual × 0.2) + (Terse × 0.1)",
    },
    "EEAT": {
        "name": "E-E-A-T Framework",
        "formula": "(Experience × 0.3) + (Expertise × 0.3) + (Authority × 0.2) + (Trust × 0.2)",
    },
    "HYBRID": {
        "name": "Hybrid FAQ Framework",
        "formula": "(AEO_LLMO × 0.4) + (C.R.A.F.T × 0.35) + (E-E-A-T × 0.25)",
    },
}

QUESTION_WORDS = [
    "Why", "When", "What", "Is", "Are", "They", "How", "Does", "Which", "In", "Can",
    "Will", "Should", "Could", "Would", "Do", "Did", "Has", "Have", "Where", "Who", "Whose",
]

SUPERLATIVES = [
    "best", "top", "leading", "recognized", "demand", "most", "premier", "ultimate",
    "finest", "superior", "excellent", "outstanding", "exceptional", "renowned", "trusted",
]

CTA_HINTS = {
    "course": "- Course CTA: 1–2 subtle mentions",
    "alsoRead": "- Also Read: 1–2 internal links",
    "related": "- Related Content: suggest topics",
}


def _keyword_block(keywords: Keywords) -> str:
    return (
        f"Primary: {', '.join(keywords.primary)}\n"
        f"Secondary: {', '.join(keywords.secondary)}\n"
        f"Semantic: {', '.join(keywords.semantic)}\n"
        f"LSI: {', '.join(keywords.lsi)}"
    )


def outline_text(headings: Headings) -> str:
    """H2 list with each H3 indented under its parent."""
    sections = []
    for index, h2 in enumerate(headings.h2s):
        h3s = "\n".join(f"  - {h3.text}" for h3 in headings.children_of(index))
        sections.append(f"{h2}\n{h3s}" if h3s else h2)
    return "\n\n".join(sections)


def keywords_prompt(primary_keywords: List[str], keyword_type: str) -> str:
    return (
        f"Generate exactly 8 {keyword_type} keywords for the following primary keywords: "
        f"{', '.join(primary_keywords)}\n\n"
        f"{KEYWORD_TYPE_HINTS.get(keyword_type, '')}\n\n"
        'Return ONLY a JSON array of 8 keyword strings, nothing else. Example: ["keyword1", "keyword2", ...]'
    )


META_SYSTEM = "You are an expert SEO specialist. Generate optimized meta tags for blog posts."

def meta_prompt(keywords: Keywords) -> str:
    return f"""Generate meta tags for a blog post with these keywords:
Primary: {', '.join(keywords.primary)}
Secondary: {', '.join(keywords.secondary)}

Return ONLY a JSON object with:
{{
  "title": "SEO-optimized title (max 57 characters)",
  "description": "Compelling meta description (max 157 characters)",
  "slug": "url-friendly-slug"
}}"""


HEADINGS_SYSTEM = "You are an expert content strategist. Create SEO-optimized heading structures for blog posts."

def headings_prompt(keywords: Keywords) -> str:
    return f"""Create a heading structure for a blog post about these keywords: {', '.join(keywords.all())}

Return ONLY a JSON object with:
{{
  "h1": "Main article title",
  "h2s": ["10+ H2 section headings"],
  "h3s": [{{"h2Index": 0, "text": "H3 subheading"}}]
}}

Requirements:
- Minimum 10 H2 headings
- At least 5 H3 subheadings total, distributed across different H2s
- Integrate keywords naturally"""


INTRO_SYSTEM = """You are an expert SEO content writer specializing in E-E-A-T optimization and AEO (Answer Engine Optimization).

Create introductions optimized for:
- Featured snippets in Google
- Answer Engine citations (Perplexity, Bing Copilot)
- Generative Engine recommendations (ChatGPT, Gemini)

Format with HTML only:
- Use <p> for paragraphs
- Use <strong> for emphasis (never markdown)
- Write naturally to pass AI detection"""

def intro_prompt(keywords: Keywords, meta_tags: MetaTags) -> str:
    return f"""Write a 100-word introduction for: "{meta_tags.title}"

Primary keywords: {', '.join(keywords.primary)}

Requirements:
- Exactly 100 words
- Include primary keyword in first sentence
- Hook readers with value proposition
- Signal expertise and experience
- Answer the main question immediately
- Use HTML <p> and <strong> tags
- Natural, human-like writing"""


def content_system(framework: str, location: str, brand_name: str, target_word_count: int,
                   keyword_density: float, include_cta_types: List[str]) -> str:
    selected = CONTENT_FRAMEWORKS.get(framework, CONTENT_FRAMEWORKS["HYBRID"])
    brand_rule = (
        f'Mention **{brand_name}** 2–4 times per section naturally. '
        f'Use variants: "{brand_name}", "our platform", "the tool".'
        if brand_name else ""
    )
    cta_rules = "\n".join(CTA_HINTS[c] for c in include_cta_types if c in CTA_HINTS)
    return f"""You are an elite SEO + AEO + GEO + LLMO content strategist.

Generate comprehensive blog content using the **{selected['name']}** (Formula: {selected['formula']}).

## FRAMEWORK APPLICATION:
{selected['rules']}

## CRITICAL REQUIREMENTS:

### 1. TL;DR (MANDATORY)
<p class="tldr"><strong>TL;DR:</strong> [2–3 sentences, include primary keyword]</p>

### 2. Word Count: {target_word_count}+ words
- Introduction: 150–200 words
- Body sections: 200–300 words each
- Conclusion: 100–150 words + CTA

### 3. Keyword Integration ({location}-Based Intent)
- Primary: {keyword_density}% density, use in H1, first 100 words, H2s, conclusion
- Secondary/Semantic/LSI: natural throughout
- Location: mention "{location}" 3–5 times naturally
- NO keyword stuffing

### 4. Brand Name: {brand_name or 'N/A'}
{brand_rule}

### 5. Call-to-Action Integration
{cta_rules}
- Conclusion: strong action-oriented CTA

### 6. HTML Formatting (MANDATORY)
- Use <p>, <h2>, <h3>, <strong>, <em>, <ul>, <ol>, <li>
- Use <strong> not <b>, <em> not <i>
- No inline styles except "tldr"

## HUMANIZATION:
- Contractions, varied sentence length, concrete numbers
- Specific examples, rhetorical questions, metaphors
- Remove "in today's digital landscape\""""


def content_prompt(keywords: Keywords, meta_tags: MetaTags, headings: Headings, short_intro: str,
                   faq_content: List[FaqItem], framework: str, location: str, brand_name: str,
                   target_word_count: int, keyword_density: float, include_cta_types: List[str]) -> str:
    selected = CONTENT_FRAMEWORKS.get(framework, CONTENT_FRAMEWORKS["HYBRID"])
    faq_block = ""
    if faq_content:
        faq_block = "\n**FAQ (integrate at end):**\n" + "\n".join(
            f"<h3>{faq.question}</h3>\n<p>{faq.answer}</p>" for faq in faq_content
        )
    return f"""Generate a {selected['name']}-optimized blog post:

**TOPIC:** {meta_tags.title}
**LOCATION INTENT:** {location}
**BRAND:** {brand_name or 'N/A'}
**TARGET WORD COUNT:** {target_word_count}+
**KEYWORD DENSITY:** {keyword_density}%

**INTRODUCTION (expand):** {short_intro}

**KEYWORDS:**
{_keyword_block(keywords)}

**HEADINGS:**
{outline_text(headings)}
{faq_block}

**VALIDATION CHECKLIST:**
- ≥{target_word_count} words
- TL;DR included
- {keyword_density}% keyword density
- "{location}" mentioned 3–5 times
- CTAs: {', '.join(include_cta_types)}
- All headings used
- Semantic HTML only

**RETURN ONLY HTML CONTENT. NO EXPLANATIONS.**"""


def faq_system(faq_framework: str, location: str, brand_name: str, faq_count: int,
               min_words_per_answer: int, keyword_density: float) -> str:
    selected = FAQ_FRAMEWORKS.get(faq_framework, FAQ_FRAMEWORKS["AEO_LLMO"])
    brand = brand_name or "[Brand]"
    return f"""You are an elite FAQ Content Strategist specializing in {selected['name']}.

**FRAMEWORK:** {selected['name']}
**FORMULA:** {selected['formula']}

### 1. FAQ COUNT & STRUCTURE
- Generate exactly {faq_count} FAQs
- Cover all 3 intent types: Informational, Navigational, Transactional
- Use question starter words: {', '.join(QUESTION_WORDS)}

### 2. QUESTION RULES
- NEVER mention the brand name in the question
- ALWAYS use {location}-based long-tail keywords
- Use superlative power words: {', '.join(SUPERLATIVES)}
- Format: [Question Word] + [Superlative] + [Primary Keyword] + [Local Intent {location}]

### 3. ANSWER FORMULA
[{brand}] + [Superlative] + [Primary Keyword + {location}] + [Unique Value] + [Authority] + [Tech Stack / LSI Skills] + [Quantifiable Outcome]

### 4. ANSWER REQUIREMENTS
- Minimum {min_words_per_answer} words per answer
- Target keyword density: {keyword_density}% across all answers
- Mention "{location}" in every answer
- ALWAYS start the answer with "{brand}"
- Self-contained, entity-rich, voice-search friendly answers

### 5. QUERY VARIATIONS
Each FAQ has a core question, a conversational variation and a long-tail variation.

### 6. ENTITY EXTRACTION
List named entities (brand, tools, experts, platforms) and conceptual entities for each answer."""


def faq_prompt(keywords: Keywords, meta_tags: MetaTags, faq_framework: str, location: str,
               brand_name: str, faq_count: int, min_words_per_answer: int, keyword_density: float) -> str:
    selected = FAQ_FRAMEWORKS.get(faq_framework, FAQ_FRAMEWORKS["AEO_LLMO"])
    return f"""Generate {faq_count} {selected['name']}-optimized FAQs:

**TOPIC:** {meta_tags.title}
**DESCRIPTION:** {meta_tags.description}
**LOCATION:** {location}
**BRAND NAME:** {brand_name or 'Not provided - use placeholder'}
**FAQ COUNT:** {faq_count}
**MIN WORDS/ANSWER:** {min_words_per_answer}
**KEYWORD DENSITY TARGET:** {keyword_density}%

**KEYWORDS:**
{_keyword_block(keywords)}

Generate structured FAQ data now."""


QUALITY_SYSTEM = """You are a content quality analyzer. Analyze content for:
1. Grammar and spelling errors
2. AI content detection (how AI-like the content sounds)
3. Provide humanization suggestions

Return structured analysis."""

def quality_prompt(content: str) -> str:
    return f"""Analyze this content and provide quality scores:

{content}

Scores are 0-100. ai_detection_score: 100 = very AI-like, 0 = very human."""


HUMANIZE_SYSTEM = """You are an SEO, AEO & GEO content strategist.
Your task is to humanize AI-generated text using the HUMAIZE Framework so it:
- Feels authentic, emotional, and conversational
- Maintains factual accuracy and SEO entities
- Keeps clear intent alignment and natural flow

H = Human Tone + Storytelling
U = Unique POV + Emotion
M = Meaningful Context (Entity + EEAT)
A = Active Voice + Simplicity
I = Intent Alignment (Search + Conversational)
Z = Zest (Voice, Rhythm, and Flow)
E = Engagement Triggers (CTA, Empathy, Relatability)

CRITICAL FORMATTING RULES:
- Preserve ALL HTML tags (<h2>, <h3>, <p>, <strong>, <mark>, <ul>, <li>, <a>)
- NEVER use markdown symbols (**, *, #, -, etc.)
- Keep all links, keywords, facts and statistics intact

Return ONLY the humanized HTML content."""

def humanize_prompt(content: str) -> str:
    return f"""Humanize this content using the HUMAIZE Framework:

{content}

Keep ALL HTML formatting, facts and keywords. Target AI detection score < 30.
Return ONLY the humanized HTML content without any explanations or notes."""


def links_prompt(keywords: Keywords, meta_tags: MetaTags, content: str) -> str:
    return f"""Based on this blog content about "{meta_tags.title}", suggest 8 relevant links (4 internal and 4 external) with anchor text.

Content preview: {content[:1000]}...

Primary keywords: {', '.join(keywords.primary)}

Return ONLY a JSON array with this structure:
[
  {{
    "anchor": "descriptive anchor text",
    "url": "https://example.com/relevant-page",
    "type": "internal" or "external"
  }}
]

For internal links, suggest relevant topic URLs (use placeholder URLs like /blog/related-topic).
For external links, suggest authoritative sources related to the topic."""
