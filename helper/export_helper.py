from io import BytesIO
from typing import List

from docx import Document

from helper.draft_schema import FaqItem, MetaTags

MARKDOWN_MEDIA_TYPE = "text/markdown"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def export_filename(meta_tags: MetaTags, extension: str) -> str:
    return f"{meta_tags.slug or 'blog-post'}.{extension}"


def to_markdown(meta_tags: MetaTags, short_intro: str, content: str, faq_content: List[FaqItem]) -> str:
    markdown = (
        f"# {meta_tags.title}\n\n"
        f"**Meta Description:** {meta_tags.description}\n\n"
        f"**URL Slug:** {meta_tags.slug}\n\n"
        f"## Short Intro\n\n{short_intro}\n\n"
        f"## Full Content\n\n{content}"
    )
    if faq_content:
        faqs = "\n\n".join(
            f"### {i}. {faq.question}\n\n{faq.answer}" for i, faq in enumerate(faq_content, start=1)
        )
        markdown += f"\n\n## Frequently Asked Questions\n\n{faqs}"
    return markdown


def _labelled(doc: Document, label: str, value: str) -> None:
    paragraph = doc.add_paragraph()
    paragraph.add_run(label).bold = True
    paragraph.add_run(value)


def to_docx(meta_tags: MetaTags, short_intro: str, content: str, faq_content: List[FaqItem]) -> bytes:
    doc = Document()
    doc.add_heading(meta_tags.title, level=1)
    _labelled(doc, "Meta Description: ", meta_tags.description)
    _labelled(doc, "URL Slug: ", meta_tags.slug)
    doc.add_paragraph("")
    doc.add_heading("Short Introduction", level=2)
    doc.add_paragraph(short_intro)
    doc.add_paragraph("")
    doc.add_heading("Full Content", level=2)

    for line in content.split("\n"):
        if line.startswith("### "):
            doc.add_heading(line[4:], level=3)
        elif line.startswith("## "):
            doc.add_heading(line[3:], level=2)
        elif line.startswith("# "):
            doc.add_heading(line[2:], level=1)
        else:
            doc.add_paragraph(line if line.strip() else "")

    if faq_content:
        doc.add_paragraph("")
        doc.add_heading("Frequently Asked Questions", level=2)
        for i, faq in enumerate(faq_content, start=1):
            doc.add_heading(f"{i}. {faq.question}", level=3)
            doc.add_paragraph(faq.answer)
            doc.add_paragraph("")

    buffer = BytesIO()
    doc.save(buffer)
    return buffer.getvalue()
