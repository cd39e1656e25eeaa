from typing import List
from pydantic import BaseModel, ConfigDict, Field


class Keywords(BaseModel):
    primary: List[str] = Field(default_factory=list)
    secondary: List[str] = Field(default_factory=list)
    semantic: List[str] = Field(default_factory=list)
    lsi: List[str] = Field(default_factory=list)

    def all(self) -> List[str]:
        return [*self.primary, *self.secondary, *self.semantic, *self.lsi]


class MetaTags(BaseModel):
    title: str = ""
    description: str = ""
    slug: str = ""


class SubHeading(BaseModel):
    # the gateway and older clients send camelCase "h2Index"
    model_config = ConfigDict(populate_by_name=True)

    h2_index: int = Field(alias="h2Index")
    text: str


class Headings(BaseModel):
    h1: str = ""
    h2s: List[str] = Field(default_factory=list)
    h3s: List[SubHeading] = Field(default_factory=list)

    def children_of(self, h2_index: int) -> List[SubHeading]:
        return [h3 for h3 in self.h3s if h3.h2_index == h2_index]


class FaqItem(BaseModel):
    question: str
    answer: str


class Draft(BaseModel):
    """Working state of one in-progress blog post for a user."""
    user_id: str
    keywords: Keywords = Field(default_factory=Keywords)
    meta_tags: MetaTags = Field(default_factory=MetaTags)
    headings: Headings = Field(default_factory=Headings)
    short_intro: str = ""
    content: str = ""
    faq_content: List[FaqItem] = Field(default_factory=list)

    def to_record(self) -> dict:
        """Column values for the blog_drafts row, without the owning user."""
        return self.model_dump(exclude={"user_id"})
