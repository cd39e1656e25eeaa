import pytest
from tortoise import Tortoise

from helper.draft_schema import Draft, FaqItem, Headings, Keywords, MetaTags, SubHeading
from helper.tortoise_config import MODEL_MODULES
from tests.fakes import FakeDraftStore


@pytest.fixture
def store():
    return FakeDraftStore()


@pytest.fixture
def sample_draft():
    return Draft(
        user_id="user-1",
        keywords=Keywords(primary=["seo course"], secondary=["seo training"], semantic=[], lsi=["search ranking"]),
        meta_tags=MetaTags(title="Best SEO Course", description="Learn SEO fast", slug="best-seo-course"),
        headings=Headings(
            h1="Best SEO Course in Chennai",
            h2s=["Why SEO", "Course Outline"],
            h3s=[SubHeading(h2_index=1, text="Modules")],
        ),
        short_intro="An intro.",
        content="Some content.",
        faq_content=[FaqItem(question="Is it online?", answer="Yes.")],
    )


@pytest.fixture
async def db():
    await Tortoise.init(db_url="sqlite://:memory:", modules={"models": MODEL_MODULES})
    await Tortoise.generate_schemas()
    yield
    await Tortoise.close_connections()
