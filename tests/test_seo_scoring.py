from helper.draft_schema import Headings, Keywords, MetaTags
from helper.seo_scoring import count_keyword, count_words, has_all_headings, seo_score

KEYWORDS = Keywords(primary=["seo course", "seo classes"])
HEADINGS = Headings(h1="SEO", h2s=["Why SEO", "Course Fees"])
META = MetaTags(title="Best SEO Course")


def test_count_words():
    assert count_words("") == 0
    assert count_words("  one two\nthree\tfour ") == 4


def test_count_keyword_is_literal_and_case_insensitive():
    assert count_keyword("SEO Course, seo course and seo-course", "seo course") == 2
    assert count_keyword("c++ and C++", "c++") == 2
    assert count_keyword("anything", "") == 0


def test_has_all_headings():
    assert has_all_headings("<h2>why seo</h2><h2>Course fees</h2>", HEADINGS.h2s)
    assert not has_all_headings("<h2>Why SEO</h2>", HEADINGS.h2s)


def test_full_score():
    content = "Best SEO Course: Why SEO and Course Fees. " + "seo course " * 6
    assert seo_score(content, KEYWORDS, HEADINGS, META, target_word_count=10) == 100


def test_keyword_overuse_loses_density_points():
    content = "Best SEO Course Why SEO Course Fees " + "seo course " * 20
    assert seo_score(content, KEYWORDS, HEADINGS, META, target_word_count=10) == 75


def test_short_content_misses_word_target():
    content = "Best SEO Course Why SEO Course Fees " + "seo course " * 5
    assert seo_score(content, KEYWORDS, HEADINGS, META) == 70


def test_only_first_primary_keyword_counts():
    content = "seo classes " * 6
    assert seo_score(content, KEYWORDS, Headings(), MetaTags(), target_word_count=1000) == 45


def test_no_primary_keyword():
    assert seo_score("text", Keywords(), Headings(), MetaTags(title="Missing"), target_word_count=1) == 55
