"""
Tests for afrinews.classifier and afrinews.query

Pure unit tests: no network.
"""
import pytest

from afrinews.classifier import AFRICA, RegionCatalog, is_regional, keep_article
from afrinews.models import Article, ArticleSource
from afrinews.query import build_backup_query, build_category_query, build_search_query


def article(title="", description="", content=None, image="https://img.example.com/x.jpg"):
    return Article(
        title=title,
        description=description,
        url="https://news.example.com/x",
        source=ArticleSource(name="Test"),
        published_at="2024-05-01T10:30:00Z",
        content=content,
        url_to_image=image,
    )


class TestIsRegional:
    @pytest.mark.parametrize("title", ["Nigeria votes", "NIGERIA votes", "elections in nigeria"])
    def test_country_match_is_case_insensitive(self, title):
        assert is_regional(article(title=title))

    def test_city_keyword(self):
        assert is_regional(article(title="Protests erupt in Lagos"))

    def test_unrelated_text(self):
        assert not is_regional(article(title="Local council election in Ohio"))

    def test_match_in_description(self):
        assert is_regional(article(title="Markets rally", description="Stocks up in Nairobi"))

    def test_match_in_content_only(self):
        assert is_regional(article(title="Markets", content="... the African Union said ..."))

    def test_missing_content_is_fine(self):
        assert not is_regional(article(title="Weather", description="Sunny", content=None))

    def test_substring_false_positive_is_accepted(self):
        # "Chad" the first name still counts
        assert is_regional(article(title="Chad Smith wins golf title"))

    def test_custom_catalog(self):
        catalog = RegionCatalog(continent="Nowhere", countries=("Atlantis",), keywords=(), search_terms=())
        assert is_regional(article(title="News from Atlantis"), catalog)
        assert not is_regional(article(title="News from Nigeria"), catalog)


class TestKeepArticle:
    def test_requires_image(self):
        assert not keep_article(article(title="Kenya news", image=None))

    def test_requires_region(self):
        assert not keep_article(article(title="Ohio news"))

    def test_image_and_region(self):
        assert keep_article(article(title="Kenya news"))


class TestQueries:
    def test_category_query(self):
        q = build_category_query("business")
        assert "AND business" in q
        assert "Nigeria" in q
        assert q.startswith("(Nigeria OR Kenya")

    def test_category_query_uses_first_fifteen_countries(self):
        q = build_category_query("sports")
        assert "Cameroon" in q  # 15th
        assert "Ivory Coast" not in q  # 16th

    def test_general_query(self):
        q = build_category_query("general")
        assert "Africa OR" in q
        assert "AND" not in q

    def test_no_category_uses_general_form(self):
        assert build_category_query(None).startswith("Africa OR Nigeria")

    def test_search_query(self):
        q = build_search_query("elections")
        assert q == '(Africa OR Nigeria OR Kenya OR "South Africa" OR Ghana OR Egypt) AND elections'

    def test_backup_query(self):
        assert build_backup_query("general") == "Africa news"
        assert build_backup_query("health") == "Africa health"

    def test_catalog_has_expected_shape(self):
        assert len(AFRICA.countries) == 48
        assert len(AFRICA.search_terms) == 5
        assert "africa" in AFRICA.keywords
