from __future__ import annotations

from typing import Optional

from .classifier import AFRICA, RegionCatalog
from .models import DEFAULT_CATEGORY

QUERY_COUNTRY_LIMIT = 15


def build_category_query(category: Optional[str] = None, catalog: RegionCatalog = AFRICA) -> str:
    """
    Query for a category page.

    "(Nigeria OR Kenya OR ...) AND business" for a specific category,
    "Africa OR Nigeria OR Kenya OR ..." for the default one.
    """
    countries = " OR ".join(catalog.query_countries(QUERY_COUNTRY_LIMIT))
    if category and category != DEFAULT_CATEGORY:
        return f"({countries}) AND {category}"
    # Continent keyword is always added for the default category
    return f"Africa OR {countries}"


def build_search_query(user_text: str, catalog: RegionCatalog = AFRICA) -> str:
    terms = " OR ".join((catalog.continent,) + tuple(catalog.search_terms))
    return f"({terms}) AND {user_text}"


def build_backup_query(category: Optional[str] = None) -> str:
    """Broader fallback query used when the primary search yields too little."""
    if not category or category == DEFAULT_CATEGORY:
        return "Africa news"
    return f"Africa {category}"
