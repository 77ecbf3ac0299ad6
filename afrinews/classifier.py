from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .models import Article


@dataclass(frozen=True)
class RegionCatalog:
    """
    Fixed country names plus city/region keywords that mark content as regional.

    `continent` is the bare region term used by the query builder.
    `search_terms` is the short, high-signal list wrapped around free-text searches.
    """
    continent: str
    countries: Tuple[str, ...]
    keywords: Tuple[str, ...]
    search_terms: Tuple[str, ...]

    def query_countries(self, limit: int = 15) -> Tuple[str, ...]:
        return self.countries[:limit]


AFRICA = RegionCatalog(
    continent="Africa",
    countries=(
        "Nigeria", "Kenya", "South Africa", "Ghana", "Ethiopia",
        "Egypt", "Tanzania", "Uganda", "Morocco", "Algeria",
        "Sudan", "Angola", "Mozambique", "Madagascar", "Cameroon",
        "Ivory Coast", "Niger", "Burkina Faso", "Mali", "Malawi",
        "Zambia", "Somalia", "Senegal", "Chad", "Zimbabwe",
        "Rwanda", "Benin", "Burundi", "Tunisia", "Togo",
        "Sierra Leone", "Libya", "Liberia", "Mauritania", "Botswana",
        "Namibia", "Gambia", "Gabon", "Lesotho", "Guinea",
        "Equatorial Guinea", "Mauritius", "Swaziland", "Djibouti",
        "Reunion", "Comoros", "Cape Verde", "Seychelles",
    ),
    keywords=("africa", "african", "lagos", "nairobi", "johannesburg", "cairo", "accra"),
    search_terms=("Nigeria", "Kenya", '"South Africa"', "Ghana", "Egypt"),
)


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    t = text.lower()
    return any(k.lower() in t for k in keywords)


def is_regional(article: Article, catalog: RegionCatalog = AFRICA) -> bool:
    """
    Heuristic check whether an article is about the catalog's region.

    Plain substring matching over title, description and content. Known to
    produce false positives (e.g. "Chad" as a first name, "Niger" inside
    "Nigeria") and false negatives; that is accepted.
    """
    blob = article.text_blob()
    return _contains_any(blob, catalog.countries) or _contains_any(blob, catalog.keywords)


def keep_article(article: Article, catalog: RegionCatalog = AFRICA) -> bool:
    """An article is shown only when it has an image and is regional."""
    return article.has_image and is_regional(article, catalog)
