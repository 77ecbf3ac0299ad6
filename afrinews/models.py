from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_CATEGORY = "general"
CATEGORIES = (
    "general",
    "business",
    "technology",
    "entertainment",
    "health",
    "science",
    "sports",
)

DEFAULT_SORT = "publishedAt"
SORT_OPTIONS = ("publishedAt", "relevancy", "popularity")


@dataclass(frozen=True)
class ArticleSource:
    name: str
    id: Optional[str] = None


@dataclass(frozen=True)
class Article:
    """
    A single article as returned by the `everything` endpoint.

    Immutable once received; an article has no identity beyond its URL.
    """
    title: str
    description: str
    url: str
    source: ArticleSource
    published_at: str
    content: Optional[str] = None
    url_to_image: Optional[str] = None
    author: Optional[str] = None

    @property
    def has_image(self) -> bool:
        return bool(self.url_to_image)

    def text_blob(self) -> str:
        """Lowercased title + description + content, used for region matching."""
        return f"{self.title} {self.description} {self.content or ''}".lower()
