from __future__ import annotations

from typing import Any, Dict, Iterable, List

from .exceptions import ParseError
from .models import Article, ArticleSource


def _text(entry: Dict[str, Any], key: str) -> str:
    val = entry.get(key)
    if val is None:
        return ""
    return str(val)


def _optional_text(entry: Dict[str, Any], key: str):
    val = entry.get(key)
    if val is None or val == "":
        return None
    return str(val)


def _get_source(entry: Dict[str, Any]) -> ArticleSource:
    src = entry.get("source") or {}
    if isinstance(src, dict):
        name = src.get("name")
        sid = src.get("id")
        return ArticleSource(
            name=name.strip() if isinstance(name, str) and name.strip() else "unknown",
            id=sid if isinstance(sid, str) and sid else None,
        )
    if isinstance(src, str) and src.strip():
        return ArticleSource(name=src.strip())
    return ArticleSource(name="unknown")


def to_article(entry: Any) -> Article:
    """
    Convert one raw article object from the API payload into an Article.

    Missing text fields become empty strings; missing optional fields stay None.
    Raises ParseError when the entry is not a JSON object.
    """
    if not isinstance(entry, dict):
        raise ParseError(
            "Article entry is not an object",
            {"type": type(entry).__name__},
        )

    return Article(
        title=_text(entry, "title"),
        description=_text(entry, "description"),
        url=_text(entry, "url"),
        source=_get_source(entry),
        published_at=_text(entry, "publishedAt"),
        content=_optional_text(entry, "content"),
        url_to_image=_optional_text(entry, "urlToImage"),
        author=_optional_text(entry, "author"),
    )


def to_articles(entries: Iterable[Any]) -> List[Article]:
    """Convert entries, skipping the ones that cannot be read."""
    out: List[Article] = []
    for e in entries:
        try:
            out.append(to_article(e))
        except ParseError:
            # Skip malformed rows
            continue
    return out
