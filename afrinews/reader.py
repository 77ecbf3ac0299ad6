from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .client import NewsClient
from .exceptions import NewsAPIError
from .models import DEFAULT_CATEGORY, DEFAULT_SORT, SORT_OPTIONS, Article

logger = logging.getLogger(__name__)


@dataclass
class ReaderResult:
    """What a front end should show: articles, or a message, or both empty."""
    articles: List[Article] = field(default_factory=list)
    message: Optional[str] = None
    error: bool = False


class NewsReader:
    """
    View state of one reader: active category, sort order and search mode.

    Front ends call the actions below and render the returned ReaderResult.
    Primary fetch errors are logged and turned into a message, never raised.
    """

    def __init__(
        self,
        client: NewsClient,
        *,
        category: str = DEFAULT_CATEGORY,
        sort_by: str = DEFAULT_SORT,
    ) -> None:
        self.client = client
        self.category = category
        self.sort_by = sort_by
        self.search_mode = False
        self.query = ""

    async def switch_category(self, category: str) -> ReaderResult:
        self.category = category
        self.search_mode = False
        self.query = ""
        return await self.load_articles()

    async def load_articles(self) -> ReaderResult:
        try:
            articles = await self.client.fetch_by_category(self.category, self.sort_by)
        except NewsAPIError as e:
            logger.error("Load error", extra={"category": self.category, "error": str(e)})
            return ReaderResult(
                message="Failed to load articles. Please check your connection and try again.",
                error=True,
            )
        if not articles:
            return ReaderResult(message="No African news found for this category. Try another one!")
        return ReaderResult(articles=articles)

    async def search(self, text: Optional[str]) -> ReaderResult:
        query = (text or "").strip()
        if not query:
            return ReaderResult(message="Please enter something to search for!", error=True)
        self.search_mode = True
        self.query = query
        return await self._perform_search()

    async def _perform_search(self) -> ReaderResult:
        try:
            articles = await self.client.search_articles(self.query, self.sort_by)
        except NewsAPIError as e:
            logger.error("Search error", extra={"query": self.query, "error": str(e)})
            return ReaderResult(message="Search failed. Please try again.", error=True)
        if not articles:
            return ReaderResult(
                message=f'No African news found for "{self.query}". Try different keywords!'
            )
        return ReaderResult(articles=articles)

    async def change_sort(self, sort_by: str) -> ReaderResult:
        """Change the sort order and reload whatever is currently shown."""
        if sort_by not in SORT_OPTIONS:
            raise ValueError(f"Unknown sort option: {sort_by!r} (expected one of {', '.join(SORT_OPTIONS)})")
        self.sort_by = sort_by
        return await self.reload()

    async def reload(self) -> ReaderResult:
        if self.search_mode:
            return await self._perform_search()
        return await self.load_articles()

    async def load_sources(self) -> ReaderResult:
        articles = await self.client.fetch_from_sources(self.sort_by)
        if not articles:
            return ReaderResult(message="No articles available from the featured sources.")
        return ReaderResult(articles=articles)

    def clear_cache(self) -> None:
        self.client.cache.clear()
