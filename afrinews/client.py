"""
Async client for the newsapi.org `everything` endpoint.

Pipeline per request: cache check -> query -> fetch -> filter (image + region)
-> optional backup fetch -> cache store.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

import aiohttp

from .cache import MISS, ExpiringCache
from .classifier import AFRICA, RegionCatalog, keep_article
from .config import NewsConfig
from .exceptions import ApiError, HttpError, NetworkError, NewsAPIError
from .models import DEFAULT_CATEGORY, DEFAULT_SORT, Article
from .normalizer import to_articles
from .query import build_backup_query, build_category_query, build_search_query

logger = logging.getLogger(__name__)

# Below this many filtered articles a category fetch tries the broader backup query
BACKUP_THRESHOLD = 5
BACKUP_PAGE_SIZE = 10

SOURCES = ("bbc-news", "al-jazeera-english", "the-washington-post", "cnn", "reuters")
SOURCES_QUERY = "Africa"


class NewsClient:
    """
    Fetches regional articles for a category, a free-text search, or a fixed
    set of outlets.

    The client never cancels in-flight requests. Two overlapping calls for the
    same key both write the cache and the last one to finish wins.

    Usage:
        async with NewsClient(load_config()) as client:
            articles = await client.fetch_by_category("business")
    """

    def __init__(
        self,
        config: NewsConfig,
        *,
        cache: Optional[ExpiringCache] = None,
        catalog: RegionCatalog = AFRICA,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self.config = config
        self.cache = cache if cache is not None else ExpiringCache()
        self.catalog = catalog
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "NewsClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self.config.request_timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    # ── public operations ────────────────────────────────────────────────────

    async def fetch_by_category(
        self,
        category: str = DEFAULT_CATEGORY,
        sort_by: str = DEFAULT_SORT,
    ) -> List[Article]:
        """
        Regional articles for a category.

        Raises HttpError, ApiError or NetworkError when the primary request
        fails. Nothing is cached in that case.
        """
        cache_key = f"category_{category}_{sort_by}"
        cached = self.cache.get(cache_key)
        if cached is not MISS:
            logger.info("Using cached news", extra={"category": category})
            return list(cached)

        logger.info("Fetching news", extra={"category": category, "sort_by": sort_by})
        params = {
            "q": build_category_query(category, self.catalog),
            "pageSize": self.config.page_size,
            "sortBy": sort_by,
            "language": self.config.language,
        }
        try:
            raw = await self._get_everything(params)
        except NewsAPIError as e:
            logger.error("Category fetch failed", extra={"category": category, "error": str(e)})
            raise

        articles = self._filter(raw)
        logger.info(
            "Filtered articles",
            extra={"received": len(raw), "kept": len(articles), "category": category},
        )

        if len(articles) < BACKUP_THRESHOLD:
            logger.info("Few results, trying backup search", extra={"category": category})
            backup = await self._fetch_backup(category, sort_by)
            # Duplicates between primary and backup are kept
            articles = (articles + backup)[: self.config.page_size]

        self.cache.set(cache_key, articles)
        return list(articles)

    async def search_articles(self, query: str, sort_by: str = DEFAULT_SORT) -> List[Article]:
        """
        Regional articles matching free text.

        Blank queries return [] without a request. No backup search is made.
        """
        if not query or not query.strip():
            return []
        text = query.strip()

        cache_key = f"search_{text}_{sort_by}"
        cached = self.cache.get(cache_key)
        if cached is not MISS:
            logger.info("Using cached search", extra={"query": text})
            return list(cached)

        logger.info("Searching news", extra={"query": text, "sort_by": sort_by})
        params = {
            "q": build_search_query(text, self.catalog),
            "pageSize": self.config.page_size,
            "sortBy": sort_by,
            "language": self.config.language,
        }
        try:
            raw = await self._get_everything(params)
        except NewsAPIError as e:
            logger.error("Search failed", extra={"query": text, "error": str(e)})
            raise

        articles = self._filter(raw)
        logger.info("Filtered search results", extra={"received": len(raw), "kept": len(articles)})

        self.cache.set(cache_key, articles)
        return list(articles)

    async def fetch_from_sources(self, sort_by: str = DEFAULT_SORT) -> List[Article]:
        """Regional articles from a fixed set of outlets. Failures yield []."""
        cache_key = f"sources_{sort_by}"
        cached = self.cache.get(cache_key)
        if cached is not MISS:
            return list(cached)

        logger.info("Fetching from news sources", extra={"sources": len(SOURCES)})
        params = {
            "q": SOURCES_QUERY,
            "sources": ",".join(SOURCES),
            "pageSize": self.config.page_size,
            "sortBy": sort_by,
        }
        try:
            raw = await self._get_everything(params)
        except NewsAPIError as e:
            logger.warning("Sources fetch failed", extra={"error": str(e)})
            return []

        articles = self._filter(raw)
        self.cache.set(cache_key, articles)
        return list(articles)

    # ── internals ────────────────────────────────────────────────────────────

    async def _fetch_backup(self, category: str, sort_by: str) -> List[Article]:
        params = {
            "q": build_backup_query(category),
            "pageSize": BACKUP_PAGE_SIZE,
            "sortBy": sort_by,
            "language": self.config.language,
        }
        try:
            raw = await self._get_everything(params)
        except NewsAPIError as e:
            logger.warning("Backup search failed", extra={"category": category, "error": str(e)})
            return []
        return self._filter(raw)

    def _filter(self, raw: List[Any]) -> List[Article]:
        articles = to_articles(raw)
        if len(articles) != len(raw):
            logger.warning("Skipped malformed articles", extra={"skipped": len(raw) - len(articles)})
        return [a for a in articles if keep_article(a, self.catalog)]

    async def _get_everything(self, params: Dict[str, Any]) -> List[Any]:
        """
        One GET to `/everything`. Returns the raw `articles` list.

        Raises HttpError on non-2xx, ApiError when the payload is not "ok",
        NetworkError on transport failures.
        """
        session = self._get_session()
        query = {k: str(v) for k, v in params.items()}
        query["apiKey"] = self.config.api_key
        context = {"q": params.get("q")}

        try:
            async with session.get(self.config.everything_url, params=query) as response:
                if not 200 <= response.status < 300:
                    raise HttpError(response.status, context)
                try:
                    data = await response.json(content_type=None)
                except ValueError as e:
                    raise ApiError("Invalid JSON payload", context) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(f"Request failed: {e}", context) from e

        if not isinstance(data, dict):
            raise ApiError("Unexpected payload", context)
        if data.get("status") != "ok":
            if data.get("code"):
                context["code"] = data["code"]
            raise ApiError(data.get("message") or "API error occurred", context)

        articles = data.get("articles") or []
        if not isinstance(articles, list):
            raise ApiError("Payload has no articles list", context)
        return articles
