"""
afrinews

A small async client that fetches news from newsapi.org and keeps only articles about Africa.

Core ideas:
- Input: a category, a free-text query, or a fixed set of outlets
- Process: cache check → build query → fetch → filter (has image + regional) → backup fetch if sparse → cache
- Output: List[Article]

Example
-------
import asyncio

from afrinews import NewsClient, load_config

async def main():
    async with NewsClient(load_config()) as client:
        for article in await client.fetch_by_category("business", "publishedAt"):
            print(article.published_at, article.source.name, article.title)

asyncio.run(main())
"""
from .models import Article, ArticleSource
from .cache import ExpiringCache, MISS
from .classifier import AFRICA, RegionCatalog, is_regional
from .config import NewsConfig, load_config
from .client import NewsClient
from .reader import NewsReader, ReaderResult
from .exceptions import ApiError, HttpError, NetworkError, NewsAPIError

__all__ = [
    "Article",
    "ArticleSource",
    "ExpiringCache",
    "MISS",
    "AFRICA",
    "RegionCatalog",
    "is_regional",
    "NewsConfig",
    "load_config",
    "NewsClient",
    "NewsReader",
    "ReaderResult",
    "NewsAPIError",
    "HttpError",
    "ApiError",
    "NetworkError",
]
