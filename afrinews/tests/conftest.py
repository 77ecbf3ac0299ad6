"""
Shared fixtures: a fake aiohttp session that replays canned responses and
records every request. No live network.
"""
from typing import Any, Dict, List, Optional

import aiohttp
import pytest

from afrinews.cache import ExpiringCache
from afrinews.client import NewsClient
from afrinews.config import NewsConfig


def make_article(
    title: str = "Protests erupt in Lagos",
    *,
    url: Optional[str] = None,
    image: Optional[str] = "https://img.example.com/a.jpg",
    description: str = "",
    content: Optional[str] = None,
    source: str = "BBC News",
) -> Dict[str, Any]:
    return {
        "source": {"id": None, "name": source},
        "author": None,
        "title": title,
        "description": description,
        "url": url or f"https://news.example.com/{abs(hash(title))}",
        "urlToImage": image,
        "publishedAt": "2024-05-01T10:30:00Z",
        "content": content,
    }


def ok_payload(articles: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"status": "ok", "totalResults": len(articles), "articles": articles}


class FakeResponse:
    def __init__(self, status: int = 200, payload: Any = None, json_error: Optional[Exception] = None):
        self.status = status
        self._payload = payload
        self._json_error = json_error

    async def json(self, content_type=None):
        if self._json_error:
            raise self._json_error
        return self._payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """
    Stands in for aiohttp.ClientSession. Each queued item is either a
    FakeResponse or an exception raised when the request is made.
    """

    def __init__(self) -> None:
        self.queue: List[Any] = []
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def add(self, item: Any) -> None:
        self.queue.append(item)

    def get(self, url: str, params: Optional[Dict[str, str]] = None):
        self.calls.append({"url": url, "params": dict(params or {})})
        if not self.queue:
            raise AssertionError(f"Unexpected request: {params}")
        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    async def close(self) -> None:
        self.closed = True


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def config():
    return NewsConfig(api_key="test-key", base_url="https://newsapi.test/v2", page_size=10, language="en")


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def news_client(config, session, clock):
    return NewsClient(config, cache=ExpiringCache(clock=clock), session=session)


@pytest.fixture
def connection_error():
    return aiohttp.ClientConnectionError("connection refused")
