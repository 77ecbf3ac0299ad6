from __future__ import annotations

from typing import Any, Dict, Optional


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""


class NewsAPIError(Exception):
    """Base exception for failures talking to the news API."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{ctx_str}]"
        return self.message


class HttpError(NewsAPIError):
    """Raised when the API answers with a non-success HTTP status."""

    def __init__(self, status: int, context: Optional[Dict[str, Any]] = None) -> None:
        ctx = context or {}
        ctx["status"] = status
        super().__init__(f"HTTP error! status: {status}", ctx)
        self.status = status


class ApiError(NewsAPIError):
    """Raised when the decoded payload reports a failure (status != "ok")."""


class NetworkError(NewsAPIError):
    """Raised on transport-level failures (DNS, connection reset, timeout)."""


class ParseError(NewsAPIError):
    """Raised when an article entry cannot be read into an Article."""
