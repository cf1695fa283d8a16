"""
HTTP term source: fetches `<base_url>/<domain>.json` with httpx.

Transport failures are retried with backoff (tenacity) before surfacing as
`TransportError`. A response with an error status is never retried: 404 maps
to `NotFoundError`, anything else to `SourceStatusError`.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from glossary.config import get_settings
from glossary.domain.errors import (
    NotFoundError,
    PayloadDecodeError,
    SourceStatusError,
    TransportError,
)
from glossary.domain.models import Domain
from glossary.infrastructure.http_factory import create_async_client, get_with_retry
from glossary.sources.abstract import AbstractTermSource
from glossary.utils.logging import get_logger

log = get_logger(__name__)


class HttpTermSource(AbstractTermSource):
    """
    Fetch domain collections over HTTP using a shared `httpx.AsyncClient`.

    The client is created lazily on first fetch, so one source instance serves
    all concurrent domain fetches of a load over the same connection pool.
    """

    name: str = "http"
    description: str = "GET <base_url>/<domain>.json over HTTP(S)."

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        attempts: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        retry_wait_min: float = 0.5,
    ) -> None:
        settings = get_settings()
        self.base_url = base_url or settings.base_url
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else settings.fetch_timeout_seconds
        )
        self.attempts = attempts if attempts is not None else settings.fetch_attempts
        self.retry_wait_min = retry_wait_min
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = create_async_client(
                base_url=self.base_url,
                timeout_seconds=self.timeout_seconds,
                transport=self._transport,
            )
        return self._client

    async def fetch(self, domain: Domain) -> Any:
        path = self.resource_name(domain)
        try:
            response = await get_with_retry(
                self._get_client(),
                path,
                attempts=self.attempts,
                wait_min=self.retry_wait_min,
            )
        except httpx.TransportError as exc:
            raise TransportError(domain, f"{type(exc).__name__}: {exc}") from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            raise NotFoundError(domain, str(response.url))
        if response.is_error:
            raise SourceStatusError(domain, response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise PayloadDecodeError(
                domain, f"Data for domain '{domain.value}' is not valid JSON: {exc}"
            ) from exc

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            log.debug("HTTP term source closed", extra={"base_url": self.base_url})


__all__ = ["HttpTermSource"]
