"""
HTTP client factory utilities for the glossary browser.

Centralizes construction of `httpx.AsyncClient` instances from settings and
the retry policy applied to transient transport failures (tenacity).
"""

from __future__ import annotations

from typing import Optional

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from glossary.config import get_settings
from glossary.utils.logging import get_logger

log = get_logger(__name__)


def create_async_client(
    base_url: Optional[str] = None,
    timeout_seconds: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Build an async client rooted at the glossary's base URL.

    Parameters
    ----------
    base_url : str, optional
        Base URL holding the `<domain>.json` files. Defaults to settings.
    timeout_seconds : float, optional
        Per-request timeout. Defaults to settings.
    transport : httpx.AsyncBaseTransport, optional
        Custom transport (e.g. `httpx.MockTransport` in tests).

    Returns
    -------
    httpx.AsyncClient
        A client the caller is responsible for closing.
    """
    settings = get_settings()
    url = base_url or settings.base_url
    if not url:
        raise ValueError("A base URL is required for the HTTP term source (GLOSSARY_BASE_URL).")
    if not url.endswith("/"):
        url = f"{url}/"
    return httpx.AsyncClient(
        base_url=url,
        timeout=timeout_seconds if timeout_seconds is not None else settings.fetch_timeout_seconds,
        transport=transport,
    )


async def get_with_retry(
    client: httpx.AsyncClient,
    path: str,
    attempts: int = 3,
    wait_min: float = 0.5,
    wait_max: float = 5.0,
) -> httpx.Response:
    """
    GET a path, retrying transport-level failures with exponential backoff.

    Error statuses are returned as responses, not retried: only failures where
    no response arrived (connection refused, timeouts, DNS) are retried.

    Raises
    ------
    httpx.TransportError
        If every attempt failed at the transport layer.
    """
    retrying = AsyncRetrying(
        stop=stop_after_attempt(max(attempts, 1)),
        wait=wait_exponential(multiplier=wait_min, min=wait_min, max=wait_max),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async for attempt in retrying:
        with attempt:
            if attempt.retry_state.attempt_number > 1:
                log.debug(
                    "Retrying request",
                    extra={"path": path, "attempt": attempt.retry_state.attempt_number},
                )
            return await client.get(path)
    raise AssertionError("unreachable")  # pragma: no cover


__all__ = ["create_async_client", "get_with_retry"]
