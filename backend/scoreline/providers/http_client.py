import asyncio
import logging
from typing import Any, Optional
from urllib.parse import urlparse

import httpx

logger = logging.getLogger("scoreline.http_client")

# Retryable HTTP status codes
_RETRYABLE_STATUSES = {429, 500, 502, 503, 504}

# Upstream error bodies are echoed back to API callers; keep them short.
_MAX_ERROR_BODY = 500


class UpstreamError(Exception):
    """An upstream provider answered with a non-success status or not at all.

    ``status_code`` is None for network failures (timeout, refused
    connection). ``body`` carries the response text where one was received.
    """

    def __init__(self, provider: str, status_code: Optional[int], body: str = ""):
        self.provider = provider
        self.status_code = status_code
        self.body = (body or "")[:_MAX_ERROR_BODY]
        label = status_code if status_code is not None else "unreachable"
        super().__init__(f"{provider} {label}: {self.body}".rstrip(": "))


def _parse_retry_after(response: httpx.Response) -> Optional[float]:
    """Extract wait time from Retry-After or X-RateLimit-Retry-After headers."""
    for header in ("retry-after", "x-ratelimit-retry-after"):
        value = response.headers.get(header)
        if value is None:
            continue
        try:
            return float(value)
        except (ValueError, TypeError):
            continue
    return None


def _safe_url(url: str) -> str:
    """Strip query params (may contain API keys) for safe logging."""
    parsed = urlparse(str(url))
    return f"{parsed.scheme}://{parsed.netloc}{parsed.path}"


class ResilientClient:
    """httpx.AsyncClient wrapper with retry and exponential backoff.

    Holds no failure state between calls: each request succeeds or fails on
    its own attempts. A 404 from ESPN for a season that has not been
    published is an answer, not an outage, and is never retried.
    """

    def __init__(
        self,
        name: str,
        timeout: float = 15.0,
        max_retries: int = 2,
        base_delay: float = 1.0,
        headers: Optional[dict[str, str]] = None,
    ):
        self._client = httpx.AsyncClient(timeout=timeout, headers=headers)
        self._name = name
        self._max_retries = max_retries
        self._base_delay = base_delay

    @property
    def name(self) -> str:
        return self._name

    async def request(
        self, method: str, url: str, *, retry: bool = True, **kwargs
    ) -> httpx.Response:
        """Execute an HTTP request with retry/backoff on transient failures."""
        attempts = (self._max_retries + 1) if retry else 1
        last_exc: Optional[Exception] = None
        last_resp: Optional[httpx.Response] = None

        for attempt in range(attempts):
            try:
                resp = await self._client.request(method, url, **kwargs)

                if resp.status_code not in _RETRYABLE_STATUSES:
                    return resp

                last_resp = resp

                if resp.status_code == 429:
                    logger.warning(
                        "[%s] Rate limited (429) on %s %s (attempt %d/%d)",
                        self._name, method, _safe_url(url), attempt + 1, attempts,
                    )
                else:
                    logger.warning(
                        "[%s] Server error %d on %s %s (attempt %d/%d)",
                        self._name, resp.status_code, method, _safe_url(url),
                        attempt + 1, attempts,
                    )

                if attempt < attempts - 1:
                    delay = _parse_retry_after(resp)
                    if delay is None:
                        delay = self._base_delay * (2 ** attempt)
                    await asyncio.sleep(min(delay, 30.0))

            except (httpx.TimeoutException, httpx.ConnectError, httpx.RemoteProtocolError) as exc:
                last_exc = exc
                logger.warning(
                    "[%s] Network error on %s %s (attempt %d/%d): %s",
                    self._name, method, _safe_url(url), attempt + 1, attempts, exc,
                )
                if attempt < attempts - 1:
                    await asyncio.sleep(self._base_delay * (2 ** attempt))

        if last_resp is not None:
            logger.error(
                "[%s] All %d attempts failed for %s %s (last status: %d)",
                self._name, attempts, method, _safe_url(url), last_resp.status_code,
            )
            return last_resp

        logger.error(
            "[%s] All %d attempts failed for %s %s: %s",
            self._name, attempts, method, _safe_url(url), last_exc,
        )
        raise last_exc  # type: ignore[misc]

    async def get(self, url: str, **kwargs) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def get_json(self, url: str, *, retry: bool = True, **kwargs) -> Any:
        """GET and decode JSON, raising UpstreamError for anything but a 2xx JSON body."""
        try:
            resp = await self.request("GET", url, retry=retry, **kwargs)
        except httpx.HTTPError as exc:
            raise UpstreamError(self._name, None, str(exc)) from exc

        if not resp.is_success:
            raise UpstreamError(self._name, resp.status_code, resp.text)
        try:
            return resp.json()
        except ValueError as exc:
            raise UpstreamError(self._name, resp.status_code, "invalid JSON body") from exc

    async def aclose(self) -> None:
        await self._client.aclose()
