"""Resilient HTTP call primitive shared by every remote service client.

ARCHITECTURE:
    endpoint + params → httpx GET → JSON payload (or original error after retries)

Key Design:
- Async HTTP with connection pooling (httpx.AsyncClient)
- Retry with attempt-indexed exponential backoff, no jitter (tenacity)
- Attempts are numbered 0..max_attempts, sleeping 2**attempt seconds after
  every failed attempt except the last
- The final attempt's exception is re-raised unchanged
- Payload-level ``{"error": ...}`` markers count as failures
- Stateless per call; concurrent calls do not interact
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from variantexplorer.config import Settings
from variantexplorer.errors import UpstreamPayloadError

logger = logging.getLogger(__name__)

RETRYABLE_ERRORS = (httpx.HTTPError, UpstreamPayloadError)

SleepFunc = Callable[[float], Awaitable[Any]]


class ResilientClient:
    """GET-with-retry client returning decoded JSON payloads."""

    def __init__(
        self,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Timeout and default retry budget
            http_client: Pre-built httpx client (not closed by this object)
            sleep: Coroutine used for backoff waits
        """
        self.settings = settings or Settings()
        self.timeout = self.settings.timeout
        self.max_attempts = self.settings.max_attempts
        self._client = http_client
        self._owns_client = http_client is None
        self._sleep = sleep

    async def __aenter__(self) -> "ResilientClient":
        """Async context manager entry."""
        self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self._client

    async def call(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        max_attempts: int | None = None,
    ) -> Any:
        """GET ``endpoint`` and return its JSON payload, retrying on failure.

        Args:
            endpoint: Absolute URL
            params: Query parameters
            max_attempts: Retries after the first try (default from settings)

        Returns:
            Decoded JSON payload

        Raises:
            httpx.HTTPError: Transport failure or non-success status on the last attempt
            UpstreamPayloadError: Error marker in the payload on the last attempt
        """
        retries = self.max_attempts if max_attempts is None else max_attempts
        total = retries + 1

        retrying = AsyncRetrying(
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            stop=stop_after_attempt(total),
            wait=wait_exponential(multiplier=1, exp_base=2),
            sleep=self._sleep,
            before_sleep=self._log_retry,
            reraise=True,
        )

        try:
            async for attempt in retrying:
                with attempt:
                    attempt_index = attempt.retry_state.attempt_number - 1
                    logger.debug(f"GET {endpoint} (attempt {attempt_index}/{retries})")
                    return await self._attempt(endpoint, params)
        except RETRYABLE_ERRORS as e:
            logger.error(f"GET {endpoint} failed after {total} attempt(s): {e}")
            raise

    async def _attempt(self, endpoint: str, params: dict[str, Any] | None) -> Any:
        client = self._get_client()
        response = await client.get(
            endpoint,
            params=params,
            headers={"Accept": "application/json"},
        )
        response.raise_for_status()
        data = response.json()

        if isinstance(data, dict) and data.get("error"):
            raise UpstreamPayloadError(f"{endpoint}: {data['error']}")

        return data

    @staticmethod
    def _log_retry(retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        wait = retry_state.next_action.sleep if retry_state.next_action else 0
        logger.warning(
            f"Attempt {retry_state.attempt_number - 1} failed ({exc}); retrying in {wait:.0f}s"
        )
