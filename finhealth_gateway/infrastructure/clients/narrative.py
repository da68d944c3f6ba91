"""Narrative generation client with exponential backoff retry logic"""

import asyncio
from typing import Any, Dict

import httpx

from finhealth_gateway.config import settings
from finhealth_gateway.domain.exceptions import NarrativeServiceError
from finhealth_gateway.infrastructure.observability.metrics import (
    narrative_failure_counter,
    narrative_latency_histogram,
)


class NarrativeClient:
    """Client for the external free-text narrative service"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_base: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.narrative_service_url
        self.timeout = settings.http_timeout_seconds if timeout is None else timeout
        self.max_retries = settings.narrative_max_retries if max_retries is None else max_retries
        self.backoff_base = settings.narrative_backoff_base if backoff_base is None else backoff_base
        self.transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.base_url)

    async def generate(self, report: Dict[str, Any]) -> str:
        """
        Ask the narrative service for prose describing a report.

        Retry strategy:
        - Exponential backoff: base, 2*base, 4*base, ... (base * 2^(attempt-1))
        - Retries on 5xx errors and network failures; 4xx fails immediately
        - Tracks latency histogram and failure counter

        Args:
            report: Serialized report payload (camelCase keys)

        Raises:
            NarrativeServiceError: After the last failed attempt or on a malformed response
        """
        if not self.enabled:
            raise NarrativeServiceError("Narrative service URL is not configured")

        attempt = 0
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            while True:
                try:
                    with narrative_latency_histogram.time():
                        response = await client.post(
                            f"{self.base_url}/narrative",
                            json={"report": report},
                        )
                        response.raise_for_status()
                    narrative = response.json()["narrative"]
                    if not isinstance(narrative, str):
                        raise TypeError(f"narrative is {type(narrative).__name__}")
                    return narrative

                except httpx.HTTPStatusError as e:
                    narrative_failure_counter.inc()
                    if e.response.status_code < 500:
                        raise NarrativeServiceError(
                            f"Narrative service rejected request: {e.response.status_code}"
                        ) from e
                    attempt += 1
                    if attempt >= self.max_retries:
                        raise NarrativeServiceError(
                            f"Narrative service error after {attempt} attempts: {e.response.status_code}"
                        ) from e

                except httpx.RequestError as e:
                    narrative_failure_counter.inc()
                    attempt += 1
                    if attempt >= self.max_retries:
                        raise NarrativeServiceError(
                            f"Narrative service unavailable after {attempt} attempts: {e}"
                        ) from e

                except (KeyError, ValueError, TypeError) as e:
                    narrative_failure_counter.inc()
                    raise NarrativeServiceError(f"Invalid narrative response: {e}") from e

                # Exponential backoff: base, 2*base, 4*base, ...
                backoff = self.backoff_base * (2 ** (attempt - 1))
                await asyncio.sleep(backoff)
