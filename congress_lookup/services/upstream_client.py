"""Single-GET HTTP clients for the geocoding and roster upstreams.

Each call yields exactly one tagged outcome instead of raising, so the
resolvers can classify upstream problems declaratively.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Union

import httpx

from congress_lookup.config import Settings

logger = logging.getLogger(__name__)

NOT_FOUND_MARKER = "no data found"


@dataclass(frozen=True)
class UpstreamPayload:
    """A 2xx body: parsed JSON, or the raw text when the body is not JSON."""

    data: Any


@dataclass(frozen=True)
class NotFoundMarker:
    """The zip-roster's ``<result message='No Data Found' />`` body."""

    body: str


@dataclass(frozen=True)
class TransportFailure:
    """Network error, timeout or non-2xx status."""

    reason: str
    status_code: int | None = None


UpstreamOutcome = Union[UpstreamPayload, NotFoundMarker, TransportFailure]


class UpstreamClient:
    """Issues one GET against one upstream URL.

    Args:
        name: Short upstream name used in logs.
        url: Fully formed base URL of the upstream.
        client: Shared async HTTP client.
        default_params: Query params sent with every call.
        headers: Headers sent with every call.
        timeout: Per-call timeout in seconds.
        detect_not_found: Whether a "No Data Found" body is reported as
            ``NotFoundMarker`` rather than as a payload.
    """

    def __init__(
        self,
        name: str,
        url: str,
        client: httpx.AsyncClient,
        *,
        default_params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        detect_not_found: bool = False,
    ) -> None:
        self.name = name
        self.url = url
        self._client = client
        self._default_params = default_params or {}
        self._headers = headers or {}
        self._timeout = timeout
        self._detect_not_found = detect_not_found

    async def fetch(self, params: dict[str, str] | None = None) -> UpstreamOutcome:
        query = {**self._default_params, **(params or {})}
        request_kwargs: dict[str, Any] = {"params": query, "headers": self._headers}
        if self._timeout is not None:
            request_kwargs["timeout"] = self._timeout

        start_time = time.time()
        try:
            response = await self._client.get(self.url, **request_kwargs)
        except httpx.TimeoutException as exc:
            logger.warning(f"Upstream timeout: upstream={self.name}, error={exc!r}")
            return TransportFailure(reason=f"timeout: {exc!r}")
        except httpx.HTTPError as exc:
            logger.warning(f"Upstream transport error: upstream={self.name}, error={type(exc).__name__}: {exc}")
            return TransportFailure(reason=f"{type(exc).__name__}: {exc}")

        duration = time.time() - start_time
        logger.info(
            f"Upstream call: upstream={self.name}, status={response.status_code}, "
            f"duration={duration:.3f}s"
        )

        if not response.is_success:
            return TransportFailure(
                reason=f"HTTP {response.status_code}",
                status_code=response.status_code,
            )

        text = response.text
        if self._detect_not_found and NOT_FOUND_MARKER in text.lower():
            logger.info(f"Upstream reported no data: upstream={self.name}")
            return NotFoundMarker(body=text)

        try:
            return UpstreamPayload(data=response.json())
        except ValueError:
            logger.debug(f"Upstream body is not JSON: upstream={self.name}, length={len(text)}")
            return UpstreamPayload(data=text)


@dataclass
class Upstreams:
    geocoder: UpstreamClient
    zip_roster: UpstreamClient
    house_roster: UpstreamClient
    senate_roster: UpstreamClient


def build_upstreams(client: httpx.AsyncClient, settings: Settings) -> Upstreams:
    """Create the four upstream clients over one shared HTTP client."""
    timeout = settings.http_timeout_seconds
    roster_headers = {}
    if settings.propublica_api_key:
        roster_headers["X-API-Key"] = settings.propublica_api_key

    roster_base = f"{settings.propublica_base_url.rstrip('/')}/{settings.congress_number}"

    return Upstreams(
        geocoder=UpstreamClient(
            "geocoder",
            settings.geocoder_url,
            client,
            default_params={
                "benchmark": "Public_AR_Current",
                "vintage": "Current_Current",
                "format": "json",
                "layers": "54",
            },
            timeout=timeout,
        ),
        zip_roster=UpstreamClient(
            "zip-roster",
            settings.zip_lookup_url,
            client,
            default_params={"output": "json"},
            timeout=timeout,
            detect_not_found=True,
        ),
        house_roster=UpstreamClient(
            "house-roster",
            f"{roster_base}/house/members.json",
            client,
            headers=roster_headers,
            timeout=timeout,
        ),
        senate_roster=UpstreamClient(
            "senate-roster",
            f"{roster_base}/senate/members.json",
            client,
            headers=roster_headers,
            timeout=timeout,
        ),
    )
