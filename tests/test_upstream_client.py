from __future__ import annotations

import httpx
import pytest

from congress_lookup.config import Settings
from congress_lookup.services.upstream_client import (
    NotFoundMarker,
    TransportFailure,
    UpstreamClient,
    UpstreamPayload,
    build_upstreams,
)
from upstream_fixtures import (
    GEOCODER,
    HOUSE_ROSTER,
    NO_DATA_FOUND,
    SENATE_ROSTER,
    ZIP_ROSTER,
    json_reply,
    mock_transport,
    text_reply,
)

URL = "https://upstream.example.com/lookup"


async def _fetch(reply, **client_kwargs):
    async with httpx.AsyncClient(transport=mock_transport({"/lookup": reply})) as client:
        upstream = UpstreamClient("test", URL, client, **client_kwargs)
        return await upstream.fetch({"zip": "94110"})


@pytest.mark.asyncio
async def test_json_body_is_parsed():
    outcome = await _fetch(json_reply({"results": []}))
    assert outcome == UpstreamPayload(data={"results": []})


@pytest.mark.asyncio
async def test_non_json_body_falls_back_to_text():
    outcome = await _fetch(text_reply("unexpected successful response type"))
    assert outcome == UpstreamPayload(data="unexpected successful response type")


@pytest.mark.asyncio
async def test_no_data_marker_detected_only_when_enabled():
    assert await _fetch(text_reply(NO_DATA_FOUND), detect_not_found=True) == NotFoundMarker(body=NO_DATA_FOUND)
    assert await _fetch(text_reply(NO_DATA_FOUND)) == UpstreamPayload(data=NO_DATA_FOUND)


@pytest.mark.asyncio
async def test_non_success_status_is_transport_failure():
    outcome = await _fetch(json_reply({"message": "failed with some error"}, status_code=500))
    assert isinstance(outcome, TransportFailure)
    assert outcome.status_code == 500


@pytest.mark.asyncio
async def test_network_error_is_transport_failure():
    outcome = await _fetch(httpx.ConnectError("connection refused"))
    assert isinstance(outcome, TransportFailure)
    assert outcome.status_code is None
    assert "ConnectError" in outcome.reason


@pytest.mark.asyncio
async def test_timeout_is_transport_failure():
    outcome = await _fetch(httpx.ReadTimeout("timed out"))
    assert isinstance(outcome, TransportFailure)
    assert outcome.reason.startswith("timeout")


@pytest.mark.asyncio
async def test_build_upstreams_sends_fixed_query_params_and_api_key():
    captured: list[httpx.Request] = []
    routes = {
        GEOCODER: json_reply({}),
        ZIP_ROSTER: json_reply({}),
        HOUSE_ROSTER: json_reply({}),
        SENATE_ROSTER: json_reply({}),
    }
    settings = Settings(propublica_api_key="secret", congress_number=115)

    async with httpx.AsyncClient(transport=mock_transport(routes, captured)) as client:
        upstreams = build_upstreams(client, settings)
        await upstreams.geocoder.fetch({"street": "1600 Pennsylvania Ave", "zip": "20500"})
        await upstreams.zip_roster.fetch({"zip": "20500"})
        await upstreams.house_roster.fetch()
        await upstreams.senate_roster.fetch()

    geocoder, zip_roster, house, senate = captured
    assert geocoder.url.params["benchmark"] == "Public_AR_Current"
    assert geocoder.url.params["vintage"] == "Current_Current"
    assert geocoder.url.params["layers"] == "54"
    assert geocoder.url.params["street"] == "1600 Pennsylvania Ave"
    assert zip_roster.url.params["output"] == "json"
    assert zip_roster.url.params["zip"] == "20500"
    assert house.url.path == "/congress/v1/115/house/members.json"
    assert senate.url.path == "/congress/v1/115/senate/members.json"
    assert house.headers["X-API-Key"] == "secret"
    assert "X-API-Key" not in geocoder.headers
