"""Canned upstream payloads and a path-routing mock transport."""

from __future__ import annotations

from typing import Any

import httpx

GEOCODER = "/geocoder/geographies/address"
ZIP_ROSTER = "/getall_mems.php"
HOUSE_ROSTER = "/house/members.json"
SENATE_ROSTER = "/senate/members.json"

NO_DATA_FOUND = "<result message='No Data Found' />"


def mock_transport(routes: dict[str, Any], captured: list[httpx.Request] | None = None) -> httpx.MockTransport:
    """Reply by URL path suffix.

    A reply is a response, an exception to raise, or a zero-argument
    callable building a fresh response per request.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.append(request)
        for suffix, reply in routes.items():
            if request.url.path.endswith(suffix):
                if isinstance(reply, Exception):
                    raise reply
                if callable(reply):
                    return reply()
                return reply
        raise AssertionError(f"No stubbed response defined for {request.url}")

    return httpx.MockTransport(handler)


def json_reply(payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json=payload)


def text_reply(body: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, text=body)


def geocoder_payload(state_fips: str | None, district_code: str | None) -> dict:
    """Census geocoder body; ``None`` state yields no address match."""
    matches = []
    if state_fips is not None:
        matches.append({
            "matchedAddress": "1600 PENNSYLVANIA AVE NW, WASHINGTON, DC, 20500",
            "coordinates": {"x": -77.03535, "y": 38.898754},
            "geographies": {
                "115th Congressional Districts": [{
                    "GEOID": f"{state_fips}{district_code}",
                    "STATE": state_fips,
                    "CD115": district_code,
                    "BASENAME": district_code,
                    "NAME": f"Congressional District {district_code}",
                }],
            },
        })
    return {
        "result": {
            "input": {"address": {"street": "1600 Pennsylvania Ave", "zip": "20500"}},
            "addressMatches": matches,
        }
    }


def zip_member(name: str, state: str, district: str) -> dict:
    return {
        "name": name,
        "party": "D",
        "state": state,
        "district": district,
        "phone": "202-225-4965",
        "office": "1236 Longworth House Office Building",
        "link": "https://example.house.gov",
    }


ZIP_ONLY_DISTRICT = {
    "results": [
        zip_member("Nancy Pelosi", "CA", "12"),
        zip_member("Dianne Feinstein", "CA", "Senior Seat"),
        zip_member("Kamala Harris", "CA", "Junior Seat"),
    ]
}

ZIP_ONLY_WITH_TWO_DISTRICTS = {
    "results": [
        zip_member("Nancy Pelosi", "CA", "12"),
        zip_member("Barbara Lee", "CA", "13"),
        zip_member("Nancy Pelosi", "CA", "12"),
        zip_member("Dianne Feinstein", "CA", "Senior Seat"),
        zip_member("Kamala Harris", "CA", "Junior Seat"),
    ]
}

ZIP_ONLY_WITH_AT_LARGE_DISTRICT = {
    "results": [
        zip_member("Don Young", "AK", ""),
        zip_member("Lisa Murkowski", "AK", "Senior Seat"),
        zip_member("Dan Sullivan", "AK", "Junior Seat"),
    ]
}


def roster_member(member_id: str, first: str, last: str, state: str, **extra: Any) -> dict:
    member = {
        "id": member_id,
        "title": "Representative",
        "short_title": "Rep.",
        "first_name": first,
        "middle_name": None,
        "last_name": last,
        "suffix": None,
        "party": "D",
        "state": state,
        "url": f"https://{last.lower()}.house.gov",
        "phone": "202-225-4965",
        "office": "1236 Longworth House Office Building",
        "contact_form": None,
        "twitter_account": f"Rep{last}",
        "facebook_account": None,
        "next_election": "2018",
        "in_office": True,
    }
    member.update(extra)
    return member


def roster_payload(chamber: str, members: list[dict]) -> dict:
    return {
        "status": "OK",
        "copyright": "Copyright (c) 2017 Pro Publica Inc. All Rights Reserved.",
        "results": [{
            "congress": "115",
            "chamber": chamber,
            "num_results": len(members),
            "offset": 0,
            "members": members,
        }],
    }


REPRESENTATIVES = roster_payload("House", [
    roster_member("P000001", "Former", "Member", "CA", district="12", at_large=False, in_office=False),
    roster_member("P000197", "Nancy", "Pelosi", "CA", district="12", at_large=False),
    roster_member("L000551", "Barbara", "Lee", "CA", district="13", at_large=False),
    roster_member("Y000033", "Don", "Young", "AK", district="At-Large", at_large=True, party="R"),
    roster_member(
        "G000582", "Jenniffer", "González-Colón", "PR",
        district="At-Large", at_large=True, party="R", title="Resident Commissioner",
    ),
])

SENATORS = roster_payload("Senate", [
    roster_member("F000062", "Dianne", "Feinstein", "CA", title="Senator, 1st Class"),
    roster_member("H001075", "Kamala", "Harris", "CA", title="Senator, 3rd Class"),
    roster_member("M001153", "Lisa", "Murkowski", "AK", title="Senator, 3rd Class", party="R"),
    roster_member("S001198", "Dan", "Sullivan", "AK", title="Senator, 2nd Class", party="R", suffix="Jr."),
])
