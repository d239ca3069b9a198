"""Congress service: finds the House member and senators for a district."""

import asyncio
import logging
import re
from typing import Any

from congress_lookup.core.errors import ClassifiedError
from congress_lookup.core.jurisdictions import classify_district, is_known_state
from congress_lookup.models.core import (
    CongressResult,
    DistrictIdentifier,
    ErrorKind,
    LegislatorRecord,
    LegislatorRole,
)
from congress_lookup.services.upstream_client import (
    TransportFailure,
    UpstreamOutcome,
    UpstreamPayload,
    Upstreams,
)

logger = logging.getLogger(__name__)

_DISTRICT_ID_RE = re.compile(r"^([A-Za-z]{2})-(\d+)$")


def parse_district_id(district_id: str | None) -> DistrictIdentifier:
    """Parse a ``STATE-NUMBER`` identifier such as ``CA-12`` or ``AK-0``."""
    if district_id is None or not district_id.strip():
        raise ClassifiedError(ErrorKind.MISSING_DISTRICT_ID, "id parameter is missing")

    match = _DISTRICT_ID_RE.match(district_id.strip())
    if not match:
        raise ClassifiedError(ErrorKind.INVALID_DISTRICT_ID, f"malformed district id {district_id!r}")

    state = match.group(1).upper()
    if not is_known_state(state):
        raise ClassifiedError(ErrorKind.INVALID_DISTRICT_ID, f"unknown state in district id {district_id!r}")

    return classify_district(state, int(match.group(2)))


class CongressService:
    """Service for congress lookups against the House and Senate rosters."""

    def __init__(self, upstreams: Upstreams):
        self.house_roster = upstreams.house_roster
        self.senate_roster = upstreams.senate_roster

    async def resolve(self, district_id: str | None) -> CongressResult:
        district = parse_district_id(district_id)

        house_outcome, senate_outcome = await asyncio.gather(
            self.house_roster.fetch(),
            self.senate_roster.fetch(),
        )
        house_members = _roster_members(house_outcome, self.house_roster.name)
        senate_members = _roster_members(senate_outcome, self.senate_roster.name)

        representative = next(
            (m for m in house_members if _state_of(m) == district.state and _matches_district(m, district)),
            None,
        )
        if representative is None and not district.at_large:
            # Roster session may predate the current apportionment
            representative = next(
                (m for m in house_members if _state_of(m) == district.state and _is_at_large(m)),
                None,
            )
            if representative is not None:
                district = classify_district(district.state, 0)
        senators = [m for m in senate_members if _state_of(m) == district.state]

        if representative is None:
            logger.warning(f"No representative found in roster: district={district.id}")
        logger.info(
            f"Congress lookup: district={district.id}, "
            f"representative={representative.get('id') if representative else None}, "
            f"senators={len(senators)}"
        )

        return CongressResult(
            district=district,
            representative=(
                _to_record(representative, LegislatorRole.REPRESENTATIVE)
                if representative is not None
                else None
            ),
            senators=[_to_record(m, LegislatorRole.SENATOR) for m in senators],
        )


def _roster_members(outcome: UpstreamOutcome, upstream: str) -> list[dict]:
    """Members currently in office from a roster payload."""
    if isinstance(outcome, TransportFailure):
        raise ClassifiedError(ErrorKind.UNKNOWN, f"{upstream} transport failure: {outcome.reason}")
    if not isinstance(outcome, UpstreamPayload):
        raise ClassifiedError(ErrorKind.UNKNOWN, f"{upstream} returned an unexpected no-data marker")

    data = outcome.data
    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list) or not results or not isinstance(results[0], dict):
        raise ClassifiedError(ErrorKind.UNKNOWN, f"{upstream} payload has no results")

    members = results[0].get("members")
    if not isinstance(members, list) or not all(isinstance(m, dict) for m in members):
        raise ClassifiedError(ErrorKind.UNKNOWN, f"{upstream} payload has no members list")

    return [m for m in members if _is_in_office(m)]


def _is_in_office(member: dict) -> bool:
    value = member.get("in_office", True)
    if isinstance(value, str):
        return value.strip().lower() != "false"
    return bool(value)


def _state_of(member: dict) -> str:
    return str(member.get("state") or "").strip().upper()


def _is_at_large(member: dict) -> bool:
    if member.get("at_large") is True:
        return True
    return str(member.get("district") or "").strip().lower() in ("at-large", "at large", "0")


def _matches_district(member: dict, district: DistrictIdentifier) -> bool:
    if district.at_large:
        return _is_at_large(member)
    value = str(member.get("district") or "").strip()
    return value.isdecimal() and int(value) == district.number


def _to_record(member: dict[str, Any], role: LegislatorRole) -> LegislatorRecord:
    return LegislatorRecord(
        role=role,
        state=_state_of(member),
        district=member.get("district") if role == LegislatorRole.REPRESENTATIVE else None,
        raw=member,
    )
