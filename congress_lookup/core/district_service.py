"""District service: resolves congressional districts from an address or zip."""

import logging
import re
from typing import Any

from congress_lookup.core.errors import ClassifiedError
from congress_lookup.core.jurisdictions import (
    classify_district,
    is_known_state,
    non_voting_jurisdiction_for_zip,
    state_from_fips,
)
from congress_lookup.models.core import AddressQuery, DistrictIdentifier, ErrorKind
from congress_lookup.services.upstream_client import (
    NotFoundMarker,
    TransportFailure,
    UpstreamOutcome,
    Upstreams,
)

logger = logging.getLogger(__name__)

# Census district codes
AT_LARGE_CODE = "00"
DELEGATE_CODE = "98"
NO_DISTRICT_CODE = "ZZ"

AT_LARGE_LABELS = {"", "0", "at-large", "at large"}

_DISTRICT_FIELD_RE = re.compile(r"^CD\d+(FP)?$")


def parse_address_query(street: str | None, zip_code: str | None) -> AddressQuery:
    """Validate lookup params; a blank street is treated as absent."""
    if zip_code is None or not zip_code.strip():
        raise ClassifiedError(ErrorKind.MISSING_ZIP, "zip parameter is missing")
    street = street.strip() if street else None
    return AddressQuery(zip=zip_code.strip(), street=street or None)


class DistrictService:
    """Service for district lookups.

    A full address is geocoded; a zip on its own is looked up in the
    zip roster, which may yield several districts.
    """

    def __init__(self, upstreams: Upstreams):
        self.geocoder = upstreams.geocoder
        self.zip_roster = upstreams.zip_roster

    async def resolve(self, street: str | None, zip_code: str | None) -> list[DistrictIdentifier]:
        query = parse_address_query(street, zip_code)
        if query.street:
            districts = await self._from_address(query)
        else:
            districts = await self._from_zip(query)

        logger.info(
            f"District lookup: zip={query.zip}, has_street={bool(query.street)}, "
            f"districts={[d.id for d in districts]}"
        )
        return districts

    async def _from_address(self, query: AddressQuery) -> list[DistrictIdentifier]:
        outcome = await self.geocoder.fetch({"street": query.street, "zip": query.zip})
        data = _payload_or_raise(outcome, self.geocoder.name)

        matches = _address_matches(data)
        if not matches:
            return self._non_voting_or_invalid(query.zip)

        district = _district_from_feature(_district_feature(matches[0]))
        if district is None:
            return self._non_voting_or_invalid(query.zip)
        return [district]

    async def _from_zip(self, query: AddressQuery) -> list[DistrictIdentifier]:
        outcome = await self.zip_roster.fetch({"zip": query.zip})
        if isinstance(outcome, NotFoundMarker):
            return self._non_voting_or_invalid(query.zip)
        data = _payload_or_raise(outcome, self.zip_roster.name)

        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            raise ClassifiedError(ErrorKind.UNKNOWN, "zip roster payload has no results list")

        districts: list[DistrictIdentifier] = []
        for record in data["results"]:
            if not isinstance(record, dict):
                raise ClassifiedError(ErrorKind.UNKNOWN, "zip roster record is not an object")

            number = _house_district_number(record.get("district"))
            if number is None:
                # Senate seat
                continue

            state = str(record.get("state") or "").strip().upper()
            if not is_known_state(state):
                raise ClassifiedError(ErrorKind.UNKNOWN, f"zip roster record has unknown state {state!r}")

            district = classify_district(state, number)
            if district not in districts:
                districts.append(district)

        if not districts:
            return self._non_voting_or_invalid(query.zip)
        return districts

    def _non_voting_or_invalid(self, zip_code: str) -> list[DistrictIdentifier]:
        jurisdiction = non_voting_jurisdiction_for_zip(zip_code)
        if jurisdiction is None:
            raise ClassifiedError(ErrorKind.INVALID_ADDRESS, f"no district found for zip {zip_code}")
        logger.info(f"Zip {zip_code} matched non-voting jurisdiction {jurisdiction}")
        return [classify_district(jurisdiction, 0, non_voting=True)]


def _payload_or_raise(outcome: UpstreamOutcome, upstream: str) -> Any:
    if isinstance(outcome, TransportFailure):
        raise ClassifiedError(ErrorKind.UNKNOWN, f"{upstream} transport failure: {outcome.reason}")
    if isinstance(outcome, NotFoundMarker):
        raise ClassifiedError(ErrorKind.UNKNOWN, f"{upstream} returned an unexpected no-data marker")
    return outcome.data


def _address_matches(data: Any) -> list[dict]:
    result = data.get("result") if isinstance(data, dict) else None
    matches = result.get("addressMatches") if isinstance(result, dict) else None
    if not isinstance(matches, list) or not all(isinstance(m, dict) for m in matches):
        raise ClassifiedError(ErrorKind.UNKNOWN, "geocoder payload has no addressMatches list")
    return matches


def _district_feature(match: dict) -> dict:
    geographies = match.get("geographies")
    if not isinstance(geographies, dict):
        raise ClassifiedError(ErrorKind.UNKNOWN, "geocoder match has no geographies")

    for layer_name, features in geographies.items():
        if "congressional district" not in layer_name.lower():
            continue
        if isinstance(features, list) and features and isinstance(features[0], dict):
            return features[0]

    raise ClassifiedError(ErrorKind.UNKNOWN, "geocoder match has no congressional district feature")


def _district_from_feature(feature: dict) -> DistrictIdentifier | None:
    """Read state and district from a census feature; None when the code is ZZ."""
    state = state_from_fips(feature.get("STATE", ""))
    if state is None:
        raise ClassifiedError(ErrorKind.UNKNOWN, f"geocoder feature has unknown STATE {feature.get('STATE')!r}")

    code_field = next((key for key in feature if _DISTRICT_FIELD_RE.match(key)), None)
    if code_field is None:
        raise ClassifiedError(ErrorKind.UNKNOWN, "geocoder feature has no district code field")

    code = str(feature[code_field]).strip().upper()
    if code == NO_DISTRICT_CODE:
        return None
    if code == DELEGATE_CODE:
        return classify_district(state, 0, non_voting=True)
    if not code.isdecimal():
        raise ClassifiedError(ErrorKind.UNKNOWN, f"geocoder feature has invalid district code {code!r}")
    return classify_district(state, int(code))


def _house_district_number(value: Any) -> int | None:
    """District number of a zip-roster record, or None for a Senate seat."""
    if value is None:
        return None
    text = str(value).strip().lower()
    if text in AT_LARGE_LABELS:
        return 0
    if text.isdecimal():
        return int(text)
    if text.isdigit():
        raise ClassifiedError(ErrorKind.UNKNOWN, f"zip roster record has invalid district {value!r}")
    return None
