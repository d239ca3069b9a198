"""Shapes resolved districts and legislators into the public response contract."""

from typing import Any

from congress_lookup.models.core import CongressResult, DistrictIdentifier, LegislatorRecord
from congress_lookup.schemas.congress import CongressResponse, MemberResponse, RepresentativeResponse
from congress_lookup.schemas.districts import (
    DistrictLookupResponse,
    DistrictResponse,
    MultiDistrictResponse,
)


def district_response(district: DistrictIdentifier) -> DistrictResponse:
    return DistrictResponse(
        state=district.state,
        district=None if district.at_large else district.number,
        id=district.id,
        at_large=district.at_large,
        non_voting=district.non_voting,
    )


def normalize_districts(districts: list[DistrictIdentifier]) -> DistrictLookupResponse:
    """One district renders flat; several render as a ``districts`` list."""
    if len(districts) == 1:
        return district_response(districts[0])
    return MultiDistrictResponse(districts=[district_response(d) for d in districts])


def normalize_congress(result: CongressResult) -> CongressResponse:
    representative = None
    if result.representative is not None:
        representative = RepresentativeResponse(
            **_member_fields(result.representative),
            district=_text(result.representative.district),
        )

    return CongressResponse(
        district=result.district.id,
        representative=representative,
        senators=[MemberResponse(**_member_fields(s)) for s in result.senators],
    )


def _member_fields(record: LegislatorRecord) -> dict[str, Any]:
    raw = record.raw
    return {
        "id": _text(raw.get("id")),
        "name": full_name(raw),
        "first_name": _text(raw.get("first_name")),
        "last_name": _text(raw.get("last_name")),
        "party": _text(raw.get("party")),
        "state": record.state,
        "title": _text(raw.get("title")),
        "phone": _text(raw.get("phone")),
        "office": _text(raw.get("office")),
        "url": _text(raw.get("url")),
        "contact_form": _text(raw.get("contact_form")),
        "twitter_account": _text(raw.get("twitter_account")),
        "facebook_account": _text(raw.get("facebook_account")),
        "next_election": _text(raw.get("next_election")),
    }


def full_name(raw: dict[str, Any]) -> str:
    """Compose "First Middle Last, Suffix" from roster name parts."""
    parts = [_text(raw.get(key)) for key in ("first_name", "middle_name", "last_name")]
    name = " ".join(p for p in parts if p)
    suffix = _text(raw.get("suffix"))
    if suffix:
        name = f"{name}, {suffix}"
    return name


def _text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
