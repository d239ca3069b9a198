"""Reference tables for states, territories and their congressional seats."""

import re

from congress_lookup.models.core import DistrictIdentifier

STATE_FIPS_CODES: dict[str, str] = {
    "01": "AL", "02": "AK", "04": "AZ", "05": "AR", "06": "CA",
    "08": "CO", "09": "CT", "10": "DE", "11": "DC", "12": "FL",
    "13": "GA", "15": "HI", "16": "ID", "17": "IL", "18": "IN",
    "19": "IA", "20": "KS", "21": "KY", "22": "LA", "23": "ME",
    "24": "MD", "25": "MA", "26": "MI", "27": "MN", "28": "MS",
    "29": "MO", "30": "MT", "31": "NE", "32": "NV", "33": "NH",
    "34": "NJ", "35": "NM", "36": "NY", "37": "NC", "38": "ND",
    "39": "OH", "40": "OK", "41": "OR", "42": "PA", "44": "RI",
    "45": "SC", "46": "SD", "47": "TN", "48": "TX", "49": "UT",
    "50": "VT", "51": "VA", "53": "WA", "54": "WV", "55": "WI",
    "56": "WY", "60": "AS", "66": "GU", "69": "MP", "72": "PR",
    "78": "VI",
}

POSTAL_CODES: frozenset[str] = frozenset(STATE_FIPS_CODES.values())

# States apportioned a single representative since the 2020 census.
# Older roster sessions are reconciled against the roster's own at_large flag.
AT_LARGE_STATES: frozenset[str] = frozenset({"AK", "DE", "ND", "SD", "VT", "WY"})

# Seats held by a delegate or resident commissioner, no senators
NON_VOTING_JURISDICTIONS: frozenset[str] = frozenset({"DC", "PR", "GU", "VI", "AS", "MP"})

# Inclusive 5-digit zip ranges for the non-voting jurisdictions
NON_VOTING_ZIP_RANGES: list[tuple[int, int, str]] = [
    (600, 799, "PR"),
    (801, 851, "VI"),
    (900, 999, "PR"),
    (20001, 20099, "DC"),
    (20201, 20599, "DC"),
    (56901, 56999, "DC"),
    (96799, 96799, "AS"),
    (96910, 96932, "GU"),
    (96950, 96952, "MP"),
]

_ZIP_RE = re.compile(r"^\s*(\d{5})(?:-?\d{4})?\s*$")


def is_known_state(code: str) -> bool:
    return code.upper() in POSTAL_CODES


def state_from_fips(fips: str) -> str | None:
    return STATE_FIPS_CODES.get(str(fips).zfill(2))


def is_at_large_state(code: str) -> bool:
    return code in AT_LARGE_STATES or code in NON_VOTING_JURISDICTIONS


def is_non_voting(code: str) -> bool:
    return code in NON_VOTING_JURISDICTIONS


def non_voting_jurisdiction_for_zip(zip_code: str) -> str | None:
    """Return the non-voting jurisdiction a zip belongs to, if any.

    Accepts 5-digit and ZIP+4 forms; anything else is never a match.
    """
    match = _ZIP_RE.match(zip_code or "")
    if not match:
        return None
    value = int(match.group(1))
    for low, high, jurisdiction in NON_VOTING_ZIP_RANGES:
        if low <= value <= high:
            return jurisdiction
    return None


def classify_district(state: str, number: int, non_voting: bool = False) -> DistrictIdentifier:
    """Build a district, collapsing at-large and non-voting seats to number 0."""
    non_voting = non_voting or is_non_voting(state)
    at_large = non_voting or number == 0 or is_at_large_state(state)
    return DistrictIdentifier(
        state=state,
        number=0 if at_large else number,
        at_large=at_large,
        non_voting=non_voting,
    )
