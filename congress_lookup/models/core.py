import enum
from dataclasses import dataclass, field
from typing import Any


class ErrorKind(str, enum.Enum):
    MISSING_ZIP = "MISSING_ZIP"
    MISSING_DISTRICT_ID = "MISSING_DISTRICT_ID"
    INVALID_DISTRICT_ID = "INVALID_DISTRICT_ID"
    INVALID_ADDRESS = "INVALID_ADDRESS"
    UNKNOWN = "UNKNOWN"


ERROR_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.MISSING_ZIP: 400,
    ErrorKind.MISSING_DISTRICT_ID: 400,
    ErrorKind.INVALID_DISTRICT_ID: 400,
    ErrorKind.INVALID_ADDRESS: 400,
    ErrorKind.UNKNOWN: 500,
}


class LegislatorRole(str, enum.Enum):
    REPRESENTATIVE = "representative"
    SENATOR = "senator"


@dataclass(frozen=True)
class DistrictIdentifier:
    """A congressional district: postal state code plus district number.

    Number 0 is the at-large seat of a single-district state or the
    non-voting seat of DC or a territory.
    """

    state: str
    number: int
    at_large: bool = False
    non_voting: bool = False

    @property
    def id(self) -> str:
        return f"{self.state}-{self.number}"


@dataclass(frozen=True)
class AddressQuery:
    zip: str
    street: str | None = None


@dataclass
class LegislatorRecord:
    """A roster member with the upstream fields it is rendered from."""

    role: LegislatorRole
    state: str
    district: str | None
    raw: dict[str, Any] = field(default_factory=dict)


@dataclass
class CongressResult:
    district: DistrictIdentifier
    representative: LegislatorRecord | None
    senators: list[LegislatorRecord] = field(default_factory=list)
