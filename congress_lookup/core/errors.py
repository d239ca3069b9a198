"""Classified errors returned to callers as translation keys."""

from congress_lookup.models.core import ERROR_STATUS_CODES, ErrorKind


class ClassifiedError(Exception):
    """Raised by the resolvers; rendered as ``{"translationKey": kind}``.

    Args:
        kind: Client-facing error kind.
        reason: Internal description of the failure, logged but never returned.
    """

    def __init__(self, kind: ErrorKind, reason: str | None = None) -> None:
        self.kind = kind
        self.reason = reason or kind.value
        super().__init__(f"{kind.value}: {self.reason}")

    @property
    def status_code(self) -> int:
        return ERROR_STATUS_CODES[self.kind]

    @property
    def translation_key(self) -> str:
        return self.kind.value

    def to_body(self) -> dict[str, str]:
        return {"translationKey": self.translation_key}
