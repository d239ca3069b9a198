from typing import Union

from pydantic import BaseModel, Field


class DistrictResponse(BaseModel):
    """A single resolved district; ``district`` is omitted for at-large seats."""

    state: str
    district: int | None = None
    id: str = Field(..., description="STATE-NUMBER identifier accepted by congress-from-district")
    at_large: bool = Field(False, alias="atLarge")
    non_voting: bool = Field(False, alias="nonVoting")

    class Config:
        populate_by_name = True


class MultiDistrictResponse(BaseModel):
    """Response for a zip that spans more than one district."""

    districts: list[DistrictResponse]


DistrictLookupResponse = Union[DistrictResponse, MultiDistrictResponse]


class ErrorResponse(BaseModel):
    """Body of every failed lookup."""

    translation_key: str = Field(..., alias="translationKey")

    class Config:
        populate_by_name = True
