from pydantic import BaseModel, Field


class MemberResponse(BaseModel):
    """A member of Congress with roster fields renamed."""

    id: str | None = None
    name: str
    first_name: str | None = Field(None, alias="firstName")
    last_name: str | None = Field(None, alias="lastName")
    party: str | None = None
    state: str
    title: str | None = None
    phone: str | None = None
    office: str | None = None
    url: str | None = None
    contact_form: str | None = Field(None, alias="contactForm")
    twitter_account: str | None = Field(None, alias="twitterAccount")
    facebook_account: str | None = Field(None, alias="facebookAccount")
    next_election: str | None = Field(None, alias="nextElection")

    class Config:
        populate_by_name = True


class RepresentativeResponse(MemberResponse):
    """House member; ``district`` is ``At-Large`` or the district number."""

    district: str | None = None


class CongressResponse(BaseModel):
    """Response for GET /congress-from-district."""

    district: str
    representative: RepresentativeResponse | None
    senators: list[MemberResponse]
