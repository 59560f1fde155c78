"""
Pydantic models for candidate data.

``CandidateBase`` holds the fields shared by requests and responses
together with their constraints; ``CandidateCreate`` is the request
body and ``CandidateRead`` adds the generated ``id`` for responses.
Candidates are immutable once created, hence the frozen read model.

Integer fields are strict, so JSON booleans or numeric strings are
rejected instead of being coerced.  Email addresses must be bare
addresses; ``EmailStr`` still normalizes the domain part to lower case.
"""

from uuid import UUID, uuid4

from pydantic import BaseModel, EmailStr, Field, field_validator


class CandidateBase(BaseModel):
    name: str = Field(..., min_length=3, max_length=50, examples=["Ana Silva"])
    email: EmailStr = Field(..., examples=["ana@x.com"])
    turma: int = Field(..., strict=True, ge=1, le=8, description="Class group (1-8)", examples=[3])
    proposal: str = Field(..., min_length=1, max_length=500, examples=["Melhorar o recreio"])
    number: int = Field(
        ..., strict=True, ge=10, le=99, description="Candidate number used when voting", examples=[42]
    )

    @field_validator("name", "proposal")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Field is required")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def reject_display_name(cls, v):
        # "Name <addr>" would otherwise be accepted and silently reduced to addr
        if isinstance(v, str) and ("<" in v or ">" in v):
            raise ValueError("Email must be a plain address without a display name")
        return v


class CandidateCreate(CandidateBase):
    """Schema for registering a candidate."""
    pass


class CandidateRead(CandidateBase):
    """Schema for reading a candidate from the API."""

    id: UUID = Field(default_factory=uuid4)

    model_config = {
        "frozen": True,
        "from_attributes": True,
    }
