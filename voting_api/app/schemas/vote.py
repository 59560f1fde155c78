"""
Pydantic models for vote data.

Field names are snake_case in Python and camelCase on the wire
(``raaAluno``, ``candidateNumber``, ``votedAt``); either spelling is
accepted on input.
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VoteBase(BaseModel):
    raa_aluno: str = Field(
        ...,
        alias="raaAluno",
        min_length=1,
        description="Student registration of the voter",
        examples=["RA123"],
    )
    candidate_number: int = Field(..., alias="candidateNumber", strict=True, ge=10, le=99, examples=[42])

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("raa_aluno")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Field is required")
        return v


class VoteCreate(VoteBase):
    """Schema for casting a vote."""
    pass


class VoteRead(VoteBase):
    """Schema for reading a vote from the API."""

    id: UUID = Field(default_factory=uuid4)
    voted_at: datetime = Field(default_factory=utcnow, alias="votedAt")

    model_config = {
        "populate_by_name": True,
        "frozen": True,
        "from_attributes": True,
    }
