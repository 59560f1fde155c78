"""
Service layer for candidates.

Registering a candidate validates the payload, enforces the unique
candidate number rule against the candidate store and persists the new
record with a freshly generated id.  The uniqueness check and the
insert run under the store's lock, so two concurrent registrations for
the same number cannot both succeed.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Union

from pydantic import ValidationError as PydanticValidationError

from voting_api.app.core.errors import ConflictError, ValidationError
from voting_api.app.repositories.candidate_repository import CandidateRepository
from voting_api.app.schemas.candidate import CandidateCreate, CandidateRead

logger = logging.getLogger(__name__)


class CandidateService:
    """Business rules for registering and listing candidates."""

    def __init__(self, candidates: CandidateRepository) -> None:
        self._candidates = candidates

    async def create_candidate(self, data: Union[CandidateCreate, Mapping[str, Any]]) -> CandidateRead:
        """Register a new candidate and return it with its generated id.

        Raises ``ValidationError`` listing every invalid field, or
        ``ConflictError`` when another candidate already uses the
        requested number.
        """
        candidate_in = self._validate(data)
        with self._candidates.locked():
            if self._candidates.get_by_number(candidate_in.number) is not None:
                logger.warning("Rejected candidate %r: number %s already in use", candidate_in.name, candidate_in.number)
                raise ConflictError("candidate number already in use")
            candidate = CandidateRead(**candidate_in.model_dump())
            self._candidates.add(candidate)
        logger.info("Registered candidate %s with number %s", candidate.id, candidate.number)
        return candidate

    async def list_candidates(self) -> List[CandidateRead]:
        return self._candidates.get_all()

    @staticmethod
    def _validate(data: Union[CandidateCreate, Mapping[str, Any]]) -> CandidateCreate:
        if isinstance(data, CandidateCreate):
            return data
        try:
            return CandidateCreate.model_validate(data)
        except PydanticValidationError as exc:
            raise ValidationError.from_pydantic(exc) from exc
