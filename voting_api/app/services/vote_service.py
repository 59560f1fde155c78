"""
Service layer for votes.

A vote is accepted only if a candidate with the given number exists
at the time it is cast.  The reference is checked once and never
re‑verified.  The same voter may vote more than once; no voter
deduplication is performed.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Union

from pydantic import ValidationError as PydanticValidationError

from voting_api.app.core.errors import NotFoundError, ValidationError
from voting_api.app.repositories.candidate_repository import CandidateRepository
from voting_api.app.repositories.vote_repository import VoteRepository
from voting_api.app.schemas.vote import VoteCreate, VoteRead

logger = logging.getLogger(__name__)

MIN_CANDIDATE_NUMBER = 10
MAX_CANDIDATE_NUMBER = 99


class VoteService:
    """Business rules for casting and listing votes."""

    def __init__(self, votes: VoteRepository, candidates: CandidateRepository) -> None:
        self._votes = votes
        self._candidates = candidates

    async def register_vote(self, data: Union[VoteCreate, Mapping[str, Any]]) -> VoteRead:
        """Record a vote for an existing candidate.

        Raises ``ValidationError`` for invalid fields and
        ``NotFoundError`` when no candidate has the given number.
        """
        vote_in = self._validate(data)
        if self._candidates.get_by_number(vote_in.candidate_number) is None:
            logger.warning("Rejected vote from %r: no candidate number %s", vote_in.raa_aluno, vote_in.candidate_number)
            raise NotFoundError("candidate not found for given number")
        vote = VoteRead(raa_aluno=vote_in.raa_aluno, candidate_number=vote_in.candidate_number)
        self._votes.add(vote)
        logger.info("Registered vote %s for candidate %s", vote.id, vote.candidate_number)
        return vote

    async def list_votes(self) -> List[VoteRead]:
        return self._votes.get_all()

    async def list_votes_by_candidate(self, candidate_number: int) -> List[VoteRead]:
        """Return every vote cast for ``candidate_number``.

        The number must lie in [10, 99]; it does not have to belong to a
        registered candidate, in which case the result is empty.
        """
        if not MIN_CANDIDATE_NUMBER <= candidate_number <= MAX_CANDIDATE_NUMBER:
            raise ValidationError(
                {
                    "candidateNumber": [
                        f"Candidate number must be between {MIN_CANDIDATE_NUMBER} and {MAX_CANDIDATE_NUMBER}."
                    ]
                },
                message="Invalid candidate number.",
            )
        return self._votes.get_by_candidate_number(candidate_number)

    @staticmethod
    def _validate(data: Union[VoteCreate, Mapping[str, Any]]) -> VoteCreate:
        if isinstance(data, VoteCreate):
            return data
        try:
            return VoteCreate.model_validate(data)
        except PydanticValidationError as exc:
            raise ValidationError.from_pydantic(exc) from exc
