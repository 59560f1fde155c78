"""
Vote endpoints for API v1.

Votes are cast for a candidate number and can be listed per
candidate.  Casting a vote for a number that no candidate holds is
rejected with HTTP 400.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from voting_api.app.api.deps import get_vote_service
from voting_api.app.schemas.vote import VoteCreate, VoteRead
from voting_api.app.services.vote_service import VoteService

router = APIRouter()


@router.post("", response_model=VoteRead, status_code=status.HTTP_201_CREATED)
async def register_vote(
    vote_in: VoteCreate,
    service: VoteService = Depends(get_vote_service),
) -> VoteRead:
    """Cast a vote for an existing candidate."""
    return await service.register_vote(vote_in)


@router.get("", response_model=List[VoteRead])
async def list_votes(
    service: VoteService = Depends(get_vote_service),
) -> List[VoteRead]:
    """Return every vote cast so far."""
    return await service.list_votes()


@router.get("/{candidate_number}", response_model=List[VoteRead])
async def list_votes_by_candidate(
    candidate_number: int,
    service: VoteService = Depends(get_vote_service),
) -> List[VoteRead]:
    """Return the votes for a candidate number.

    The number must be between 10 and 99 (HTTP 400 otherwise).  A
    number without votes, or without a candidate, yields an empty list.
    """
    return await service.list_votes_by_candidate(candidate_number)
