"""
Candidate endpoints for API v1.

Candidates can be registered and listed; there is no update or delete.
Validation and conflict errors raised by the service are turned into
HTTP 400 responses by the application's exception handlers.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from voting_api.app.api.deps import get_candidate_service
from voting_api.app.schemas.candidate import CandidateCreate, CandidateRead
from voting_api.app.services.candidate_service import CandidateService

router = APIRouter()


@router.post("", response_model=CandidateRead, status_code=status.HTTP_201_CREATED)
async def create_candidate(
    candidate_in: CandidateCreate,
    service: CandidateService = Depends(get_candidate_service),
) -> CandidateRead:
    """Register a new candidate.

    Returns HTTP 400 when a field is invalid or when another candidate
    already uses the requested number.
    """
    return await service.create_candidate(candidate_in)


@router.get("", response_model=List[CandidateRead])
async def list_candidates(
    service: CandidateService = Depends(get_candidate_service),
) -> List[CandidateRead]:
    """Return every registered candidate in registration order."""
    return await service.list_candidates()
