"""
FastAPI dependencies that resolve services from the application's
container.
"""

from fastapi import Request

from voting_api.app.core.container import Container
from voting_api.app.services.candidate_service import CandidateService
from voting_api.app.services.vote_service import VoteService


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_candidate_service(request: Request) -> CandidateService:
    return get_container(request).candidate_service


def get_vote_service(request: Request) -> VoteService:
    return get_container(request).vote_service
