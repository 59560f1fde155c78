"""
Pytest configuration and shared fixtures for the Voting API tests.

Every test gets its own container, so stores never leak state between
tests.  Async tests run in pytest-asyncio's auto mode (see
pyproject.toml).
"""

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from voting_api.app.core.config import Settings
from voting_api.app.core.container import Container
from voting_api.app.main import create_app
from voting_api.app.repositories.candidate_repository import InMemoryCandidateRepository
from voting_api.app.repositories.vote_repository import InMemoryVoteRepository
from voting_api.app.services.candidate_service import CandidateService
from voting_api.app.services.vote_service import VoteService


@pytest.fixture
def candidate_repo() -> InMemoryCandidateRepository:
    return InMemoryCandidateRepository()


@pytest.fixture
def vote_repo() -> InMemoryVoteRepository:
    return InMemoryVoteRepository()


@pytest.fixture
def candidate_service(candidate_repo: InMemoryCandidateRepository) -> CandidateService:
    return CandidateService(candidate_repo)


@pytest.fixture
def vote_service(vote_repo: InMemoryVoteRepository, candidate_repo: InMemoryCandidateRepository) -> VoteService:
    return VoteService(vote_repo, candidate_repo)


@pytest.fixture
def candidate_payload() -> Dict[str, Any]:
    """A valid candidate registration body."""
    return {
        "name": "Ana Silva",
        "email": "ana@x.com",
        "turma": 3,
        "proposal": "Melhorar o recreio",
        "number": 42,
    }


@pytest.fixture
def container() -> Container:
    return Container()


@pytest.fixture
def client(container: Container) -> TestClient:
    """Test client over a fresh app with empty stores."""
    app = create_app(Settings(debug=True, api_prefix="/api"), container=container)
    return TestClient(app, raise_server_exceptions=False)
