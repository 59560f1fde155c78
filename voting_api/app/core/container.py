"""
Composition root.

The ``Container`` owns the candidate and vote stores for the lifetime
of an application instance and builds the services on top of them.
``create_app`` attaches one container to ``app.state``; tests build
their own to get isolated state.
"""

from dataclasses import dataclass, field

from voting_api.app.repositories.candidate_repository import (
    CandidateRepository,
    InMemoryCandidateRepository,
)
from voting_api.app.repositories.vote_repository import InMemoryVoteRepository, VoteRepository
from voting_api.app.services.candidate_service import CandidateService
from voting_api.app.services.vote_service import VoteService


@dataclass
class Container:
    candidates: CandidateRepository = field(default_factory=InMemoryCandidateRepository)
    votes: VoteRepository = field(default_factory=InMemoryVoteRepository)

    def __post_init__(self) -> None:
        self.candidate_service = CandidateService(self.candidates)
        self.vote_service = VoteService(self.votes, self.candidates)
