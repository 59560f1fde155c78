"""
Vote store.

Votes reference candidates only by number; the store keeps no link to
the candidate store and never re‑checks the reference.
"""

from __future__ import annotations

import threading
from typing import List, Protocol

from voting_api.app.schemas.vote import VoteRead


class VoteRepository(Protocol):
    def add(self, vote: VoteRead) -> None: ...

    def get_all(self) -> List[VoteRead]: ...

    def get_by_candidate_number(self, number: int) -> List[VoteRead]: ...


class InMemoryVoteRepository:
    """Process‑lifetime vote storage, in insertion order."""

    def __init__(self) -> None:
        self._votes: List[VoteRead] = []
        self._lock = threading.RLock()

    def add(self, vote: VoteRead) -> None:
        with self._lock:
            self._votes.append(vote)

    def get_all(self) -> List[VoteRead]:
        with self._lock:
            return list(self._votes)

    def get_by_candidate_number(self, number: int) -> List[VoteRead]:
        with self._lock:
            return [vote for vote in self._votes if vote.candidate_number == number]
