"""
Candidate store.

``CandidateRepository`` describes the capabilities the services rely
on; ``InMemoryCandidateRepository`` keeps candidates in a list owned
by the instance.  A durable implementation only has to provide the
same methods.

The store does not enforce number uniqueness itself.  Callers that
need "check then insert" to be atomic hold ``locked()`` around both
steps; the lock is re‑entrant so the store's own methods can be
called inside it.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import ContextManager, Iterator, List, Optional, Protocol

from voting_api.app.schemas.candidate import CandidateRead


class CandidateRepository(Protocol):
    def add(self, candidate: CandidateRead) -> None: ...

    def get_all(self) -> List[CandidateRead]: ...

    def get_by_number(self, number: int) -> Optional[CandidateRead]: ...

    def locked(self) -> ContextManager[None]: ...


class InMemoryCandidateRepository:
    """Process‑lifetime candidate storage, in insertion order."""

    def __init__(self) -> None:
        self._candidates: List[CandidateRead] = []
        self._lock = threading.RLock()

    def add(self, candidate: CandidateRead) -> None:
        with self._lock:
            self._candidates.append(candidate)

    def get_all(self) -> List[CandidateRead]:
        with self._lock:
            return list(self._candidates)

    def get_by_number(self, number: int) -> Optional[CandidateRead]:
        with self._lock:
            for candidate in self._candidates:
                if candidate.number == number:
                    return candidate
            return None

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield
