"""
Domain errors raised by the service layer.

Every error carries the HTTP status it maps to and a user‑facing
message.  The API layer registers a single handler for ``VotingError``
(see ``main.create_app``), so services never need to know about
FastAPI.  All three kinds are request‑scoped rejections, not system
faults.
"""

from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError


class VotingError(Exception):
    """Base class for errors reported back to API clients."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(VotingError):
    """One or more input fields failed their structural constraints.

    ``errors`` maps each failing field (by its wire name) to the list
    of messages describing what is wrong with it.
    """

    def __init__(self, errors: Dict[str, List[str]], message: str = "One or more validation errors occurred.") -> None:
        super().__init__(message)
        self.errors = errors

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "errors": self.errors}

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        return cls(collect_field_errors(exc.errors()))


class ConflictError(VotingError):
    """A business rule was violated, e.g. a candidate number is taken."""


class NotFoundError(VotingError):
    """A referenced record does not exist."""


def collect_field_errors(raw_errors) -> Dict[str, List[str]]:
    """Group pydantic/FastAPI error entries by field name.

    The location prefix added by FastAPI (``body``, ``path``,
    ``query``) is dropped so that fields are reported by the same name
    the client sent.
    """
    errors: Dict[str, List[str]] = {}
    for entry in raw_errors:
        loc = [str(part) for part in entry.get("loc", ())]
        if loc and loc[0] in {"body", "path", "query"}:
            loc = loc[1:]
        if entry.get("type") == "json_invalid":
            # loc carries the byte offset of the syntax error, not a field
            field = "body"
        else:
            field = ".".join(loc) or "body"
        errors.setdefault(field, []).append(entry.get("msg", "Invalid value"))
    return errors
