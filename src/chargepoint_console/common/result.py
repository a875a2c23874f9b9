"""Tagged success/failure union for backend calls.

A call resolves to exactly one of ``Success`` or ``Failure``::

    match await create_element(client, "/api/user", body, User):
        case Success(value=user):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass

from .schemas import Diagnostic

__all__ = ["Failure", "Result", "Success"]


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Call produced a decoded value."""

    value: T


@dataclass(frozen=True, slots=True)
class Failure[E]:
    """Call produced an error value.

    ``diagnostic`` is set when the error was synthesized or classified locally
    rather than decoded from the backend's answer.
    """

    error: E
    diagnostic: Diagnostic | None = None


type Result[T, E] = Success[T] | Failure[E]
