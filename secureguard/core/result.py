"""Result types for railway-oriented programming.

Operations that can fail for business reasons (wrong captcha, bad password,
locked account, denied access) return a Result instead of raising. Callers
match on the variant and decide what to audit or show.

Usage:
    result = await machine.submit_credentials(...)
    match result:
        case Success(value=step):
            print(step.state)
        case Failure(error=LockedAccountError()):
            print("locked")
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Typed error value describing why the operation failed.
    """

    error: E


Result = Success[T] | Failure[E]
