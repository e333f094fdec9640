"""Core kernel abstractions - pure and dependency-free."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, Literal, TypeAlias, TypeVar, Union, final

from typing_extensions import TypeIs

E = TypeVar("E")
A = TypeVar("A")

Tag = Literal["NotAsked", "Loading", "Failure", "Success"]


@final
@dataclass(frozen=True, slots=True)
class NotAsked:
    """We have not asked for the data yet."""

    tag: ClassVar[Literal["NotAsked"]] = "NotAsked"


@final
@dataclass(frozen=True, slots=True)
class Loading:
    """We asked for the data but have not received an answer yet."""

    tag: ClassVar[Literal["Loading"]] = "Loading"


@final
@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """We received a failure response.

    Attributes:
        error: Anything that represents the failure.
    """

    error: E
    tag: ClassVar[Literal["Failure"]] = "Failure"


@final
@dataclass(frozen=True, slots=True)
class Success(Generic[A]):
    """We received the data successfully.

    Attributes:
        data: The successful payload from the response.
    """

    data: A
    tag: ClassVar[Literal["Success"]] = "Success"


# Closed union: no shared base class, the four variants above are the only members.
RemoteData: TypeAlias = Union[NotAsked, Loading, Failure[E], Success[A]]


def not_asked() -> RemoteData[E, A]:
    return NotAsked()


def loading() -> RemoteData[E, A]:
    return Loading()


def failure(error: E) -> RemoteData[E, A]:
    return Failure(error)


def success(data: A) -> RemoteData[E, A]:
    return Success(data)


def is_not_asked(rd: RemoteData[E, A]) -> TypeIs[NotAsked]:
    """Check if the rd is of type NotAsked."""
    return isinstance(rd, NotAsked)


def is_loading(rd: RemoteData[E, A]) -> TypeIs[Loading]:
    """Check if the rd is of type Loading."""
    return isinstance(rd, Loading)


def is_failure(rd: RemoteData[E, A]) -> TypeIs[Failure[E]]:
    """Check if the rd is of type Failure."""
    return isinstance(rd, Failure)


def is_success(rd: RemoteData[E, A]) -> TypeIs[Success[A]]:
    """Check if the rd is of type Success."""
    return isinstance(rd, Success)
