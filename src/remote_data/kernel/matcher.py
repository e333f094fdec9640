"""Handler record for exhaustive dispatch over RemoteData variants."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

E = TypeVar("E")
A = TypeVar("A")
G = TypeVar("G")
H = TypeVar("H")
I = TypeVar("I")  # noqa: E741
J = TypeVar("J")


@dataclass(frozen=True, slots=True)
class Matcher(Generic[E, A, G, H, I, J]):
    """One handler per variant, all four required.

    Branches may return different types; `match` returns their union.

    Attributes:
        not_asked: Called with no arguments for NotAsked.
        loading: Called with no arguments for Loading.
        failure: Called with the error of a Failure.
        success: Called with the data of a Success.
    """

    not_asked: Callable[[], G]
    loading: Callable[[], H]
    failure: Callable[[E], I]
    success: Callable[[A], J]
