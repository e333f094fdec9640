from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from remote_data import Failure, Loading, NotAsked, RemoteData, Success, failure, loading, not_asked, success

n: RemoteData[str, int] = not_asked()
l: RemoteData[str, int] = loading()  # noqa: E741
fa: RemoteData[str, int] = failure("msg")
su: RemoteData[str, int] = success(5)

FIXTURES: tuple[RemoteData[str, int], ...] = (n, l, fa, su)


def f(x: int) -> int:
    return x * 2


def g(x: int) -> int:
    return x * 10


def h(x: int) -> int:
    return x + 1


def i(x: int) -> int:
    return x - 6


def f1(x: str) -> str:
    return x + " f"


def g1(x: str) -> str:
    return x + " g"


def add(x: int, y: int) -> int:
    return x + y


def double(x: int) -> int:
    return x * 2


# One Kleisli arrow per variant, for the monad laws
KLEISLI = (
    lambda x: Success(x * 2),
    lambda x: Failure("msg2"),
    lambda x: NotAsked(),
    lambda x: Loading(),
)


@dataclass
class Recorder:
    """Callable that records every call it receives."""

    result: Any = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.result
