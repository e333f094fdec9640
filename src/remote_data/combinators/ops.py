"""Combinator primitives: map, chain, ap, alt, bimap and friends.

Every combinator is total and pure. Values that are not Success pass
through unchanged, and multi-input combinators return the first
non-Success input, left to right.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar, assert_never

from remote_data.kernel import Failure, Loading, Matcher, NotAsked, RemoteData, Success

E = TypeVar("E")
E2 = TypeVar("E2")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
G = TypeVar("G")
H = TypeVar("H")
I = TypeVar("I")  # noqa: E741
J = TypeVar("J")


def of(a: A) -> RemoteData[Any, A]:
    """Always returns a Success with `a` inside.

    This is the unit of the applicative and of the monad.
    """
    return Success(a)


def map(f: Callable[[A], B], rd: RemoteData[E, A]) -> RemoteData[E, B]:
    """Apply a function to a Success. Any other variant is returned unchanged.

    Args:
        f: Function to call with the data inside the Success.
        rd: The RemoteData that can be any variant.

    Returns:
        RemoteData[E, B]: `Success(f(data))`, or `rd` itself.

    Example:
        >>> map(lambda x: x * 2, Success(4))
        Success(data=8)
    """
    match rd:
        case Success(data=data):
            return Success(f(data))
        case NotAsked() | Loading() | Failure():
            return rd
        case _:
            assert_never(rd)


def map_failure(f: Callable[[E], E2], rd: RemoteData[E, A]) -> RemoteData[E2, A]:
    """Apply a function to a Failure. Any other variant is returned unchanged."""
    match rd:
        case Failure(error=error):
            return Failure(f(error))
        case NotAsked() | Loading() | Success():
            return rd
        case _:
            assert_never(rd)


def bimap(
    failure_fn: Callable[[E], E2],
    success_fn: Callable[[A], B],
    rd: RemoteData[E, A],
) -> RemoteData[E2, B]:
    """Run `success_fn` on a Success or `failure_fn` on a Failure.

    NotAsked and Loading are returned unchanged and neither function runs.

    Example:
        >>> bimap(lambda e: f"Err: {e}", lambda x: x * 2, Failure("not found"))
        Failure(error='Err: not found')
    """
    match rd:
        case Success(data=data):
            return Success(success_fn(data))
        case Failure(error=error):
            return Failure(failure_fn(error))
        case NotAsked() | Loading():
            return rd
        case _:
            assert_never(rd)


def chain(f: Callable[[A], RemoteData[E, B]], rd: RemoteData[E, A]) -> RemoteData[E, B]:
    """Monadic bind: replace a Success with `f(data)`.

    Args:
        f: Function to call with the data inside the Success. Must return a RemoteData.
        rd: The RemoteData that can be any variant.

    Returns:
        RemoteData[E, B]: Whatever `f` returned, or `rd` unchanged.
    """
    match rd:
        case Success(data=data):
            return f(data)
        case NotAsked() | Loading() | Failure():
            return rd
        case _:
            assert_never(rd)


def ap(rd_fn: RemoteData[E, Callable[[A], B]], rd: RemoteData[E, A]) -> RemoteData[E, B]:
    """Apply a function wrapped in a Success to a value wrapped in a Success.

    Semantics:
        - `rd` is checked first: if it is not a Success it is returned
        - only then `rd_fn` is checked: if it is not a Success it is returned
        - otherwise the result is `Success(fn(data))`

    The value-before-function order keeps the interchange law intact.
    """
    match rd:
        case Success(data=data):
            return map(lambda fn: fn(data), rd_fn)
        case NotAsked() | Loading() | Failure():
            return rd
        case _:
            assert_never(rd)


def map2(
    f: Callable[[A, B], C],
    rd1: RemoteData[E, A],
    rd2: RemoteData[E, B],
) -> RemoteData[E, C]:
    """Call `f` with the data of both RemoteData if both are Success.

    Otherwise the first one that is not a Success is returned.

    Example:
        >>> map2(lambda x, y: x + y, Success(4), Success(2))
        Success(data=6)
    """
    return chain(lambda a: map(lambda b: f(a, b), rd2), rd1)


def map3(
    f: Callable[[A, B, C], D],
    rd1: RemoteData[E, A],
    rd2: RemoteData[E, B],
    rd3: RemoteData[E, C],
) -> RemoteData[E, D]:
    """Three-input `map2`: same left-to-right short-circuit."""
    return chain(lambda a: map2(lambda b, c: f(a, b, c), rd2, rd3), rd1)


def sequence(rds: Iterable[RemoteData[E, A]]) -> RemoteData[E, list[A]]:
    """Turn a collection of RemoteData into a RemoteData of a list.

    Stops at the first non-Success and returns it. An empty input
    gives `Success([])`.
    """
    collected: list[A] = []
    for rd in rds:
        match rd:
            case Success(data=data):
                collected.append(data)
            case NotAsked() | Loading() | Failure():
                return rd
            case _:
                assert_never(rd)
    return Success(collected)


def traverse(f: Callable[[A], RemoteData[E, B]], items: Iterable[A]) -> RemoteData[E, list[B]]:
    """Map `f` over `items` and `sequence` the results.

    `f` is not called again once it has returned a non-Success.
    """
    return sequence(f(item) for item in items)


def alt(default: RemoteData[E, A], rd: RemoteData[E, A]) -> RemoteData[E, A]:
    """Return `rd` if it is a Success, else `default` whatever its variant.

    Example:
        >>> alt(Success(2), Failure("err"))
        Success(data=2)
    """
    match rd:
        case Success():
            return rd
        case NotAsked() | Loading() | Failure():
            return default
        case _:
            assert_never(rd)


def equals(a: RemoteData[Any, Any], b: RemoteData[Any, Any]) -> bool:
    """Check if two RemoteData are the same variant.

    Only the variants are compared, never the values inside:
    `equals(Failure("a"), Failure("b"))` is True. Use `==` to compare
    payloads as well.
    """
    return a.tag == b.tag


def unwrap(default: B, f: Callable[[A], B], rd: RemoteData[E, A]) -> B:
    """Return `f(data)` for a Success, otherwise `default`."""
    match rd:
        case Success(data=data):
            return f(data)
        case NotAsked() | Loading() | Failure():
            return default
        case _:
            assert_never(rd)


def unpack(default: Callable[[], B], f: Callable[[A], B], rd: RemoteData[E, A]) -> B:
    """Like `unwrap`, but the default is a thunk called only when needed."""
    match rd:
        case Success(data=data):
            return f(data)
        case NotAsked() | Loading() | Failure():
            return default()
        case _:
            assert_never(rd)


def with_default(default: A, rd: RemoteData[E, A]) -> A:
    match rd:
        case Success(data=data):
            return data
        case NotAsked() | Loading() | Failure():
            return default
        case _:
            assert_never(rd)


def match(matcher: Matcher[E, A, G, H, I, J], rd: RemoteData[E, A]) -> G | H | I | J:
    """Call exactly one handler of `matcher`, chosen by the variant of `rd`.

    Example:
        >>> match(
        ...     Matcher(
        ...         not_asked=lambda: "Empty",
        ...         loading=lambda: "Loading...",
        ...         failure=lambda e: f"Err: {e}",
        ...         success=lambda d: f"Data: {d}",
        ...     ),
        ...     Success(4),
        ... )
        'Data: 4'
    """
    match rd:
        case NotAsked():
            return matcher.not_asked()
        case Loading():
            return matcher.loading()
        case Failure(error=error):
            return matcher.failure(error)
        case Success(data=data):
            return matcher.success(data)
        case _:
            assert_never(rd)
