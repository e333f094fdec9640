"""Combinator laws as executable checks.

Each function evaluates both sides of one law and compares them with `==`,
which compares variant and payload. A lawful implementation returns True
for every input.

# 1. Functor identity:        map(id, m) == m
# 2. Functor composition:     map(f . g, m) == map(f, map(g, m))
# 3. Bifunctor identity:      bimap(id, id, m) == m
# 4. Bifunctor composition:   bimap(f . g, h . i, m) == bimap(f, h, bimap(g, i, m))
# 5. Alt associativity:       alt(alt(a, b), c) == alt(a, alt(b, c))
# 6. Alt distributivity:      map(f, alt(a, b)) == alt(map(f, a), map(f, b))
# 7. Chain associativity:     chain(f, chain(g, m)) == chain(x -> chain(f, g(x)), m)
# 8. Monad left identity:     chain(f, of(a)) == f(a)
# 9. Monad right identity:    chain(of, m) == m
# 10. Applicative identity:   ap(of(id), m) == m
# 11. Homomorphism:           ap(of(f), of(x)) == of(f(x))
# 12. Interchange:            ap(m, of(x)) == ap(of(f -> f(x)), m)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from remote_data.combinators.ops import alt, ap, bimap, chain, map, of
from remote_data.kernel import RemoteData

T = TypeVar("T")

Fn = Callable[[Any], Any]


def identity(x: T) -> T:
    return x


def functor_identity(m: RemoteData[Any, Any]) -> bool:
    return map(identity, m) == m


def functor_composition(m: RemoteData[Any, Any], f: Fn, g: Fn) -> bool:
    return map(lambda x: f(g(x)), m) == map(f, map(g, m))


def bifunctor_identity(m: RemoteData[Any, Any]) -> bool:
    return bimap(identity, identity, m) == m


def bifunctor_composition(m: RemoteData[Any, Any], f: Fn, g: Fn, h: Fn, i: Fn) -> bool:
    """`f`/`g` act on the failure side, `h`/`i` on the success side."""
    return bimap(lambda e: f(g(e)), lambda a: h(i(a)), m) == bimap(f, h, bimap(g, i, m))


def alt_associativity(
    a: RemoteData[Any, Any],
    b: RemoteData[Any, Any],
    c: RemoteData[Any, Any],
) -> bool:
    return alt(alt(a, b), c) == alt(a, alt(b, c))


def alt_distributivity(a: RemoteData[Any, Any], b: RemoteData[Any, Any], f: Fn) -> bool:
    return map(f, alt(a, b)) == alt(map(f, a), map(f, b))


def chain_associativity(
    m: RemoteData[Any, Any],
    f: Callable[[Any], RemoteData[Any, Any]],
    g: Callable[[Any], RemoteData[Any, Any]],
) -> bool:
    return chain(f, chain(g, m)) == chain(lambda x: chain(f, g(x)), m)


def left_identity(f: Callable[[Any], RemoteData[Any, Any]], a: Any) -> bool:
    return chain(f, of(a)) == f(a)


def right_identity(m: RemoteData[Any, Any]) -> bool:
    return chain(of, m) == m


def applicative_identity(m: RemoteData[Any, Any]) -> bool:
    return ap(of(identity), m) == m


def homomorphism(f: Fn, x: Any) -> bool:
    return ap(of(f), of(x)) == of(f(x))


def interchange(m: RemoteData[Any, Fn], x: Any) -> bool:
    """`m` is the function-bearing side and may be any variant."""
    return ap(m, of(x)) == ap(of(lambda fn: fn(x)), m)
