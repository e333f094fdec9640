"""Combinators - lawful operations over RemoteData."""

from remote_data.combinators.namespace import SRD
from remote_data.combinators.ops import (
    alt,
    ap,
    bimap,
    chain,
    equals,
    map,
    map2,
    map3,
    map_failure,
    match,
    of,
    sequence,
    traverse,
    unpack,
    unwrap,
    with_default,
)

__all__ = [
    "SRD",
    # Functor / Bifunctor
    "map",
    "map2",
    "map3",
    "map_failure",
    "bimap",
    # Applicative / Monad
    "of",
    "ap",
    "chain",
    "sequence",
    "traverse",
    # Alt
    "alt",
    # Setoid
    "equals",
    # Eliminators
    "unwrap",
    "unpack",
    "with_default",
    "match",
]
