from .combinators import (
    SRD,
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
from .kernel import (
    Failure,
    Loading,
    Matcher,
    NotAsked,
    RemoteData,
    Success,
    failure,
    is_failure,
    is_loading,
    is_not_asked,
    is_success,
    loading,
    not_asked,
    success,
)

__all__ = [
    # Core
    "RemoteData",
    "NotAsked",
    "Loading",
    "Failure",
    "Success",
    "Matcher",
    # Constructors
    "not_asked",
    "loading",
    "failure",
    "success",
    # Predicates
    "is_not_asked",
    "is_loading",
    "is_failure",
    "is_success",
    # Combinators
    "of",
    "map",
    "map2",
    "map3",
    "map_failure",
    "bimap",
    "chain",
    "ap",
    "alt",
    "sequence",
    "traverse",
    "equals",
    "unwrap",
    "unpack",
    "with_default",
    "match",
    # Static-land namespace
    "SRD",
]
