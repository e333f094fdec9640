"""Kernel layer - the RemoteData union, constructors and predicates."""

from remote_data.kernel.matcher import Matcher
from remote_data.kernel.variants import (
    Failure,
    Loading,
    NotAsked,
    RemoteData,
    Success,
    Tag,
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
    "RemoteData",
    "Tag",
    # Variants
    "NotAsked",
    "Loading",
    "Failure",
    "Success",
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
    "Matcher",
]
