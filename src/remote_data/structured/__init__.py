"""Structured conversion of RemoteData to and from plain data.

This module provides the dict/JSON codec used to hand RemoteData
snapshots across a process boundary.
"""

from .codec import (
    CodecConfig,
    FailureModel,
    LoadingModel,
    NotAskedModel,
    RemoteDataModel,
    SuccessModel,
    from_dict,
    from_json,
    to_dict,
    to_json,
)
from .errors import DecodeError
from .parser import parse_json_if_needed
from .schema import CallableSchema, OutputSchema, PydanticSchema

__all__ = [
    "DecodeError",
    "CodecConfig",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    "RemoteDataModel",
    "NotAskedModel",
    "LoadingModel",
    "FailureModel",
    "SuccessModel",
    "OutputSchema",
    "CallableSchema",
    "PydanticSchema",
    "parse_json_if_needed",
]
