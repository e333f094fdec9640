"""Conversion of RemoteData to and from plain dicts and JSON.

Wire shape (field names configurable through CodecConfig):

    {"tag": "NotAsked"}
    {"tag": "Loading"}
    {"tag": "Failure", "error": ...}
    {"tag": "Success", "data": ...}

The envelope is validated with a pydantic discriminated union. Payloads are
kept as-is unless CodecConfig carries a schema for them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Annotated, Any, Literal, Union, assert_never

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from remote_data.kernel import Failure, Loading, NotAsked, RemoteData, Success

from .errors import DecodeError
from .parser import parse_json_if_needed
from .schema import OutputSchema

logger = logging.getLogger(__name__)


class NotAskedModel(BaseModel):
    tag: Literal["NotAsked"]


class LoadingModel(BaseModel):
    tag: Literal["Loading"]


class FailureModel(BaseModel):
    tag: Literal["Failure"]
    error: Any


class SuccessModel(BaseModel):
    tag: Literal["Success"]
    data: Any


RemoteDataModel = Annotated[
    Union[NotAskedModel, LoadingModel, FailureModel, SuccessModel],
    Field(discriminator="tag"),
]

_envelope = TypeAdapter(RemoteDataModel)

_TAGS = frozenset({"NotAsked", "Loading", "Failure", "Success"})


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for the RemoteData codec.

    Attributes:
        tag_field: Key holding the variant name.
        error_field: Key holding the Failure payload.
        data_field: Key holding the Success payload.
        error_schema: Optional schema applied to Failure payloads on decode.
        data_schema: Optional schema applied to Success payloads on decode.
    """

    tag_field: str = "tag"
    error_field: str = "error"
    data_field: str = "data"
    error_schema: OutputSchema[Any] | None = None
    data_schema: OutputSchema[Any] | None = None


DEFAULT_CONFIG = CodecConfig()


# Serializes nested models, dataclasses, dates and UUIDs inside any payload
_payload = TypeAdapter(Any)


def _encode(rd: RemoteData[Any, Any], config: CodecConfig) -> dict[str, Any]:
    match rd:
        case NotAsked() | Loading():
            return {config.tag_field: rd.tag}
        case Failure(error=error):
            return {config.tag_field: rd.tag, config.error_field: error}
        case Success(data=data):
            return {config.tag_field: rd.tag, config.data_field: data}
        case _:
            assert_never(rd)


def to_dict(rd: RemoteData[Any, Any], config: CodecConfig | None = None) -> dict[str, Any]:
    """Encode a RemoteData as a plain dict.

    Args:
        rd: The RemoteData to encode.
        config: Field names to use; defaults to `tag`/`error`/`data`.

    Returns:
        dict[str, Any]: A new dict; models and dataclasses in the payload become dicts.
    """
    return _payload.dump_python(_encode(rd, config or DEFAULT_CONFIG))


def to_json(rd: RemoteData[Any, Any], config: CodecConfig | None = None) -> str:
    """Encode a RemoteData as JSON text.

    Payloads go through pydantic serialization, so dates, UUIDs and models
    nested anywhere in them are emitted in their JSON form.
    """
    return _payload.dump_json(_encode(rd, config or DEFAULT_CONFIG)).decode()


def _validate_payload(
    schema: OutputSchema[Any] | None,
    payload: Any,
    raw_value: object,
    tag: str,
    field: str,
) -> Any:
    if schema is None:
        return payload
    try:
        return schema.validate(payload)
    except Exception as e:
        logger.debug("%s payload in %r rejected by %s: %s", tag, field, schema.describe(), e)
        raise DecodeError(
            f"{tag} payload in '{field}' rejected by {schema.describe()}: {e}",
            raw_value,
            tag=tag,
            field=field,
        ) from e


def _rejected_field(error: ValidationError, config: CodecConfig) -> str:
    """Map the first envelope error back to the configured key it concerns."""
    loc = error.errors()[0]["loc"]
    # Discriminator errors have an empty location
    if not loc:
        return config.tag_field
    return {"error": config.error_field, "data": config.data_field}.get(str(loc[-1]), config.tag_field)


def from_dict(value: Any, config: CodecConfig | None = None) -> RemoteData[Any, Any]:
    """Decode a plain mapping into a RemoteData.

    Semantics:
        - the mapping must carry the tag field with one of the four variant names
        - Failure needs the error field, Success needs the data field
        - other keys are ignored
        - payload schemas from `config` are applied after the envelope is valid

    Args:
        value: The mapping to decode.
        config: Field names and payload schemas.

    Returns:
        RemoteData[Any, Any]: A fresh RemoteData value.

    Raises:
        DecodeError: If `value` is not a mapping, the envelope is invalid,
            or a payload schema rejects its payload.
    """
    config = config or DEFAULT_CONFIG
    if not isinstance(value, Mapping):
        raise DecodeError(f"Expected mapping, got {type(value).__name__}", value)

    # error_field and data_field may name the same key
    fields = (
        ("tag", config.tag_field),
        ("error", config.error_field),
        ("data", config.data_field),
    )
    envelope = {canonical: value[key] for canonical, key in fields if key in value}
    tag = envelope.get("tag")

    try:
        model = _envelope.validate_python(envelope)
    except ValidationError as e:
        field = _rejected_field(e, config)
        logger.debug("invalid RemoteData envelope %r at %r: %s", value, field, e)
        raise DecodeError(
            f"Invalid RemoteData envelope at '{field}': {e.error_count()} error(s)",
            value,
            tag=tag if isinstance(tag, str) and tag in _TAGS else None,
            field=field,
        ) from e

    match model:
        case NotAskedModel():
            return NotAsked()
        case LoadingModel():
            return Loading()
        case FailureModel(error=error):
            return Failure(
                _validate_payload(config.error_schema, error, value, "Failure", config.error_field)
            )
        case SuccessModel(data=data):
            return Success(
                _validate_payload(config.data_schema, data, value, "Success", config.data_field)
            )
        case _:
            assert_never(model)


def from_json(text: str | bytes, config: CodecConfig | None = None) -> RemoteData[Any, Any]:
    """Parse JSON text and decode it with `from_dict`."""
    return from_dict(parse_json_if_needed(text), config)
