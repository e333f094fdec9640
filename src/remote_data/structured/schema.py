"""Schema abstractions for payload validation and casting."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class OutputSchema(Protocol[T_co]):
    """Protocol for payload schemas.

    Schemas validate and transform raw values into structured types.
    """

    def validate(self, value: Any) -> T_co:
        """Validate and transform the input value.

        Args:
            value: The raw value to validate

        Returns:
            The validated/transformed value

        Raises:
            Exception: If validation fails
        """
        ...

    def describe(self) -> str:
        """Return a human-readable description of this schema."""
        ...


@dataclass(frozen=True)
class CallableSchema(OutputSchema[T]):
    """Payload schema backed by a plain conversion function.

    `fn` receives the raw payload and returns the decoded one; any exception
    it raises is reported by the codec as a DecodeError. Exception classes
    work too, e.g. `CallableSchema(RuntimeError)` turns error strings into
    exceptions.
    """

    fn: Callable[[Any], T]
    description: str | None = None

    def validate(self, value: Any) -> T:
        return self.fn(value)

    def describe(self) -> str:
        return self.description or getattr(self.fn, "__qualname__", repr(self.fn))


@dataclass(frozen=True)
class PydanticSchema(OutputSchema[T]):
    """Schema that validates with pydantic.

    `model` is any type pydantic understands: a `BaseModel` subclass,
    a dataclass, `int`, `list[str]` and so on.
    """

    model: type[T]
    _adapter: TypeAdapter[T] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_adapter", TypeAdapter(self.model))

    def validate(self, value: Any) -> T:
        return self._adapter.validate_python(value)

    def describe(self) -> str:
        return f"PydanticSchema({getattr(self.model, '__name__', repr(self.model))})"
