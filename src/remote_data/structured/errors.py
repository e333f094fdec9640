"""Error types for RemoteData decoding."""

from __future__ import annotations


class DecodeError(Exception):
    """Error raised when a value cannot be decoded into a RemoteData.

    Attributes:
        raw_value: The input that was being decoded, untouched.
        tag: The variant named by the input, when it named a known one.
        field: The key (as configured in CodecConfig) whose content was rejected,
            or None when the input as a whole was unusable.
    """

    def __init__(
        self,
        message: str,
        raw_value: object,
        *,
        tag: str | None = None,
        field: str | None = None,
    ) -> None:
        self.raw_value = raw_value
        self.tag = tag
        self.field = field
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"DecodeError({str(self)!r}, tag={self.tag!r}, field={self.field!r}, "
            f"raw_value={self.raw_value!r})"
        )
