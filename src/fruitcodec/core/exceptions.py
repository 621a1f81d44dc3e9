"""
Custom exception classes for fruitcodec.

Every decode failure surfaces as a single ``DecodeError`` whose ``kind``
identifies the failure class and whose message names the offending field
or value.
"""

from enum import Enum
from typing import Any, Iterable, Optional


class FruitCodecException(Exception):
    """Base exception class for all fruitcodec exceptions."""

    pass


class DecodeErrorKind(Enum):
    """Failure classes reported by the decoder."""

    MISSING_FIELD = "missing_field"      # Required key absent from the document
    UNKNOWN_VARIANT = "unknown_variant"  # Category label not in the label table
    INVALID_TYPE = "invalid_type"        # JSON value of the wrong type for a field
    SYNTAX = "syntax"                    # Input is not valid JSON


class DecodeError(FruitCodecException):
    """
    Raised when a document cannot be decoded into a ``Record``.

    Callers inspect ``kind`` for the failure class; ``field`` names the
    document key involved (when there is one) and ``value`` carries the
    rejected input (for unknown variants).

    Example:
        >>> raise DecodeError.missing_field("fruit")
        Traceback (most recent call last):
        ...
        fruitcodec.core.exceptions.DecodeError: missing field `fruit`
    """

    def __init__(
        self,
        kind: DecodeErrorKind,
        message: str,
        *,
        field: Optional[str] = None,
        value: Any = None,
    ):
        self.kind = kind
        self.field = field
        self.value = value
        super().__init__(message)

    @classmethod
    def missing_field(cls, field: str) -> "DecodeError":
        return cls(DecodeErrorKind.MISSING_FIELD, f"missing field `{field}`", field=field)

    @classmethod
    def unknown_variant(
        cls,
        value: str,
        expected: Iterable[str],
        *,
        field: Optional[str] = None,
    ) -> "DecodeError":
        choices = ", ".join(f"`{label}`" for label in expected)
        return cls(
            DecodeErrorKind.UNKNOWN_VARIANT,
            f"unknown variant `{value}`, expected one of {choices}",
            field=field,
            value=value,
        )

    @classmethod
    def invalid_type(cls, detail: str, *, field: Optional[str] = None) -> "DecodeError":
        if field is None:
            return cls(DecodeErrorKind.INVALID_TYPE, f"invalid type: {detail}")
        return cls(
            DecodeErrorKind.INVALID_TYPE,
            f"invalid type for field `{field}`: {detail}",
            field=field,
        )

    @classmethod
    def syntax(cls, detail: str, line: int, column: int) -> "DecodeError":
        return cls(
            DecodeErrorKind.SYNTAX,
            f"invalid JSON: {detail} at line {line} column {column}",
        )
