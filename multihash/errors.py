"""
Multihash Errors
File: errors.py

Purpose: Error taxonomy for the multihash codec.
Defines both a Pydantic model for structured error reporting
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes for rejected multihash input."""

    # Registry Errors
    UNRECOGNIZED_ALGORITHM = "UNRECOGNIZED_ALGORITHM"

    # Value Invariant Errors
    SIZE_MISMATCH = "SIZE_MISMATCH"
    LENGTH_MISMATCH = "LENGTH_MISMATCH"

    # Decoding Errors
    TRUNCATED_INPUT = "TRUNCATED_INPUT"
    MALFORMED_HEX = "MALFORMED_HEX"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class MultihashError(BaseModel):
    """
    Structured description of a rejected multihash input.

    Used where an error has to cross a serialization boundary,
    e.g. the CLI's JSON output.
    """

    model_config = ConfigDict(extra="forbid")

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.UNRECOGNIZED_ALGORITHM],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Offending values (tag, declared and actual lengths, ...)",
    )

    def to_exception(self) -> "MultihashException":
        """
        Convert this error model to a raisable exception.

        Known codes rebuild their specific exception class from `details`;
        unknown codes, or details missing a required value, fall back to
        the base MultihashException.
        """
        builder = _EXCEPTION_BUILDERS.get(self.code)
        if builder is not None:
            try:
                return builder(self)
            except KeyError:
                pass
        return MultihashException(
            message=self.message,
            code=self.code,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MultihashException(Exception):
    """
    Base exception for all multihash codec errors.

    Every failure means the input was rejected and no Multihash
    was produced.
    """

    def __init__(
        self,
        message: str,
        code: str = "MULTIHASH_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> MultihashError:
        """Convert this exception to a MultihashError model."""
        return MultihashError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class UnrecognizedAlgorithmException(MultihashException):
    """Raised when a tag (or name) is not in the algorithm registry."""

    def __init__(
        self,
        tag: int | None = None,
        name: str | None = None,
    ) -> None:
        self.tag = tag
        self.name = name
        details: dict[str, Any] = {}
        if tag is not None:
            details["tag"] = tag
            message = f"Unrecognized multihash algorithm tag: {_format_tag(tag)}"
        else:
            details["name"] = name
            message = f"Unrecognized multihash algorithm name: {name!r}"
        super().__init__(
            message=message,
            code=ErrorCodes.UNRECOGNIZED_ALGORITHM,
            details=details,
        )


class SizeMismatchException(MultihashException):
    """Raised when the declared size byte differs from the digest length."""

    def __init__(self, declared: int, actual: int) -> None:
        self.declared = declared
        self.actual = actual
        super().__init__(
            message=f"Incorrect size: {declared} != {actual}",
            code=ErrorCodes.SIZE_MISMATCH,
            details={"declared": declared, "actual": actual},
        )


class LengthMismatchException(SizeMismatchException):
    """Raised when the digest length differs from the algorithm's mandated length."""

    def __init__(self, actual: int, expected: int, algorithm: str) -> None:
        self.declared = actual
        self.actual = actual
        self.expected = expected
        self.algorithm = algorithm
        MultihashException.__init__(
            self,
            message=f"Incorrect hash length for {algorithm}: {actual} != {expected}",
            code=ErrorCodes.LENGTH_MISMATCH,
            details={"actual": actual, "expected": expected, "algorithm": algorithm},
        )


class TruncatedInputException(MultihashException):
    """Raised when a binary multihash is shorter than its 2-byte header."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            message=f"Truncated multihash: {length} byte(s), need at least 2",
            code=ErrorCodes.TRUNCATED_INPUT,
            details={"length": length},
        )


class MalformedHexException(MultihashException):
    """Raised when a hex string has an odd length or non-hex characters."""

    def __init__(self, message: str, length: int | None = None) -> None:
        self.length = length
        details: dict[str, Any] = {}
        if length is not None:
            details["length"] = length
        super().__init__(
            message=message,
            code=ErrorCodes.MALFORMED_HEX,
            details=details,
        )


def _format_tag(tag: int) -> str:
    if isinstance(tag, int) and tag >= 0:
        return f"0x{tag:02x}"
    return repr(tag)


_EXCEPTION_BUILDERS = {
    ErrorCodes.UNRECOGNIZED_ALGORITHM: lambda e: UnrecognizedAlgorithmException(
        tag=e.details.get("tag"),
        name=e.details["name"] if "tag" not in e.details else None,
    ),
    ErrorCodes.SIZE_MISMATCH: lambda e: SizeMismatchException(
        declared=e.details["declared"],
        actual=e.details["actual"],
    ),
    ErrorCodes.LENGTH_MISMATCH: lambda e: LengthMismatchException(
        actual=e.details["actual"],
        expected=e.details["expected"],
        algorithm=e.details["algorithm"],
    ),
    ErrorCodes.TRUNCATED_INPUT: lambda e: TruncatedInputException(
        length=e.details["length"],
    ),
    ErrorCodes.MALFORMED_HEX: lambda e: MalformedHexException(
        e.message,
        length=e.details.get("length"),
    ),
}
