"""
Error Taxonomy Unit Tests
Tests for multihash/errors.py
"""
import pytest

from multihash.errors import (
    ErrorCodes,
    LengthMismatchException,
    MalformedHexException,
    MultihashError,
    MultihashException,
    SizeMismatchException,
    TruncatedInputException,
    UnrecognizedAlgorithmException,
)


class TestHierarchy:
    """Every error kind is a MultihashException."""

    @pytest.mark.parametrize("exc_class", [
        UnrecognizedAlgorithmException,
        SizeMismatchException,
        LengthMismatchException,
        TruncatedInputException,
        MalformedHexException,
    ])
    def test_subclass(self, exc_class):
        assert issubclass(exc_class, MultihashException)

    def test_catchable_as_base(self):
        """Specific errors can be caught as MultihashException."""
        with pytest.raises(MultihashException):
            raise TruncatedInputException(length=1)


class TestCodes:
    """Each kind carries its own stable code."""

    def test_codes(self):
        assert UnrecognizedAlgorithmException(tag=0).code == ErrorCodes.UNRECOGNIZED_ALGORITHM
        assert SizeMismatchException(declared=1, actual=2).code == ErrorCodes.SIZE_MISMATCH
        assert LengthMismatchException(
            actual=1, expected=2, algorithm="sha1"
        ).code == ErrorCodes.LENGTH_MISMATCH
        assert TruncatedInputException(length=0).code == ErrorCodes.TRUNCATED_INPUT
        assert MalformedHexException("bad").code == ErrorCodes.MALFORMED_HEX

    def test_message_reports_values(self):
        """Messages include the offending values."""
        assert str(SizeMismatchException(declared=32, actual=20)) == "Incorrect size: 32 != 20"
        assert "31 != 32" in str(
            LengthMismatchException(actual=31, expected=32, algorithm="sha2-256")
        )
        assert "0x00" in str(UnrecognizedAlgorithmException(tag=0))

    def test_repr(self):
        error = TruncatedInputException(length=0)

        assert repr(error).startswith("TruncatedInputException(code='TRUNCATED_INPUT'")


class TestErrorModel:
    """Conversion between exceptions and the pydantic model."""

    def test_to_error_model(self):
        """Exceptions convert to a structured model."""
        model = SizeMismatchException(declared=32, actual=20).to_error_model()

        assert isinstance(model, MultihashError)
        assert model.code == ErrorCodes.SIZE_MISMATCH
        assert model.details == {"declared": 32, "actual": 20}

    def test_model_to_exception(self):
        """Models convert back to raisable exceptions."""
        model = MultihashError(code=ErrorCodes.MALFORMED_HEX, message="bad hex")
        error = model.to_exception()

        assert isinstance(error, MalformedHexException)
        assert error.code == ErrorCodes.MALFORMED_HEX
        assert error.message == "bad hex"

    @pytest.mark.parametrize("original", [
        UnrecognizedAlgorithmException(tag=0x99),
        UnrecognizedAlgorithmException(name="md5"),
        SizeMismatchException(declared=32, actual=20),
        LengthMismatchException(actual=31, expected=32, algorithm="sha2-256"),
        TruncatedInputException(length=1),
        MalformedHexException("Uneven number of hex digits: 3", length=3),
    ], ids=lambda e: type(e).__name__)
    def test_model_keeps_error_kind(self, original):
        """Converting to the model and back restores the specific class."""
        restored = original.to_error_model().to_exception()

        assert type(restored) is type(original)
        assert restored.code == original.code
        assert restored.message == original.message
        assert restored.details == original.details

    def test_size_mismatch_model_is_catchable(self):
        """A SIZE_MISMATCH model raises as SizeMismatchException."""
        model = MultihashError(
            code=ErrorCodes.SIZE_MISMATCH,
            message="Incorrect size: 32 != 20",
            details={"declared": 32, "actual": 20},
        )

        with pytest.raises(SizeMismatchException) as exc_info:
            raise model.to_exception()

        assert exc_info.value.declared == 32
        assert exc_info.value.actual == 20

    def test_unknown_code_falls_back_to_base(self):
        """Unknown codes, or known codes missing details, give the base class."""
        unknown = MultihashError(code="OTHER", message="x").to_exception()
        incomplete = MultihashError(code=ErrorCodes.SIZE_MISMATCH, message="x").to_exception()

        assert type(unknown) is MultihashException
        assert type(incomplete) is MultihashException
        assert incomplete.code == ErrorCodes.SIZE_MISMATCH

    def test_model_json(self):
        """The model serializes to JSON."""
        model = UnrecognizedAlgorithmException(tag=0x99).to_error_model()

        assert '"UNRECOGNIZED_ALGORITHM"' in model.model_dump_json()

    def test_model_forbids_extra_fields(self):
        """Unknown fields are rejected."""
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            MultihashError(code="X", message="y", retryable=True)
