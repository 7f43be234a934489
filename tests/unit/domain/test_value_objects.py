"""
Unit tests for domain value objects.

Tests SignatureScheme parsing and VerificationOutcome invariants.

Usage:
    pytest tests/unit/domain/test_value_objects.py
"""

import dataclasses

import pytest

from notaire.domain.exceptions import (
    InvalidEncodingError,
    InvalidSignatureError,
    UnsupportedSchemeError,
)
from notaire.domain.value_objects import SignatureScheme, VerificationOutcome


class TestSignatureScheme:
    """Unit tests for SignatureScheme."""

    def test_values(self):
        """Scheme values are lowercase names."""
        assert SignatureScheme.ETHEREUM.value == "ethereum"
        assert SignatureScheme.SOLANA.value == "solana"
        assert str(SignatureScheme.SOLANA) == "solana"

    @pytest.mark.parametrize("name", ["ethereum", "ETHEREUM", " Ethereum "])
    def test_parse_ignores_case_and_whitespace(self, name):
        """Parsing is case-insensitive."""
        assert SignatureScheme.parse(name) is SignatureScheme.ETHEREUM

    def test_parse_passes_members_through(self):
        """Members parse to themselves."""
        assert SignatureScheme.parse(SignatureScheme.SOLANA) is SignatureScheme.SOLANA

    @pytest.mark.parametrize("name", ["bitcoin", "", "eth"])
    def test_parse_unknown_raises(self, name):
        """Unknown names raise UnsupportedSchemeError."""
        with pytest.raises(UnsupportedSchemeError):
            SignatureScheme.parse(name)


class TestVerificationOutcome:
    """Unit tests for VerificationOutcome."""

    def test_success(self):
        """Success carries no error."""
        outcome = VerificationOutcome.success(SignatureScheme.ETHEREUM)
        assert outcome.valid
        assert bool(outcome)
        assert outcome.error_code is None
        assert outcome.detail is None

    def test_failure_from_encoding_error(self):
        """Failure keeps the error code and detail."""
        outcome = VerificationOutcome.failure(
            SignatureScheme.SOLANA, InvalidEncodingError("Invalid character '0'")
        )
        assert not outcome.valid
        assert not bool(outcome)
        assert outcome.error_code == "INVALID_ENCODING"
        assert outcome.detail == "Invalid character '0'"

    def test_failure_from_signature_error(self):
        """Invalid signature maps to its code."""
        outcome = VerificationOutcome.failure(
            SignatureScheme.ETHEREUM, InvalidSignatureError()
        )
        assert outcome.error_code == "INVALID_SIGNATURE"

    def test_valid_with_error_code_rejected(self):
        """A valid outcome cannot carry an error code."""
        with pytest.raises(ValueError):
            VerificationOutcome(
                scheme=SignatureScheme.ETHEREUM,
                valid=True,
                error_code="INVALID_SIGNATURE",
            )

    def test_failure_without_error_code_rejected(self):
        """A failed outcome needs an error code."""
        with pytest.raises(ValueError):
            VerificationOutcome(scheme=SignatureScheme.ETHEREUM, valid=False)

    def test_immutable(self):
        """Outcomes are frozen."""
        outcome = VerificationOutcome.success(SignatureScheme.ETHEREUM)
        with pytest.raises(dataclasses.FrozenInstanceError):
            outcome.valid = False

    def test_to_dict(self):
        """Dictionary form is JSON friendly."""
        outcome = VerificationOutcome.failure(
            SignatureScheme.ETHEREUM, InvalidSignatureError()
        )
        assert outcome.to_dict() == {
            "scheme": "ethereum",
            "valid": False,
            "error_code": "INVALID_SIGNATURE",
            "detail": "Signature is invalid",
        }
