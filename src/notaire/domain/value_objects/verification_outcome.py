"""
VerificationOutcome value object - Result of a single verification.
"""

from dataclasses import dataclass
from typing import Optional

from notaire.domain.exceptions.verification import VerificationError
from notaire.domain.value_objects.signature_scheme import SignatureScheme


@dataclass(frozen=True)
class VerificationOutcome:
    """
    Value object representing a verification result.

    Business rules:
    - Either valid, or failed with exactly one error kind
    - A valid outcome carries no error code or detail
    - Immutable once created
    """

    scheme: SignatureScheme
    valid: bool
    error_code: Optional[str] = None
    detail: Optional[str] = None

    def __post_init__(self):
        """Validate outcome consistency on creation."""
        if self.valid and self.error_code is not None:
            raise ValueError("Valid outcome cannot carry an error code")

        if not self.valid and not self.error_code:
            raise ValueError("Failed outcome requires an error code")

    @classmethod
    def success(cls, scheme: SignatureScheme) -> "VerificationOutcome":
        """Build a successful outcome."""
        return cls(scheme=scheme, valid=True)

    @classmethod
    def failure(
        cls, scheme: SignatureScheme, error: VerificationError
    ) -> "VerificationOutcome":
        """Build a failed outcome from a verification error."""
        return cls(
            scheme=scheme,
            valid=False,
            error_code=error.code,
            detail=error.message,
        )

    def __bool__(self) -> bool:
        """Outcome is truthy only when the signature verified."""
        return self.valid

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "scheme": self.scheme.value,
            "valid": self.valid,
            "error_code": self.error_code,
            "detail": self.detail,
        }
