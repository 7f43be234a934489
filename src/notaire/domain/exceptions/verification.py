"""
Verification domain exceptions.

Two kinds only: the input could not be decoded, or it decoded but the
cryptographic check failed. Only the kind is stable; detail text is for
diagnostics.
"""

from notaire.domain.exceptions.base import NotaireException


class VerificationError(NotaireException):
    """Raised when a signature does not verify."""


class InvalidEncodingError(VerificationError):
    """Raised when a signature or signer identity is malformed."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail, code="INVALID_ENCODING")


class InvalidSignatureError(VerificationError):
    """Raised when a well-formed signature fails verification."""

    def __init__(self):
        super().__init__("Signature is invalid", code="INVALID_SIGNATURE")
