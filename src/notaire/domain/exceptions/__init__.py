"""
Domain exceptions package.
"""

# Base exceptions
from notaire.domain.exceptions.base import (
    NotaireException,
    UnsupportedSchemeError,
)

# Verification exceptions
from notaire.domain.exceptions.verification import (
    InvalidEncodingError,
    InvalidSignatureError,
    VerificationError,
)

__all__ = [
    # Base
    "NotaireException",
    "UnsupportedSchemeError",
    # Verification
    "VerificationError",
    "InvalidEncodingError",
    "InvalidSignatureError",
]
