"""
Notaire - Ethereum and Solana message signature verification.

Usage:
    from notaire import get_verifier

    verifier = get_verifier("ethereum")
    verifier.verify(signature, message, signer)  # raises on failure
"""

from notaire.domain.exceptions import (
    InvalidEncodingError,
    InvalidSignatureError,
    NotaireException,
    UnsupportedSchemeError,
    VerificationError,
)
from notaire.domain.services import ISignatureVerifier
from notaire.domain.value_objects import SignatureScheme, VerificationOutcome

__version__ = "0.1.0"


def get_verifier(scheme: "str | SignatureScheme") -> ISignatureVerifier:
    """
    Get the verifier for a scheme from the global container.

    Raises:
        UnsupportedSchemeError: If scheme is unknown or not exposed
    """
    from notaire.di.container import get_container

    return get_container().get_verifier(scheme)


__all__ = [
    "ISignatureVerifier",
    "SignatureScheme",
    "VerificationOutcome",
    "NotaireException",
    "VerificationError",
    "InvalidEncodingError",
    "InvalidSignatureError",
    "UnsupportedSchemeError",
    "get_verifier",
]
