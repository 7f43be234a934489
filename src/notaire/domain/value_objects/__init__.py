"""
Domain value objects.
"""

from notaire.domain.value_objects.signature_scheme import SignatureScheme
from notaire.domain.value_objects.verification_outcome import (
    VerificationOutcome,
)

__all__ = [
    "SignatureScheme",
    "VerificationOutcome",
]
