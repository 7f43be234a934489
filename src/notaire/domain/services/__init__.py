"""
Domain service interfaces.
"""

from notaire.domain.services.i_signature_verifier import ISignatureVerifier

__all__ = ["ISignatureVerifier"]
