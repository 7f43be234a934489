"""
Application use cases.
"""

from notaire.application.use_cases.verify_signature import VerifySignature

__all__ = ["VerifySignature"]
