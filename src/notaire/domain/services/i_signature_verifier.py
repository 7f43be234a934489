"""
Signature verifier service interface.
"""

from typing import Protocol, runtime_checkable

from notaire.domain.value_objects.signature_scheme import SignatureScheme


@runtime_checkable
class ISignatureVerifier(Protocol):
    """
    Structural interface for signature verification.

    Implementations share no base class and no state:
    - Inputs are text encodings (hex, base58), never raw bytes
    - Success returns None, failure raises a VerificationError
    - Calls are pure and safe to run from any thread
    """

    scheme: SignatureScheme

    def verify(self, signature: str, message: str, signer: str) -> None:
        """
        Verify that signer signed message.

        Args:
            signature: Encoded signature
            message: Message text that was signed
            signer: Encoded signer identity (address or public key)

        Raises:
            InvalidEncodingError: If signature or signer is malformed
            InvalidSignatureError: If the cryptographic check fails
        """
