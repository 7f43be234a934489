"""
Solana message signature verifier.

Implements wallet signature verification using Ed25519.
"""

import base58
from nacl import exceptions as nacl_exceptions
from nacl.signing import VerifyKey

from notaire.domain.exceptions import InvalidEncodingError, InvalidSignatureError
from notaire.domain.value_objects.signature_scheme import SignatureScheme
from notaire.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

PUBLIC_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64


def from_base58_error(error: ValueError) -> InvalidEncodingError:
    """Convert a base58 decoding failure into InvalidEncodingError."""
    return InvalidEncodingError(f"Invalid base58 signature: {error}")


def from_pubkey_error(error: ValueError) -> InvalidEncodingError:
    """Convert a public key parsing failure into InvalidEncodingError."""
    return InvalidEncodingError(f"Invalid public key: {error}")


def from_message_encoding_error(error: UnicodeEncodeError) -> InvalidEncodingError:
    """Convert a message that is not valid UTF-8 into InvalidEncodingError."""
    return InvalidEncodingError(f"Invalid message: {error}")


def from_nacl_error(error: nacl_exceptions.CryptoError) -> InvalidSignatureError:
    """Convert an Ed25519 verification failure into InvalidSignatureError."""
    logger.debug(f"Ed25519 verification rejected signature: {error}")
    return InvalidSignatureError()


def parse_public_key(signer: str) -> bytes:
    """
    Parse a base58 Solana public key.

    Args:
        signer: Wallet address (base58)

    Returns:
        32 public key bytes

    Raises:
        InvalidEncodingError: If not base58 or not 32 bytes long
    """
    try:
        public_key_bytes = base58.b58decode(signer)
    except ValueError as e:
        raise from_pubkey_error(e) from e

    if len(public_key_bytes) != PUBLIC_KEY_LENGTH:
        raise from_pubkey_error(
            ValueError(
                f"wrong length: {len(public_key_bytes)}, "
                f"Expected: {PUBLIC_KEY_LENGTH}"
            )
        )

    return public_key_bytes


class SolanaVerifier:
    """
    Solana signature verification using Ed25519.

    Signature and public key are base58 strings. The message is
    verified as raw UTF-8 bytes, without prefix or hashing.

    Accepts a detached 64-byte signature, or a NaCl signed message
    (signature followed by the message) which must open to exactly
    the given message.
    """

    scheme = SignatureScheme.SOLANA

    def verify(self, signature: str, message: str, signer: str) -> None:
        """
        Verify Solana wallet signature.

        Args:
            signature: Signature (base58 encoded)
            message: Original message that was signed
            signer: Solana wallet address (base58)

        Raises:
            InvalidEncodingError: If signature, address or message is malformed
            InvalidSignatureError: If Ed25519 verification fails
        """
        try:
            signature_bytes = base58.b58decode(signature)
        except ValueError as e:
            raise from_base58_error(e) from e

        if not signature_bytes:
            raise InvalidEncodingError("The signature is empty")

        public_key_bytes = parse_public_key(signer)

        try:
            message_bytes = message.encode("utf-8")
        except UnicodeEncodeError as e:
            raise from_message_encoding_error(e) from e

        try:
            verify_key = VerifyKey(public_key_bytes)
            if len(signature_bytes) == SIGNATURE_LENGTH:
                verify_key.verify(message_bytes, signature_bytes)
                return
            # Attached form: signature || message
            opened = verify_key.verify(signature_bytes)
        except (nacl_exceptions.BadSignatureError, nacl_exceptions.ValueError) as e:
            raise from_nacl_error(e) from e

        if opened != message_bytes:
            logger.debug("Signed message does not match message")
            raise InvalidSignatureError()
