"""
Ethereum message signature verifier.

Implements personal_sign verification using secp256k1 public key recovery.
"""

import binascii

from eth_keys import keys
from eth_keys.exceptions import BadSignature
from eth_utils import ValidationError, big_endian_to_int, decode_hex, keccak

from notaire.domain.exceptions import InvalidEncodingError, InvalidSignatureError
from notaire.domain.value_objects.signature_scheme import SignatureScheme
from notaire.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

PERSONAL_MESSAGE_PREFIX = b"\x19Ethereum Signed Message:\n"
SIGNATURE_LENGTH = 65
# Ethereum encodes recovery ids 0/1 as 27/28
RECOVERY_ID_OFFSET = 27


def from_message_encoding_error(error: UnicodeEncodeError) -> InvalidEncodingError:
    """Convert a message that is not valid UTF-8 into InvalidEncodingError."""
    return InvalidEncodingError(f"Invalid message: {error}")


def personal_message_digest(message: str) -> bytes:
    """
    Compute the personal_sign digest of a message.

    The length prefix is the decimal byte length of the UTF-8 message.

    Args:
        message: Message text

    Returns:
        32-byte keccak256 digest

    Raises:
        InvalidEncodingError: If message cannot be encoded as UTF-8
    """
    try:
        message_bytes = message.encode("utf-8")
    except UnicodeEncodeError as e:
        raise from_message_encoding_error(e) from e

    length = str(len(message_bytes)).encode("ascii")
    return keccak(PERSONAL_MESSAGE_PREFIX + length + message_bytes)


def from_hex_error(error: ValueError) -> InvalidEncodingError:
    """Convert a hex decoding failure into InvalidEncodingError."""
    return InvalidEncodingError(f"Invalid hex signature: {error}")


def from_recovery_error(error: Exception) -> InvalidSignatureError:
    """Convert a public key recovery failure into InvalidSignatureError."""
    logger.debug(f"Public key recovery rejected signature: {error}")
    return InvalidSignatureError()


class EthereumVerifier:
    """
    Ethereum signature verification over personal_sign messages.

    Expects a 65-byte hex signature (r || s || v) and a hex address.
    The address comparison ignores case, so EIP-55 checksums are
    accepted but not enforced.
    """

    scheme = SignatureScheme.ETHEREUM

    def verify(self, signature: str, message: str, signer: str) -> None:
        """
        Verify Ethereum signed message.

        Args:
            signature: Signature (hex, optional 0x prefix)
            message: Original message that was signed
            signer: Signer address (hex, 0x prefixed)

        Raises:
            InvalidEncodingError: If signature is not 65 bytes of hex,
                or message is not encodable as UTF-8
            InvalidSignatureError: If recovery fails or address differs
        """
        digest = personal_message_digest(message)

        try:
            signature_bytes = decode_hex(signature)
        except (binascii.Error, UnicodeEncodeError) as e:
            raise from_hex_error(e) from e

        if len(signature_bytes) != SIGNATURE_LENGTH:
            raise InvalidEncodingError(
                f"The signature has wrong length: {len(signature_bytes)}, "
                f"Expected: {SIGNATURE_LENGTH}"
            )

        r = big_endian_to_int(signature_bytes[0:32])
        s = big_endian_to_int(signature_bytes[32:64])
        recovery_id = signature_bytes[64] - RECOVERY_ID_OFFSET

        try:
            recovered = keys.Signature(vrs=(recovery_id, r, s))
            public_key = recovered.recover_public_key_from_msg_hash(digest)
        except (BadSignature, ValidationError) as e:
            raise from_recovery_error(e) from e

        recovered_address = public_key.to_address().lower()

        if signer.lower() != recovered_address:
            logger.debug(
                "Recovered address does not match signer",
                extra={"recovered": recovered_address},
            )
            raise InvalidSignatureError()
