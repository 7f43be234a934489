"""
Helpers to sign messages with throwaway Ethereum and Solana keys.
"""

import base58
from eth_keys import keys
from nacl.signing import SigningKey

from notaire.infrastructure.crypto.ethereum_verifier import (
    RECOVERY_ID_OFFSET,
    personal_message_digest,
)


def load_solana_keypair(seed: bytes = b"\x07" * 32) -> SigningKey:
    """
    Build a Solana keypair from a 32-byte seed.

    Args:
        seed: Secret key seed

    Returns:
        SigningKey instance for signing operations
    """
    return SigningKey(seed)


def sign_solana_message(message: str, signing_key: SigningKey) -> str:
    """
    Sign a message with a Solana keypair.

    Returns:
        Base58 encoded detached signature
    """
    signed = signing_key.sign(message.encode("utf-8"))
    return base58.b58encode(signed.signature).decode()


def sign_solana_message_attached(message: str, signing_key: SigningKey) -> str:
    """
    Sign a message and keep it attached (signature || message).

    Returns:
        Base58 encoded signed message
    """
    signed = signing_key.sign(message.encode("utf-8"))
    return base58.b58encode(bytes(signed)).decode()


def get_solana_address(signing_key: SigningKey) -> str:
    """
    Get wallet address from keypair.

    Returns:
        Base58 encoded public key (wallet address)
    """
    return base58.b58encode(bytes(signing_key.verify_key)).decode()


def load_ethereum_key(seed: bytes = b"\x11" * 32) -> keys.PrivateKey:
    """Build an Ethereum private key from 32 bytes."""
    return keys.PrivateKey(seed)


def sign_ethereum_message(message: str, private_key: keys.PrivateKey) -> str:
    """
    Sign a message the way personal_sign does.

    Returns:
        Hex signature (r || s || v) with v in {27, 28}
    """
    signature = private_key.sign_msg_hash(personal_message_digest(message))
    raw = (
        signature.r.to_bytes(32, "big")
        + signature.s.to_bytes(32, "big")
        + bytes([signature.v + RECOVERY_ID_OFFSET])
    )
    return raw.hex()


def get_ethereum_address(private_key: keys.PrivateKey) -> str:
    """Get EIP-55 checksummed address for a private key."""
    return private_key.public_key.to_checksum_address()


def flip_bit(data: bytes, bit_index: int) -> bytes:
    """Return a copy of data with a single bit inverted."""
    flipped = bytearray(data)
    flipped[bit_index // 8] ^= 1 << (bit_index % 8)
    return bytes(flipped)
