"""
Test fixtures and configuration.
"""

import os

import pytest

from notaire.config.settings import NotaireConfig, reset_settings
from notaire.di.container import reset_container
from notaire.infrastructure.crypto.ethereum_verifier import EthereumVerifier
from notaire.infrastructure.crypto.solana_verifier import SolanaVerifier
from tests.helpers.sign_message import load_ethereum_key, load_solana_keypair


@pytest.fixture(autouse=True)
def isolated_globals(monkeypatch):
    """Clear cached settings/container and NOTAIRE_* env for each test."""
    for key in list(os.environ):
        if key.upper().startswith("NOTAIRE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("ENV", raising=False)

    reset_settings()
    reset_container()
    yield
    reset_settings()
    reset_container()


@pytest.fixture
def ethereum_verifier() -> EthereumVerifier:
    """Ethereum verifier instance."""
    return EthereumVerifier()


@pytest.fixture
def solana_verifier() -> SolanaVerifier:
    """Solana verifier instance."""
    return SolanaVerifier()


@pytest.fixture
def ethereum_key():
    """Deterministic Ethereum private key."""
    return load_ethereum_key()


@pytest.fixture
def solana_keypair():
    """Deterministic Solana signing key."""
    return load_solana_keypair()


@pytest.fixture
def settings() -> NotaireConfig:
    """Settings with both schemes enabled and quiet logging."""
    return NotaireConfig(
        enabled_schemes=["ethereum", "solana"],
        log_level="critical",
        json_logs=False,
    )
