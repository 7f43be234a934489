"""
Dependency Injection Container for Notaire.

Resolves which scheme verifiers a deployment exposes and wires them
into use cases.
"""

import importlib
import importlib.util
from typing import Dict, List, Optional

from notaire.application.use_cases.verify_signature import VerifySignature
from notaire.config.settings import NotaireConfig, get_settings
from notaire.domain.exceptions import UnsupportedSchemeError
from notaire.domain.services.i_signature_verifier import ISignatureVerifier
from notaire.domain.value_objects.signature_scheme import SignatureScheme
from notaire.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

# scheme -> (adapter module, adapter class, third-party imports it needs)
# A tuple entry is satisfied by any one of its modules.
VERIFIER_MODULES = {
    SignatureScheme.ETHEREUM: (
        "notaire.infrastructure.crypto.ethereum_verifier",
        "EthereumVerifier",
        # eth_hash needs a keccak backend: pycryptodome or pysha3
        ("eth_keys", "eth_utils", "eth_hash", ("Crypto", "sha3")),
    ),
    SignatureScheme.SOLANA: (
        "notaire.infrastructure.crypto.solana_verifier",
        "SolanaVerifier",
        ("base58", "nacl"),
    ),
}


def missing_dependencies(scheme: SignatureScheme) -> List[str]:
    """
    List third-party modules a scheme needs but cannot import.

    Args:
        scheme: Signature scheme

    Returns:
        Missing module names (empty when scheme is usable)
    """
    _, _, required = VERIFIER_MODULES[scheme]

    missing = []
    for entry in required:
        choices = entry if isinstance(entry, tuple) else (entry,)
        if all(importlib.util.find_spec(name) is None for name in choices):
            missing.append(" or ".join(choices))
    return missing


class DIContainer:
    """
    Dependency Injection Container.

    Verifiers are built once, on first use, for schemes that are both
    enabled in settings and backed by installed libraries.
    """

    def __init__(self, settings: Optional[NotaireConfig] = None):
        """Initialize container with None instances."""
        self._settings = settings
        self._verifiers: Optional[Dict[SignatureScheme, ISignatureVerifier]] = None
        self._verify_signature: Optional[VerifySignature] = None

    @property
    def settings(self) -> NotaireConfig:
        """Get settings (loaded lazily)."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    # ================================================================
    # Domain Services - Verifiers
    # ================================================================

    def _build_verifiers(self) -> Dict[SignatureScheme, ISignatureVerifier]:
        """Instantiate a verifier for every usable enabled scheme."""
        verifiers: Dict[SignatureScheme, ISignatureVerifier] = {}

        for scheme in self.settings.schemes():
            missing = missing_dependencies(scheme)
            if missing:
                logger.warning(
                    f"Scheme {scheme.value} disabled: missing {', '.join(missing)}",
                    extra={"scheme": scheme.value, "missing": missing},
                )
                continue

            module_name, class_name, _ = VERIFIER_MODULES[scheme]
            module = importlib.import_module(module_name)
            verifiers[scheme] = getattr(module, class_name)()
            logger.debug(f"Registered {class_name} for {scheme.value}")

        return verifiers

    @property
    def verifiers(self) -> Dict[SignatureScheme, ISignatureVerifier]:
        """Get verifier registry."""
        if self._verifiers is None:
            self._verifiers = self._build_verifiers()
        return self._verifiers

    def available_schemes(self) -> List[SignatureScheme]:
        """Schemes exposed by this deployment."""
        return list(self.verifiers)

    def get_verifier(self, scheme: "str | SignatureScheme") -> ISignatureVerifier:
        """
        Get verifier for a scheme.

        Args:
            scheme: Scheme name or SignatureScheme

        Returns:
            Verifier implementing ISignatureVerifier

        Raises:
            UnsupportedSchemeError: If scheme is unknown or not exposed
        """
        resolved = SignatureScheme.parse(scheme)
        verifier = self.verifiers.get(resolved)
        if verifier is None:
            raise UnsupportedSchemeError(resolved.value)
        return verifier

    # ================================================================
    # Use Cases
    # ================================================================

    def get_verify_signature(self) -> VerifySignature:
        """Get VerifySignature use case."""
        if self._verify_signature is None:
            self._verify_signature = VerifySignature(verifiers=self.verifiers)
        return self._verify_signature


# Global container instance
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get global DI container instance.

    Returns:
        DIContainer singleton
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container so the next call rebuilds it."""
    global _container
    _container = None
