"""
Verify Signature use case.

Dispatches a verification request to the verifier registered for its
scheme and reports the result as a VerificationOutcome.
"""

import time
from typing import Dict, List, Mapping

from notaire.domain.exceptions import UnsupportedSchemeError, VerificationError
from notaire.domain.services.i_signature_verifier import ISignatureVerifier
from notaire.domain.value_objects.signature_scheme import SignatureScheme
from notaire.domain.value_objects.verification_outcome import (
    VerificationOutcome,
)
from notaire.infrastructure.monitoring.logger import get_logger, log_performance

logger = get_logger(__name__)


class VerifySignature:
    """
    Verify a signed message for any registered scheme.

    Business rules:
    - Unknown or disabled scheme is a configuration error (raised)
    - Malformed input and failed checks are outcomes (returned)
    - Never retries; a failed verification is final for its inputs
    """

    def __init__(self, verifiers: Mapping[SignatureScheme, ISignatureVerifier]):
        """
        Initialize use case with dependencies.

        Args:
            verifiers: Verifier per enabled scheme
        """
        self.verifiers: Dict[SignatureScheme, ISignatureVerifier] = dict(verifiers)

    def supported_schemes(self) -> List[SignatureScheme]:
        """Schemes this use case can verify."""
        return list(self.verifiers)

    def execute(
        self,
        scheme: "str | SignatureScheme",
        signature: str,
        message: str,
        signer: str,
    ) -> VerificationOutcome:
        """
        Execute signature verification.

        Args:
            scheme: Scheme name or SignatureScheme
            signature: Encoded signature
            message: Original message that was signed
            signer: Encoded signer identity

        Returns:
            VerificationOutcome with validity and failure kind

        Raises:
            UnsupportedSchemeError: If no verifier is registered for scheme
        """
        resolved = SignatureScheme.parse(scheme)
        verifier = self.verifiers.get(resolved)
        if verifier is None:
            raise UnsupportedSchemeError(resolved.value)

        start_time = time.perf_counter()
        try:
            verifier.verify(signature, message, signer)
        except VerificationError as e:
            logger.warning(
                f"Signature rejected for {resolved.value} signer {signer}",
                extra={"scheme": resolved.value, "error_code": e.code},
            )
            return VerificationOutcome.failure(resolved, e)
        finally:
            log_performance(logger, f"{resolved.value} verification", start_time)

        logger.info(
            f"Signature verified for {resolved.value} signer {signer}",
            extra={"scheme": resolved.value},
        )
        return VerificationOutcome.success(resolved)
