"""
Notaire CLI - Command-line interface for signature verification.

Provides commands for:
- Verifying a signed message (verify)
- Listing schemes exposed by this deployment (schemes)

Exit codes: 0 valid, 1 invalid, 2 unsupported scheme.
Logs go to stderr so stdout stays machine readable.
"""

import argparse
import json
import sys
from typing import Optional

from notaire import __version__
from notaire.config.settings import get_settings
from notaire.di.container import DIContainer
from notaire.domain.exceptions import UnsupportedSchemeError
from notaire.domain.value_objects.signature_scheme import SignatureScheme
from notaire.infrastructure.monitoring.logger import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_UNSUPPORTED = 2


def cmd_verify(args: argparse.Namespace, container: DIContainer) -> int:
    """
    Verify a signature and print the outcome as JSON.

    Args:
        args: Parsed arguments
        container: DI container

    Returns:
        Exit code
    """
    use_case = container.get_verify_signature()

    try:
        outcome = use_case.execute(
            scheme=args.scheme,
            signature=args.signature,
            message=args.message,
            signer=args.signer,
        )
    except UnsupportedSchemeError as e:
        logger.error(e.message)
        print(json.dumps({"scheme": args.scheme, "error_code": e.code}))
        return EXIT_UNSUPPORTED

    print(json.dumps(outcome.to_dict()))
    return EXIT_VALID if outcome.valid else EXIT_INVALID


def cmd_schemes(args: argparse.Namespace, container: DIContainer) -> int:
    """Print available schemes, one per line."""
    for scheme in container.available_schemes():
        print(scheme.value)
    return EXIT_VALID


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        prog="notaire",
        description="Verify Ethereum and Solana message signatures",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Override configured log level",
    )
    parser.add_argument(
        "--plain-logs",
        action="store_true",
        help="Plain text logs instead of JSON",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    verify_parser = subparsers.add_parser("verify", help="Verify a signature")
    verify_parser.add_argument(
        "--scheme",
        required=True,
        choices=[scheme.value for scheme in SignatureScheme],
    )
    verify_parser.add_argument("--signature", required=True)
    verify_parser.add_argument("--message", required=True)
    verify_parser.add_argument(
        "--signer",
        required=True,
        help="Ethereum address (hex) or Solana public key (base58)",
    )
    verify_parser.set_defaults(handler=cmd_verify)

    schemes_parser = subparsers.add_parser(
        "schemes", help="List available signature schemes"
    )
    schemes_parser.set_defaults(handler=cmd_schemes)

    return parser


def main(
    argv: Optional[list] = None, container: Optional[DIContainer] = None
) -> int:
    """
    CLI entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:])
        container: DI container (defaults to one built from settings)

    Returns:
        Exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if container is None:
        container = DIContainer(get_settings())

    settings = container.settings
    # stdout carries command output only
    setup_logging(
        level=args.log_level or settings.log_level,
        json_logs=settings.json_logs and not args.plain_logs,
        stream=sys.stderr,
    )
    logger.debug(f"{settings.app_name} {__version__} running {args.command}")

    return args.handler(args, container)


if __name__ == "__main__":
    sys.exit(main())
