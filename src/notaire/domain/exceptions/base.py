"""
Base domain exceptions.
"""


class NotaireException(Exception):
    """Base exception for all Notaire domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class UnsupportedSchemeError(NotaireException):
    """Raised when a signature scheme is unknown or not enabled."""

    def __init__(self, scheme: str):
        self.scheme = scheme
        message = f"Signature scheme '{scheme}' is not supported"
        super().__init__(message, code="UNSUPPORTED_SCHEME")
