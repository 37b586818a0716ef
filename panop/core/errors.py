"""PANOP — Error Types.

Everything the provider raises derives from ``PanopError`` so the host can
surface one message per failed operation.
"""


class PanopError(Exception):
    """Base class for provider errors."""


class ConfigurationError(PanopError):
    """Provider configuration is incomplete or refers to an unknown type."""


class TowerAPIError(PanopError):
    """Raised when a call to Tower fails."""

    def __init__(self, message: str, status_code: int = 0):
        self.status_code = status_code
        super().__init__(message)


class TransportError(TowerAPIError):
    """No response was received (DNS, refused connection, TLS, read error)."""


class UnexpectedStatusError(TowerAPIError):
    """Tower answered with something other than the documented success code."""

    def __init__(self, message: str, status_code: int, reason: str = ""):
        self.reason = reason
        super().__init__(message, status_code)


class DecodeError(TowerAPIError):
    """Response body is not the JSON shape the operation expects."""


class UpdateUnsupportedError(PanopError):
    """The requested change needs a remote update, which Tower does not offer."""


class MissingIdentifierError(PanopError):
    """The operation needs a remote identifier the record does not hold."""


class InvalidImportIdError(PanopError, ValueError):
    """An import identifier is not a decimal integer."""
