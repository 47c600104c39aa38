"""Error types raised at the request boundary."""


class PantryScannerError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class InputError(PantryScannerError):
    """Malformed or missing request data."""

    status_code = 400


class AuthenticationError(PantryScannerError):
    """Caller is not signed in."""

    status_code = 401


class ConfigurationError(PantryScannerError):
    """A required credential or setting is absent."""


class UpstreamError(PantryScannerError):
    """The vision provider failed or was unreachable."""
