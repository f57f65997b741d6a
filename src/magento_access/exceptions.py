"""Typed exceptions for the Magento access client."""


class MagentoError(Exception):
    """Base exception for all Magento client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MagentoAuthError(MagentoError):
    """OAuth handshake failed."""

    def __init__(self, message: str, *, stage: str | None = None) -> None:
        self.stage = stage  # e.g., "request_token", "authorize", "verifier", "access_token"
        super().__init__(message)


class VerifierTimeoutError(MagentoAuthError):
    """No verifier code showed up before the polling bound was reached."""

    def __init__(self, message: str, *, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(message, stage="verifier")


class MagentoTokenError(MagentoAuthError):
    """Token-specific errors (unknown token, missing access token)."""

    def __init__(self, message: str, *, token: str | None = None) -> None:
        self.token = token
        super().__init__(message, stage="token_lookup")


class MagentoTransportError(MagentoError):
    """Network or HTTP protocol failure on a resource call."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class MagentoParseError(MagentoError):
    """Response body could not be parsed. Carries the raw payload."""

    def __init__(self, message: str, *, payload: str) -> None:
        self.payload = payload
        super().__init__(f"{message}\nPayload: {payload}")


class MagentoValidationError(MagentoError):
    """Invalid configuration or argument, detected before any request."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)
