"""Error taxonomy shared by the proxy and the client services."""


class CompanionError(Exception):
    """Base class for all application errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(CompanionError):
    """Required configuration (e.g. the YouTube API key) is missing."""


class UpstreamError(CompanionError):
    """The YouTube Data API answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(CompanionError):
    """The requested resource does not exist."""


class AuthenticationRequired(CompanionError):
    """A write was attempted without a signed-in user."""

    def __init__(self, message: str = "User not authenticated") -> None:
        super().__init__(message)


class InvalidActionError(CompanionError):
    """The proxy received an unknown action name."""

    def __init__(self, message: str = "Invalid action") -> None:
        super().__init__(message)


class InvalidRequestError(CompanionError):
    """A proxy request is missing a parameter its action needs."""
