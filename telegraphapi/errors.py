"""Exceptions raised by the Telegraph client."""


class TelegraphError(Exception):
    """Base class for every error raised by this package."""


class InvalidDataTypeError(TelegraphError, TypeError):
    """Raised when content_format receives data of an unsupported type."""

    def __init__(self, message: str = "invalid data type") -> None:
        super().__init__(message)


class NoInputDataError(TelegraphError, ValueError):
    """Raised when a method receives no input data."""

    def __init__(self, message: str = "no input data") -> None:
        super().__init__(message)


class EmptyAccessTokenError(TelegraphError, ValueError):
    """Raised when a secured method is called without an access token."""

    def __init__(self, message: str = "empty access_token") -> None:
        super().__init__(message)


class APIError(TelegraphError):
    """An error reported by the Telegraph API itself."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message