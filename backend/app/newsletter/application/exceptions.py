"""Application-layer exceptions for use case error handling.

These exceptions are caught and mapped to HTTP responses by the
presentation layer.
"""


class ApplicationError(Exception):
    """Base class for all application-layer exceptions."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidEmailError(ApplicationError):
    """Raised when a subscriber email address fails validation."""

    def __init__(self, email: str) -> None:
        super().__init__(
            message=f"{email} is not a valid subscriber email.",
            code="INVALID_EMAIL"
        )
        self.email = email
