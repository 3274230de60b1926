"""SubscriberEmail value object for validated subscriber addresses."""

from dataclasses import InitVar, dataclass
from typing import Optional, Self

from app.newsletter.domain.services.email_syntax import (
    EmailSyntaxCheck,
    is_valid_email_syntax,
)


class InvalidSubscriberEmailError(ValueError):
    """Raised when text is not a syntactically valid subscriber email."""

    def __init__(self, email: str) -> None:
        super().__init__(f"{email} is not a valid subscriber email.")
        self.email = email


@dataclass(frozen=True)
class SubscriberEmail:
    """Immutable value object representing a subscriber's email address.

    The address is checked once, at construction, and stored exactly as
    given. No trimming or case folding is applied.

    Attributes:
        value: The validated email address string.
    """

    value: str
    syntax_check: InitVar[Optional[EmailSyntaxCheck]] = None

    def __post_init__(self, syntax_check: Optional[EmailSyntaxCheck]) -> None:
        """Validate email syntax after initialization."""
        check = is_valid_email_syntax if syntax_check is None else syntax_check
        if not check(self.value):
            raise InvalidSubscriberEmailError(self.value)

    @classmethod
    def parse(cls, raw: str, syntax_check: Optional[EmailSyntaxCheck] = None) -> Self:
        """Create a SubscriberEmail from raw text.

        Args:
            raw: The candidate address.
            syntax_check: Predicate to validate with (default: RFC rule).

        Returns:
            A new SubscriberEmail instance.

        Raises:
            InvalidSubscriberEmailError: If the predicate rejects the text.
        """
        return cls(raw, syntax_check)

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
