"""Use case for turning raw input into a validated subscriber email."""

from typing import Optional

from app.core.logging import get_logger
from app.newsletter.application.dto.subscriber_dto import (
    SubscriberEmailDTO,
    SubscriberEmailRequest,
)
from app.newsletter.application.exceptions import InvalidEmailError
from app.newsletter.domain.services.email_syntax import EmailSyntaxCheck
from app.newsletter.domain.value_objects.subscriber_email import (
    InvalidSubscriberEmailError,
    SubscriberEmail,
)

logger = get_logger(__name__)


class ParseSubscriberEmailUseCase:
    """Application service validating subscriber email submissions."""

    def __init__(self, syntax_check: Optional[EmailSyntaxCheck] = None) -> None:
        """Initialize the use case.

        Args:
            syntax_check: Predicate used for validation (default: RFC rule).
        """
        self._syntax_check = syntax_check

    def parse(self, raw: str) -> SubscriberEmail:
        """Validate raw text into a SubscriberEmail.

        Raises:
            InvalidEmailError: If the text is not a valid address.
        """
        try:
            email = SubscriberEmail.parse(raw, self._syntax_check)
        except InvalidSubscriberEmailError as e:
            logger.info(f"Rejected subscriber email: {e}")
            raise InvalidEmailError(raw) from e

        logger.debug(f"Accepted subscriber email: {email}")
        return email

    def execute(self, request: SubscriberEmailRequest) -> SubscriberEmailDTO:
        """Execute the validation.

        Args:
            request: SubscriberEmailRequest with the raw address.

        Returns:
            SubscriberEmailDTO holding the address exactly as submitted.

        Raises:
            InvalidEmailError: If the email address is invalid.
        """
        email = self.parse(request.email)
        return SubscriberEmailDTO(email=email.as_str())
