"""Subscriber email API endpoints.

- POST /api/subscriber-emails - Validate a subscriber email address
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.newsletter.application.dto.subscriber_dto import (
    SubscriberEmailDTO,
    SubscriberEmailRequest,
)
from app.newsletter.application.exceptions import InvalidEmailError
from app.newsletter.application.use_cases.parse_subscriber_email import (
    ParseSubscriberEmailUseCase,
)
from app.newsletter.domain.services.email_syntax import EmailSyntaxCheck
from app.newsletter.infrastructure.validation import get_email_syntax_check

router = APIRouter()


@router.post("/subscriber-emails", response_model=SubscriberEmailDTO)
async def validate_subscriber_email(
    request: SubscriberEmailRequest,
    syntax_check: EmailSyntaxCheck = Depends(get_email_syntax_check),
) -> SubscriberEmailDTO:
    """Validate a subscriber email address.

    The address is returned exactly as submitted; no normalization is
    applied.

    Args:
        request: Request carrying the raw email.
        syntax_check: Configured syntax predicate (injected).

    Returns:
        SubscriberEmailDTO with the validated address.

    Raises:
        HTTPException: 400 if the email is invalid.
    """
    use_case = ParseSubscriberEmailUseCase(syntax_check=syntax_check)

    try:
        return use_case.execute(request)
    except InvalidEmailError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e
