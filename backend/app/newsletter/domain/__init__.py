# Domain layer - pure business rules, no framework dependencies

from app.newsletter.domain.services.email_syntax import (
    EmailSyntaxCheck,
    EmailSyntaxRule,
    RfcEmailSyntax,
    SimpleEmailSyntax,
    build_email_syntax_check,
    is_valid_email_syntax,
)
from app.newsletter.domain.value_objects.subscriber_email import (
    InvalidSubscriberEmailError,
    SubscriberEmail,
)

__all__ = [
    # Value objects
    "SubscriberEmail",
    "InvalidSubscriberEmailError",
    # Syntax predicates
    "EmailSyntaxCheck",
    "EmailSyntaxRule",
    "RfcEmailSyntax",
    "SimpleEmailSyntax",
    "build_email_syntax_check",
    "is_valid_email_syntax",
]
