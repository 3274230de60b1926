# Domain services - email syntax predicates

from app.newsletter.domain.services.email_syntax import (
    EmailSyntaxCheck,
    EmailSyntaxRule,
    RfcEmailSyntax,
    SimpleEmailSyntax,
    build_email_syntax_check,
    is_valid_email_syntax,
)

__all__ = [
    "EmailSyntaxCheck",
    "EmailSyntaxRule",
    "RfcEmailSyntax",
    "SimpleEmailSyntax",
    "build_email_syntax_check",
    "is_valid_email_syntax",
]
