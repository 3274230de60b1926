"""Configured email syntax predicate for the running application."""

from functools import lru_cache

from app.core.config import get_settings
from app.core.logging import get_logger
from app.newsletter.domain.services.email_syntax import (
    EmailSyntaxCheck,
    build_email_syntax_check,
)

logger = get_logger(__name__)


@lru_cache
def get_email_syntax_check() -> EmailSyntaxCheck:
    """Build the email syntax predicate selected in settings.

    Cached so every request shares one predicate instance. Use as a
    FastAPI dependency or call directly.
    """
    settings = get_settings()
    check = build_email_syntax_check(
        rule=settings.email_syntax_rule,
        allow_smtputf8=settings.email_allow_smtputf8,
        allow_quoted_local=settings.email_allow_quoted_local,
        allow_domain_literal=settings.email_allow_domain_literal,
    )
    logger.info(f"Using email syntax rule: {check!r}")
    return check
