"""Email syntax predicates.

A predicate is any callable taking the raw text and returning True when the
text is a syntactically well-formed email address. Predicates never look up
DNS records or contact mail servers, so they are deterministic and free of
side effects.

Available rules:
- RfcEmailSyntax: RFC 5321/5322/6531 syntax via the email-validator library
- SimpleEmailSyntax: conservative ASCII regex (local@domain.tld)
"""

import re
from typing import Callable, Literal

from email_validator import EmailNotValidError, validate_email

EmailSyntaxCheck = Callable[[str], bool]
EmailSyntaxRule = Literal["rfc", "simple"]

# Domain labels may not start or end with a hyphen, or be empty
_SIMPLE_EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9._%+-]+@"
    r"(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}$"
)


class RfcEmailSyntax:
    """Syntax check backed by email-validator.

    Deliverability checks are always disabled; only the address grammar
    is evaluated.

    Attributes:
        allow_smtputf8: Accept internationalized (non-ASCII) addresses.
        allow_quoted_local: Accept quoted local-parts ("john doe"@example.com).
        allow_domain_literal: Accept bracketed IP domains (user@[192.0.2.1]).
    """

    def __init__(
        self,
        allow_smtputf8: bool = True,
        allow_quoted_local: bool = False,
        allow_domain_literal: bool = False,
    ) -> None:
        self.allow_smtputf8 = allow_smtputf8
        self.allow_quoted_local = allow_quoted_local
        self.allow_domain_literal = allow_domain_literal

    def __call__(self, text: str) -> bool:
        try:
            validate_email(
                text,
                allow_smtputf8=self.allow_smtputf8,
                allow_quoted_local=self.allow_quoted_local,
                allow_domain_literal=self.allow_domain_literal,
                check_deliverability=False,
            )
        except EmailNotValidError:
            return False
        return True

    def __repr__(self) -> str:
        return (
            f"RfcEmailSyntax(allow_smtputf8={self.allow_smtputf8}, "
            f"allow_quoted_local={self.allow_quoted_local}, "
            f"allow_domain_literal={self.allow_domain_literal})"
        )


class SimpleEmailSyntax:
    """Regex-based syntax check for plain ASCII addresses."""

    def __init__(self, pattern: re.Pattern[str] = _SIMPLE_EMAIL_PATTERN) -> None:
        self.pattern = pattern

    def __call__(self, text: str) -> bool:
        return self.pattern.fullmatch(text) is not None

    def __repr__(self) -> str:
        return f"SimpleEmailSyntax(pattern={self.pattern.pattern!r})"


_default_syntax = RfcEmailSyntax()


def is_valid_email_syntax(text: str) -> bool:
    """Default predicate used when no other rule is injected.

    Args:
        text: Raw candidate address.

    Returns:
        True if the text is a well-formed email address.
    """
    return _default_syntax(text)


def build_email_syntax_check(
    rule: EmailSyntaxRule = "rfc",
    allow_smtputf8: bool = True,
    allow_quoted_local: bool = False,
    allow_domain_literal: bool = False,
) -> EmailSyntaxCheck:
    """Build a syntax predicate for the named rule.

    The allow_* options only apply to the "rfc" rule.

    Args:
        rule: Either "rfc" or "simple".
        allow_smtputf8: Accept internationalized addresses.
        allow_quoted_local: Accept quoted local-parts.
        allow_domain_literal: Accept bracketed IP domains.

    Returns:
        A callable predicate.

    Raises:
        ValueError: If the rule name is not recognized.
    """
    if rule == "rfc":
        return RfcEmailSyntax(
            allow_smtputf8=allow_smtputf8,
            allow_quoted_local=allow_quoted_local,
            allow_domain_literal=allow_domain_literal,
        )
    if rule == "simple":
        return SimpleEmailSyntax()
    raise ValueError(f"Unknown email syntax rule: {rule}")
