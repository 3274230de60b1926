"""Tests for settings and the configured email syntax predicate."""

from typing import Iterator

import pytest
from pydantic import ValidationError

from app.core.config import Settings, get_settings
from app.newsletter.domain.services.email_syntax import RfcEmailSyntax, SimpleEmailSyntax
from app.newsletter.infrastructure.validation import get_email_syntax_check


@pytest.fixture(autouse=True)
def clear_caches() -> Iterator[None]:
    """Reset cached settings and predicate around each test."""
    get_settings.cache_clear()
    get_email_syntax_check.cache_clear()
    yield
    get_settings.cache_clear()
    get_email_syntax_check.cache_clear()


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.email_syntax_rule == "rfc"
        assert settings.email_allow_smtputf8 is True
        assert settings.email_allow_quoted_local is False
        assert settings.email_allow_domain_literal is False
        assert settings.is_development is True

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EMAIL_SYNTAX_RULE", "simple")
        monkeypatch.setenv("APP_ENV", "production")

        settings = Settings(_env_file=None)

        assert settings.email_syntax_rule == "simple"
        assert settings.is_production is True

    def test_rejects_unknown_rule(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EMAIL_SYNTAX_RULE", "strict")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestGetEmailSyntaxCheck:
    """Tests for the configured predicate."""

    def test_default_rule(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("EMAIL_SYNTAX_RULE", raising=False)

        assert isinstance(get_email_syntax_check(), RfcEmailSyntax)

    def test_rfc_options_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EMAIL_SYNTAX_RULE", "rfc")
        monkeypatch.setenv("EMAIL_ALLOW_SMTPUTF8", "false")

        check = get_email_syntax_check()

        assert isinstance(check, RfcEmailSyntax)
        assert check("ñoñó@example.com") is False

    def test_simple_rule_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EMAIL_SYNTAX_RULE", "simple")

        assert isinstance(get_email_syntax_check(), SimpleEmailSyntax)

    def test_predicate_is_cached(self) -> None:
        assert get_email_syntax_check() is get_email_syntax_check()
