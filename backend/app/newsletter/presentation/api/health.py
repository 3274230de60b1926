"""Health and readiness endpoints.

- GET /api/health - Liveness with service version
- GET /api/ready - Readiness, reporting the configured email syntax rule
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.core.config import APP_VERSION
from app.newsletter.domain.services.email_syntax import EmailSyntaxCheck
from app.newsletter.infrastructure.validation import get_email_syntax_check

router = APIRouter()


class HealthResponse(BaseModel):
    """Liveness response model."""

    status: str
    timestamp: datetime
    version: str


class ReadinessResponse(BaseModel):
    """Readiness response model.

    Attributes:
        status: Always "ready" once the syntax check has been built.
        email_syntax_rule: repr of the configured syntax check.
    """

    status: str
    email_syntax_rule: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=APP_VERSION,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    syntax_check: EmailSyntaxCheck = Depends(get_email_syntax_check),
) -> ReadinessResponse:
    """Report readiness to validate subscriber emails.

    Building the syntax check is the only startup dependency; a bad
    rule in settings fails here instead of on the first submission.

    Args:
        syntax_check: Configured syntax predicate (injected).

    Returns:
        Readiness status with the active rule.
    """
    return ReadinessResponse(status="ready", email_syntax_rule=repr(syntax_check))
