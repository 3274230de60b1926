# FastAPI routers - subscriber emails, health
from app.newsletter.presentation.api import health, subscriber_emails

__all__ = ["health", "subscriber_emails"]
