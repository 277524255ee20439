"""Contact Schemas — request/response models for /api/contacts.

Invariants:
    - ContactCreate fields are all optional at the schema level; the route enforces
      presence so a missing field yields "All fields are required" rather than a
      per-field validation error
    - Numeric values are stored as their string form; other non-strings are rejected
    - ContactStatusUpdate accepts only a recognized status
"""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict

from records_api.core.domain_types import ContactStatus
from records_api.schemas.base import WireModel

CONTACT_RECEIVED_MESSAGE = "Message received! Thank you for contacting us."


class ContactCreate(WireModel):
    """Contact form submission."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str | None = None
    email: str | None = None
    subject: str | None = None
    message: str | None = None

    def missing_fields(self) -> list[str]:
        """Required fields that are absent or empty."""
        return [
            name for name in ("name", "email", "subject", "message")
            if not getattr(self, name)
        ]


class ContactStatusUpdate(WireModel):
    """Status change; every other key is ignored."""
    status: ContactStatus | None = None


class ContactResponse(WireModel):
    id: UUID
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime
    status: ContactStatus


class ContactSubmitted(WireModel):
    """Envelope returned by a successful submission."""
    success: bool = True
    message: str = CONTACT_RECEIVED_MESSAGE
    contact: ContactResponse
