"""Contact ORM — messages submitted through the site's contact form.

Invariants:
    - id is a store-assigned UUID; created_at is set at insert, never from client input
    - name, email, subject, message are non-null and non-empty at the storage level
    - status ∈ {new, read, replied}, default new
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from records_api.core.domain_types import ContactStatus, enum_values
from records_api.db.base import Base, not_empty, one_of, utcnow

TABLE = "contacts"


class ContactMessage(Base):
    """A single contact-form submission."""
    __tablename__ = TABLE
    __table_args__ = (
        not_empty(TABLE, "name"),
        not_empty(TABLE, "email"),
        not_empty(TABLE, "subject"),
        not_empty(TABLE, "message"),
        one_of(TABLE, "status", enum_values(ContactStatus)),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    subject: Mapped[str] = mapped_column(String(300), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ContactStatus.NEW.value,
    )
