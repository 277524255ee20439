"""Admin Account ORM — site operators.

Invariants:
    - username is unique and non-empty
    - password_hash holds a core/passwords.py hash, never plaintext
    - role ∈ {admin, moderator}, default admin
    - No HTTP route reads or writes this table; scripts/create_admin.py provisions it
"""

import uuid
from datetime import datetime

from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from records_api.core.domain_types import AdminRole, enum_values
from records_api.db.base import Base, not_empty, one_of, utcnow

TABLE = "admins"


class AdminAccount(Base):
    """An operator account."""
    __tablename__ = TABLE
    __table_args__ = (
        not_empty(TABLE, "username"),
        not_empty(TABLE, "password_hash"),
        one_of(TABLE, "role", enum_values(AdminRole)),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(150), nullable=False, unique=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=AdminRole.ADMIN.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
