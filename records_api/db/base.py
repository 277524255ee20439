"""SQLAlchemy Declarative Base — shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all record ORM models."""
    pass


def utcnow() -> datetime:
    """Timezone-aware now, used for every createdAt/updatedAt default."""
    return datetime.now(timezone.utc)


def not_empty(table: str, column: str) -> CheckConstraint:
    """Storage-level required constraint: rejects empty strings (NULL handled by nullable=False)."""
    return CheckConstraint(f"{column} <> ''", name=f"ck_{table}_{column}_not_empty")


def one_of(table: str, column: str, values: list[str]) -> CheckConstraint:
    """Storage-level enum constraint."""
    allowed = ", ".join(f"'{v}'" for v in values)
    return CheckConstraint(f"{column} IN ({allowed})", name=f"ck_{table}_{column}_enum")
