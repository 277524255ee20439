"""Domain Types — identity type and the enum vocabularies of each record kind.

Invariants:
    - RecordId wraps UUID; every record id is assigned by the store
    - Every enum-valued column has exactly one Enum here; defaults live beside it

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class ContactStatus(str, Enum):
    """Contact message triage states."""
    NEW = "new"
    READ = "read"
    REPLIED = "replied"


class BlogCategory(str, Enum):
    """Blog post sections."""
    BLOG = "blog"
    OPINIONS = "opinions"
    MOTIVATION = "motivation"


class GalleryCategory(str, Enum):
    """Gallery albums."""
    GALLERY = "gallery"
    FAMILY = "family"
    PLACES = "places"
    OTHER = "other"


class AdminRole(str, Enum):
    """Admin account roles."""
    ADMIN = "admin"
    MODERATOR = "moderator"


# ─── Defaults ────────────────────────────────────────────────────

DEFAULT_BLOG_AUTHOR = "Raushan Kumar"


def enum_values(enum_cls: type[Enum]) -> list[str]:
    """Member values in declaration order."""
    return [member.value for member in enum_cls]


def parse_category(
    enum_cls: type[Enum], raw: str | None,
) -> Enum | None:
    """Parse an optional query-string category.

    Returns None for absent or unrecognized values, meaning "no filter".
    """
    if not raw:
        return None
    try:
        return enum_cls(raw)
    except ValueError:
        return None
