"""ORM Models — SQLAlchemy declarative models, one table per record kind.

Invariants:
    - All models inherit from Base (db/base.py)
    - No foreign keys between record kinds; deletes never cascade

Design Decisions:
    - One file per record kind for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from records_api.models.contact import ContactMessage  # noqa: F401
from records_api.models.blog_post import BlogPost  # noqa: F401
from records_api.models.gallery_item import GalleryItem  # noqa: F401
from records_api.models.admin_account import AdminAccount  # noqa: F401
