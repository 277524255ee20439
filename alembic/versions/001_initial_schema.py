"""Initial schema — contacts, blogs, gallery, admins.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "contacts",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("subject", sa.String(300), nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("status", sa.String(20), nullable=False, server_default="new"),
        sa.CheckConstraint("name <> ''", name="ck_contacts_name_not_empty"),
        sa.CheckConstraint("email <> ''", name="ck_contacts_email_not_empty"),
        sa.CheckConstraint("subject <> ''", name="ck_contacts_subject_not_empty"),
        sa.CheckConstraint("message <> ''", name="ck_contacts_message_not_empty"),
        sa.CheckConstraint("status IN ('new', 'read', 'replied')", name="ck_contacts_status_enum"),
    )

    op.create_table(
        "blogs",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("excerpt", sa.Text, nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("author", sa.String(200), nullable=False, server_default="Raushan Kumar"),
        sa.Column("category", sa.String(20), nullable=False, server_default="blog"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("featured", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.CheckConstraint("title <> ''", name="ck_blogs_title_not_empty"),
        sa.CheckConstraint("excerpt <> ''", name="ck_blogs_excerpt_not_empty"),
        sa.CheckConstraint("content <> ''", name="ck_blogs_content_not_empty"),
        sa.CheckConstraint("category IN ('blog', 'opinions', 'motivation')", name="ck_blogs_category_enum"),
    )
    op.create_index("ix_blogs_category_created_at", "blogs", ["category", "created_at"])

    op.create_table(
        "gallery",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("title", sa.String(300), nullable=True),
        sa.Column("image_url", sa.Text, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("category", sa.String(20), nullable=False, server_default="gallery"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint(
            "category IN ('gallery', 'family', 'places', 'other')", name="ck_gallery_category_enum",
        ),
    )

    op.create_table(
        "admins",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("username", sa.String(150), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="admin"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("username <> ''", name="ck_admins_username_not_empty"),
        sa.CheckConstraint("password_hash <> ''", name="ck_admins_password_hash_not_empty"),
        sa.CheckConstraint("role IN ('admin', 'moderator')", name="ck_admins_role_enum"),
    )


def downgrade() -> None:
    op.drop_table("admins")
    op.drop_table("gallery")
    op.drop_index("ix_blogs_category_created_at", table_name="blogs")
    op.drop_table("blogs")
    op.drop_table("contacts")
