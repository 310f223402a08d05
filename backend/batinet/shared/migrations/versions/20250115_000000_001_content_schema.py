# pylint: skip-file
# ruff: noqa
"""Content schema - feed, tags, media, comments

Revision ID: 001
Revises:
Create Date: 2025-01-15 00:00:00

Tables created:
- content: Polymorphic feed items (posts, work requests, job offers, ...)
- tags / tag_links: Tag catalogue and weak entity links
- media_assets / content_media: Uploaded files and their gallery position
- comments: Comments on content
- company_memberships: Read-only membership mirror for moderation

Enums created:
- contenttype: POST, WORK_REQUEST, JOB_OFFER, TENDER, LEGAL
- mediatype: IMAGE, VIDEO, FILE
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


content_type_enum = postgresql.ENUM(
    "POST",
    "WORK_REQUEST",
    "JOB_OFFER",
    "TENDER",
    "LEGAL",
    name="contenttype",
    create_type=False,
)

media_type_enum = postgresql.ENUM(
    "IMAGE",
    "VIDEO",
    "FILE",
    name="mediatype",
    create_type=False,
)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade database schema."""
    op.execute("CREATE TYPE contenttype AS ENUM ('POST', 'WORK_REQUEST', 'JOB_OFFER', 'TENDER', 'LEGAL')")
    op.execute("CREATE TYPE mediatype AS ENUM ('IMAGE', 'VIDEO', 'FILE')")

    op.create_table(
        "content",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("type", content_type_enum, nullable=False, index=True),
        sa.Column("author_user_id", postgresql.UUID(as_uuid=True), nullable=False, index=True),
        sa.Column("company_id", postgresql.UUID(as_uuid=True), nullable=True, index=True),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("body", sa.Text(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.true(), index=True),
        sa.Column("meta", postgresql.JSONB(), nullable=True),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    # Feed order
    op.create_index("ix_content_created_at", "content", ["created_at"])

    op.create_table(
        "tags",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("slug", sa.String(100), nullable=False, unique=True),
        sa.Column("label", sa.String(100), nullable=False),
        sa.Column("type", sa.String(30), nullable=False, index=True),
        _created_at(),
    )

    op.create_table(
        "tag_links",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "tag_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("tags.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("entity_type", sa.String(30), nullable=False),
        sa.Column("entity_id", postgresql.UUID(as_uuid=True), nullable=False),
    )
    op.create_index("ix_tag_links_entity", "tag_links", ["entity_type", "entity_id"])

    op.create_table(
        "media_assets",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False, index=True),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("type", media_type_enum, nullable=False),
        sa.Column("mime_type", sa.String(100), nullable=False),
        sa.Column("width", sa.Integer(), nullable=True),
        sa.Column("height", sa.Integer(), nullable=True),
        sa.Column("size_bytes", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("storage_provider", sa.String(30), nullable=False, server_default="local"),
        _created_at(),
    )

    op.create_table(
        "content_media",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "content_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("content.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "media_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("media_assets.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_cover", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "comments",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "content_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("content.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("author_user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("parent_comment_id", postgresql.UUID(as_uuid=True), nullable=True),
        _created_at(),
    )

    op.create_table(
        "company_memberships",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False, index=True),
        sa.Column("company_id", postgresql.UUID(as_uuid=True), nullable=False, index=True),
        sa.Column("roles", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        _created_at(),
    )


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_table("company_memberships")
    op.drop_table("comments")
    op.drop_table("content_media")
    op.drop_table("media_assets")
    op.drop_index("ix_tag_links_entity", table_name="tag_links")
    op.drop_table("tag_links")
    op.drop_table("tags")
    op.drop_index("ix_content_created_at", table_name="content")
    op.drop_table("content")

    op.execute("DROP TYPE IF EXISTS mediatype")
    op.execute("DROP TYPE IF EXISTS contenttype")
