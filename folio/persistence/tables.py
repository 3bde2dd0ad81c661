"""SQLAlchemy table definitions for Folio.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    false,
    func,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# BLOG POSTS TABLE
# ============================================================================
posts_table = Table(
    "blog_posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("slug", String(100), nullable=False, unique=True),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=True),
    Column("content", Text, nullable=False),
    Column("featured", Boolean, nullable=False, server_default=false()),
    Column("published", Boolean, nullable=False, server_default=false()),
    Column("published_at", DateTime(timezone=True), nullable=True),
    Column("reading_time", Integer, nullable=False, server_default="1"),
    Column("cover_image", Text, nullable=True),
    Column("author", String(255), nullable=False),
    Column(
        "created_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
    Column(
        "updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()
    ),
)

Index("idx_blog_posts_published_at", posts_table.c.published_at.desc())
Index("idx_blog_posts_created_at", posts_table.c.created_at.desc())
Index("idx_blog_posts_featured", posts_table.c.featured)

# ============================================================================
# BLOG TAGS TABLE
# ============================================================================
tags_table = Table(
    "blog_tags",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False, unique=True),
    Column("slug", String(100), nullable=False, unique=True),
    Column("description", Text, nullable=True),
    Column("color", String(32), nullable=False),
)

# ============================================================================
# BLOG_POST_TAGS TABLE (junction table for many-to-many relationship)
# ============================================================================
post_tags_table = Table(
    "blog_post_tags",
    metadata,
    Column(
        "post_id",
        Integer,
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        Integer,
        ForeignKey("blog_tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

Index("idx_blog_post_tags_tag_id", post_tags_table.c.tag_id)
