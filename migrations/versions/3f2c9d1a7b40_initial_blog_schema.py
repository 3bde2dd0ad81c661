"""initial_blog_schema

Create the blog content schema:
- Blog posts (slug-addressed, optional publication)
- Blog tags (unique name and slug)
- Post/tag associations (many-to-many, cascading on delete)

Revision ID: 3f2c9d1a7b40
Revises:
Create Date: 2026-10-17 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2c9d1a7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # BLOG_POSTS table
    # ========================================================================
    op.create_table(
        "blog_posts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("slug", sa.String(length=100), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("featured", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("published", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("reading_time", sa.Integer(), server_default="1", nullable=False),
        sa.Column("cover_image", sa.Text(), nullable=True),
        sa.Column("author", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index(
        "idx_blog_posts_published_at",
        "blog_posts",
        [sa.text("published_at DESC")],
    )
    op.create_index(
        "idx_blog_posts_created_at",
        "blog_posts",
        [sa.text("created_at DESC")],
    )
    op.create_index("idx_blog_posts_featured", "blog_posts", ["featured"])

    # ========================================================================
    # BLOG_TAGS table
    # ========================================================================
    op.create_table(
        "blog_tags",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("slug", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("color", sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        sa.UniqueConstraint("slug"),
    )

    # ========================================================================
    # BLOG_POST_TAGS junction table
    # ========================================================================
    op.create_table(
        "blog_post_tags",
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["blog_posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["blog_tags.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("post_id", "tag_id"),
    )
    op.create_index("idx_blog_post_tags_tag_id", "blog_post_tags", ["tag_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_blog_post_tags_tag_id", table_name="blog_post_tags")
    op.drop_table("blog_post_tags")
    op.drop_table("blog_tags")
    op.drop_index("idx_blog_posts_featured", table_name="blog_posts")
    op.drop_index("idx_blog_posts_created_at", table_name="blog_posts")
    op.drop_index("idx_blog_posts_published_at", table_name="blog_posts")
    op.drop_table("blog_posts")
