"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand.
"""

from typing import Any, Dict

from folio.domain.model import NewPost, NewTag, Post, PostPatch, Tag
from folio.domain.value import PostId, Slug, TagId, TagSlug


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(row["id"]),
        name=row["name"],
        slug=TagSlug(row["slug"]),
        description=row.get("description"),
        color=row["color"],
    )


def new_tag_to_dict(tag: NewTag) -> Dict[str, Any]:
    """Convert NewTag to database insert values."""
    return {
        "name": tag.name,
        "slug": tag.slug.root,
        "description": tag.description,
        "color": tag.color,
    }


def row_to_post(row: Dict[str, Any], tags: list[Tag] | None = None) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        tags: Tags associated with this post

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        slug=Slug(row["slug"]),
        title=row["title"],
        description=row.get("description"),
        content=row["content"],
        featured=bool(row["featured"]),
        published=bool(row["published"]),
        published_at=row.get("published_at"),
        reading_time=row["reading_time"],
        cover_image=row.get("cover_image"),
        author=row["author"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        tags=tags or [],
    )


def new_post_to_dict(post: NewPost) -> Dict[str, Any]:
    """Convert NewPost to database insert values.

    Note: tag references are excluded (stored in blog_post_tags).
    """
    return {
        "slug": post.slug.root,
        "title": post.title,
        "description": post.description,
        "content": post.content,
        "featured": post.featured,
        "published": post.published,
        "published_at": post.published_at,
        "reading_time": post.reading_time,
        "cover_image": post.cover_image,
        "author": post.author,
    }


def patch_to_dict(patch: PostPatch) -> Dict[str, Any]:
    """Convert the supplied fields of a patch to update values."""
    values = patch.column_changes()
    if isinstance(values.get("slug"), Slug):
        values["slug"] = values["slug"].root
    return values
