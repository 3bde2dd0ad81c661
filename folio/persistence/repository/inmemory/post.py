"""In-memory post repository for testing."""

from datetime import datetime
from typing import List, Optional

from folio.domain.error import ConflictError, NotFoundError, ValidationError
from folio.domain.model import NewPost, Post, PostPatch, Tag, TagRef, utcnow
from folio.domain.repository.post import PostRepository
from folio.domain.value import PostId, Slug, TagId, TagSlug
from folio.util.text import generate_tag_slug

from .database import InMemoryDatabase

DEFAULT_TAG_COLOR = "#06b6d4"


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(
        self,
        database: InMemoryDatabase | None = None,
        default_tag_color: str = DEFAULT_TAG_COLOR,
    ) -> None:
        self._db = database or InMemoryDatabase()
        self._default_tag_color = default_tag_color

    def _with_tags(self, post: Post) -> Post:
        tags = [
            self._db.tags[tag_id]
            for post_id, tag_id in self._db.post_tags
            if post_id == post.id and tag_id in self._db.tags
        ]
        return post.model_copy(update={"tags": sorted(tags, key=lambda t: t.name)})

    def _slug_taken(self, slug: Slug, exclude_id: Optional[int] = None) -> bool:
        return any(
            post.slug == slug and post.id != exclude_id
            for post in self._db.posts.values()
        )

    def _resolve_tag_id(self, ref: TagRef) -> TagId:
        if isinstance(ref, int):
            if ref not in self._db.tags:
                raise ValidationError(f"Tag not found: {ref}")
            return TagId(ref)

        name = ref.strip()
        slug = generate_tag_slug(name)
        if not name or not slug:
            raise ValidationError(f"Invalid tag name: {ref!r}")

        for tag in self._db.tags.values():
            if tag.name == name or tag.slug.root == slug:
                return tag.id

        tag_id = TagId(self._db.allocate_tag_id())
        self._db.tags[tag_id] = Tag(
            id=tag_id, name=name, slug=TagSlug(slug), color=self._default_tag_color
        )
        return tag_id

    def _associate_tags(self, post_id: PostId, refs: list[TagRef]) -> None:
        for ref in refs:
            self._db.post_tags.add((post_id, self._resolve_tag_id(ref)))

    async def create(self, post: NewPost) -> PostId:
        """Insert a post and associate its tags atomically."""
        with self._db.transaction():
            if self._slug_taken(post.slug):
                raise ConflictError("post", "slug", post.slug.root)

            post_id = PostId(self._db.allocate_post_id())
            now = utcnow()
            self._db.posts[post_id] = Post(
                id=post_id,
                created_at=now,
                updated_at=now,
                **post.model_dump(exclude={"tags", "slug"}),
                slug=post.slug,
            )
            self._associate_tags(post_id, post.tags)
            return post_id

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        post = self._db.posts.get(post_id)
        return self._with_tags(post) if post else None

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        for post in self._db.posts.values():
            if post.slug == slug:
                return self._with_tags(post)
        return None

    def _matching(self, published_only: bool, featured_only: bool) -> list[Post]:
        posts = list(self._db.posts.values())
        if published_only:
            posts = [p for p in posts if p.published]
        if featured_only:
            posts = [p for p in posts if p.featured]
        return posts

    async def find_all(
        self,
        published_only: bool = False,
        featured_only: bool = False,
        limit: Optional[int] = None,
        tag_slug: Optional[str] = None,
    ) -> List[Post]:
        """Find posts newest first."""
        posts = self._matching(published_only, featured_only)
        if tag_slug is not None:
            tagged = {
                post_id
                for post_id, tag_id in self._db.post_tags
                if tag_id in self._db.tags and self._db.tags[tag_id].slug.root == tag_slug
            }
            posts = [p for p in posts if p.id in tagged]

        def sort_key(post: Post) -> tuple[datetime, int]:
            return (post.sort_date, post.id)

        posts.sort(key=sort_key, reverse=True)
        if limit is not None:
            posts = posts[:limit]
        return [self._with_tags(p) for p in posts]

    async def count(
        self,
        published_only: bool = False,
        featured_only: bool = False,
    ) -> int:
        """Count posts matching the given filters."""
        return len(self._matching(published_only, featured_only))

    async def update(self, post_id: PostId, patch: PostPatch) -> None:
        """Apply a sparse patch to a post."""
        with self._db.transaction():
            post = self._db.posts.get(post_id)
            if post is None:
                raise NotFoundError("post", str(post_id))

            changes = patch.column_changes()
            if "slug" in changes and self._slug_taken(changes["slug"], exclude_id=post_id):
                raise ConflictError("post", "slug", changes["slug"].root)

            changes["updated_at"] = utcnow()
            # Validate the result the way a NOT NULL / type constraint would
            row = post.model_dump(exclude={"tags", "slug"})
            row.update(changes)
            row.setdefault("slug", post.slug)
            self._db.posts[post_id] = Post.model_validate(row)

            if patch.is_set("tags"):
                self._db.post_tags = {
                    pair for pair in self._db.post_tags if pair[0] != post_id
                }
                self._associate_tags(post_id, patch.tags or [])

    async def delete(self, post_id: PostId) -> None:
        """Delete a post and its tag associations."""
        if post_id not in self._db.posts:
            raise NotFoundError("post", str(post_id))
        del self._db.posts[post_id]
        self._db.post_tags = {pair for pair in self._db.post_tags if pair[0] != post_id}

    async def delete_all(self) -> int:
        """Delete every post."""
        deleted = len(self._db.posts)
        self._db.posts.clear()
        self._db.post_tags.clear()
        return deleted
