"""Shared state for the in-memory repositories."""

from contextlib import contextmanager
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Iterator

from folio.domain.model import Post, Tag


@dataclass
class InMemoryDatabase:
    """Tables for the in-memory repositories.

    Post and tag repositories share one instance so associations and
    uniqueness rules span both, as they would in a real database.
    """

    posts: dict[int, Post] = field(default_factory=dict)
    tags: dict[int, Tag] = field(default_factory=dict)
    post_tags: set[tuple[int, int]] = field(default_factory=set)
    next_post_id: int = 1
    next_tag_id: int = 1

    def allocate_post_id(self) -> int:
        post_id = self.next_post_id
        self.next_post_id += 1
        return post_id

    def allocate_tag_id(self) -> int:
        tag_id = self.next_tag_id
        self.next_tag_id += 1
        return tag_id

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Restore every table if the block raises."""
        snapshot = deepcopy(
            (self.posts, self.tags, self.post_tags, self.next_post_id, self.next_tag_id)
        )
        try:
            yield
        except BaseException:
            (
                self.posts,
                self.tags,
                self.post_tags,
                self.next_post_id,
                self.next_tag_id,
            ) = snapshot
            raise
