"""
Repository

The seam between callers and the HTTP client. ``Repository`` forwards every
call to ``APIClient`` unchanged; ``InMemoryRepository`` answers the same
calls from a dictionary of posts so callers can be exercised offline.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Protocol, runtime_checkable

from .api.client import APIClient
from .api.models import Post
from .api.params import check_form_fields, check_int, check_options, check_post, check_str
from .api.results import CallResult, Failure, Success


logger = logging.getLogger(__name__)


@runtime_checkable
class PostsRepository(Protocol):
    """Operations every posts repository provides."""

    async def fetch_default(self, auth: Optional[str] = None) -> CallResult[Post]:
        ...

    async def fetch_by_id(self, post_id: int) -> CallResult[Post]:
        ...

    async def fetch_by_owner(self, user_id: int) -> CallResult[List[Post]]:
        ...

    async def fetch_by_owner_filtered(
        self,
        user_id: int,
        options: Optional[Mapping[str, str]] = None
    ) -> CallResult[List[Post]]:
        ...

    async def create(self, post: Post) -> CallResult[Post]:
        ...

    async def create_form(self, user_id: int, id: int, title: str, body: str) -> CallResult[Post]:
        ...


class Repository:
    """Pass-through repository backed by an ``APIClient``."""

    def __init__(self, api: APIClient):
        self.api = api

    async def fetch_default(self, auth: Optional[str] = None) -> CallResult[Post]:
        return await self.api.fetch_default(auth=auth)

    async def fetch_by_id(self, post_id: int) -> CallResult[Post]:
        return await self.api.fetch_by_id(post_id)

    async def fetch_by_owner(self, user_id: int) -> CallResult[List[Post]]:
        return await self.api.fetch_by_owner(user_id)

    async def fetch_by_owner_filtered(
        self,
        user_id: int,
        options: Optional[Mapping[str, str]] = None
    ) -> CallResult[List[Post]]:
        return await self.api.fetch_by_owner_filtered(user_id, options)

    async def create(self, post: Post) -> CallResult[Post]:
        return await self.api.create(post)

    async def create_form(self, user_id: int, id: int, title: str, body: str) -> CallResult[Post]:
        return await self.api.create_form(user_id, id, title, body)


class InMemoryRepository:
    """
    Repository that serves posts from memory.

    Reads answer ``Success(200)`` or ``Failure(404)``. Creates echo the
    submitted post with a freshly assigned id and answer ``Success(201)``;
    the stored set is updated so later reads see the new post. Filtered
    reads understand the ``_sort`` and ``_order`` options; other options
    are ignored. Arguments are checked exactly as ``APIClient`` checks them,
    so invalid input raises ``InvalidParameterError`` here too.
    """

    def __init__(self, posts: Iterable[Post] = ()):
        self.posts: Dict[int, Post] = {post.id: post for post in posts}

    async def fetch_default(self, auth: Optional[str] = None) -> CallResult[Post]:
        if auth is not None:
            check_str("auth", auth)
        return self._get(1)

    async def fetch_by_id(self, post_id: int) -> CallResult[Post]:
        return self._get(check_int("post_id", post_id))

    async def fetch_by_owner(self, user_id: int) -> CallResult[List[Post]]:
        return Success(status_code=200, body=self._owned_by(check_int("user_id", user_id)))

    async def fetch_by_owner_filtered(
        self,
        user_id: int,
        options: Optional[Mapping[str, str]] = None
    ) -> CallResult[List[Post]]:
        options = check_options(options)
        posts = self._owned_by(check_int("user_id", user_id))

        sort_field = options.get("_sort")
        if sort_field:
            if sort_field not in ("userId", "id", "title", "body"):
                return Failure(status_code=400, error_body=f"unknown sort field {sort_field!r}")
            posts.sort(
                key=lambda post: post.to_dict()[sort_field],
                reverse=options.get("_order", "asc").lower() == "desc",
            )
        return Success(status_code=200, body=posts)

    async def create(self, post: Post) -> CallResult[Post]:
        return self._store(check_post(post))

    async def create_form(self, user_id: int, id: int, title: str, body: str) -> CallResult[Post]:
        return self._store(check_form_fields(user_id, id, title, body))

    def _get(self, post_id: int) -> CallResult[Post]:
        post = self.posts.get(post_id)
        if post is None:
            return Failure(status_code=404, error_body="{}")
        return Success(status_code=200, body=post)

    def _owned_by(self, user_id: int) -> List[Post]:
        return [post for post in self.posts.values() if post.user_id == user_id]

    def _store(self, post: Post) -> CallResult[Post]:
        new_id = max(self.posts, default=0) + 1
        created = Post(user_id=post.user_id, id=new_id, title=post.title, body=post.body)
        self.posts[new_id] = created
        logger.debug(f"Stored post {new_id} in memory")
        return Success(status_code=201, body=created)
