"""
Posts View-Model

Launches repository calls as asyncio tasks and publishes each result in the
``ResultCell`` that belongs to that kind of call. Observers (a CLI, a UI)
subscribe to the cells; they never talk to the repository directly.
"""

import asyncio
import logging
from typing import Awaitable, List, Mapping, Optional, Set

from .api.models import Post
from .api.results import CallResult
from .live import ResultCell
from .repository import PostsRepository


logger = logging.getLogger(__name__)


class PostsViewModel:
    """
    Owns one result cell per operation.

    Calls run to completion unless ``close()`` cancels them. When two calls
    of the same kind overlap, the cell keeps whichever finished last.
    """

    def __init__(self, repository: PostsRepository):
        self.repository = repository

        self.post: ResultCell[CallResult[Post]] = ResultCell("post")
        self.post_by_id: ResultCell[CallResult[Post]] = ResultCell("post_by_id")
        self.posts_by_owner: ResultCell[CallResult[List[Post]]] = ResultCell("posts_by_owner")
        self.posts_by_owner_filtered: ResultCell[CallResult[List[Post]]] = ResultCell(
            "posts_by_owner_filtered"
        )
        self.created: ResultCell[CallResult[Post]] = ResultCell("created")
        self.created_form: ResultCell[CallResult[Post]] = ResultCell("created_form")

        self._tasks: Set[asyncio.Task] = set()

    def get_post(self, auth: Optional[str] = None) -> asyncio.Task:
        return self._launch(self.repository.fetch_default(auth=auth), self.post)

    def get_post_by_id(self, post_id: int) -> asyncio.Task:
        return self._launch(self.repository.fetch_by_id(post_id), self.post_by_id)

    def get_posts_by_owner(self, user_id: int) -> asyncio.Task:
        return self._launch(self.repository.fetch_by_owner(user_id), self.posts_by_owner)

    def get_posts_by_owner_filtered(
        self,
        user_id: int,
        options: Optional[Mapping[str, str]] = None
    ) -> asyncio.Task:
        return self._launch(
            self.repository.fetch_by_owner_filtered(user_id, options),
            self.posts_by_owner_filtered,
        )

    def push_post(self, post: Post) -> asyncio.Task:
        return self._launch(self.repository.create(post), self.created)

    def push_post_form(self, user_id: int, id: int, title: str, body: str) -> asyncio.Task:
        return self._launch(
            self.repository.create_form(user_id, id, title, body),
            self.created_form,
        )

    async def join(self) -> None:
        """
        Wait for every in-flight call to finish.

        Raises:
            Whatever a call raised (e.g. ``InvalidParameterError``).
        """
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def close(self) -> None:
        """Cancel in-flight calls; their cells keep their previous values."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        if tasks:
            logger.info(f"Cancelled {len(tasks)} in-flight call(s)")

    def _launch(self, call: Awaitable[CallResult], cell: ResultCell) -> asyncio.Task:
        task = asyncio.create_task(self._deliver(call, cell))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _deliver(self, call: Awaitable[CallResult], cell: ResultCell) -> CallResult:
        result = await call
        cell.set(result)
        return result
