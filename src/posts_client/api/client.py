"""
API Client Module

Async HTTP client for the JSONPlaceholder posts resource. Every operation
returns a call result (``Success``, ``Failure`` or ``TransportError``)
instead of raising for server or network problems; nothing is retried.
"""

import logging
from typing import List, Mapping, Optional

import httpx

from ..config import Config
from ..errors import ResponseDecodeError
from .endpoints import (
    CREATE,
    CREATE_FORM,
    FETCH_BY_ID,
    FETCH_BY_OWNER,
    FETCH_BY_OWNER_FILTERED,
    FETCH_DEFAULT,
    Endpoint,
    build_request,
    merge_query,
)
from .models import Post
from .params import check_form_fields, check_int, check_options, check_post, check_str
from .results import CallResult, Failure, Success, TransportError
from .transport import build_async_client


logger = logging.getLogger(__name__)

AUTH_HEADER = "Auth"


class APIClient:
    """
    HTTP client for the posts API.

    The client owns an ``httpx.AsyncClient`` built from ``config``; use it as
    an async context manager or call ``aclose()`` when done.

    Args:
        config: Explicit configuration; there is no shared default instance.
        transport: Optional inner transport, mainly for tests.
    """

    def __init__(
        self,
        config: Config,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = config.api.base_url
        self._http = build_async_client(config.api, transport=transport)
        logger.info(f"APIClient initialized (base_url: {self.base_url})")

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def fetch_default(self, auth: Optional[str] = None) -> CallResult[Post]:
        """
        Fetch the default post (``GET /posts/1``).

        Args:
            auth: Optional value sent in the per-call ``Auth`` header.
        """
        headers = {AUTH_HEADER: check_str("auth", auth)} if auth is not None else None
        request = build_request(self._http, FETCH_DEFAULT, headers=headers)
        return await self._execute(FETCH_DEFAULT, request)

    async def fetch_by_id(self, post_id: int) -> CallResult[Post]:
        """Fetch one post (``GET /posts/{id}``)."""
        post_id = check_int("post_id", post_id)
        request = build_request(self._http, FETCH_BY_ID, path_params={"id": post_id})
        return await self._execute(FETCH_BY_ID, request)

    async def fetch_by_owner(self, user_id: int) -> CallResult[List[Post]]:
        """Fetch all posts of a user (``GET /posts?userId=``)."""
        user_id = check_int("user_id", user_id)
        query = merge_query({"userId": str(user_id)})
        request = build_request(self._http, FETCH_BY_OWNER, query=query)
        return await self._execute(FETCH_BY_OWNER, request)

    async def fetch_by_owner_filtered(
        self,
        user_id: int,
        options: Optional[Mapping[str, str]] = None
    ) -> CallResult[List[Post]]:
        """
        Fetch a user's posts with extra query parameters.

        Args:
            user_id: Value of the ``userId`` query parameter.
            options: Extra query parameters, e.g. ``{"_sort": "id", "_order": "desc"}``.
                A ``userId`` key in here is ignored; the named parameter wins.
        """
        user_id = check_int("user_id", user_id)
        options = check_options(options)
        query = merge_query({"userId": str(user_id)}, options)
        request = build_request(self._http, FETCH_BY_OWNER_FILTERED, query=query)
        return await self._execute(FETCH_BY_OWNER_FILTERED, request)

    async def create(self, post: Post) -> CallResult[Post]:
        """Create a post sent as a JSON body (``POST /posts``)."""
        post = check_post(post)
        request = build_request(self._http, CREATE, body=post.to_dict())
        return await self._execute(CREATE, request)

    async def create_form(
        self,
        user_id: int,
        id: int,
        title: str,
        body: str
    ) -> CallResult[Post]:
        """Create a post sent as form-encoded fields (``POST /posts``)."""
        post = check_form_fields(user_id, id, title, body)
        request = build_request(self._http, CREATE_FORM, body=post.to_form())
        return await self._execute(CREATE_FORM, request)

    async def _execute(self, endpoint: Endpoint, request: httpx.Request) -> CallResult:
        """Send the request and classify the outcome."""
        logger.debug(f"{endpoint.name}: {request.method} {request.url}")

        try:
            response = await self._http.send(request)
        except httpx.TransportError as e:
            logger.warning(f"{endpoint.name}: no response ({type(e).__name__}: {e})")
            return TransportError(cause=e)

        headers = dict(response.headers)

        if not response.is_success:
            logger.warning(f"{endpoint.name}: HTTP {response.status_code}")
            return Failure(
                status_code=response.status_code,
                headers=headers,
                error_body=response.text,
            )

        logger.info(f"{endpoint.name}: HTTP {response.status_code}")
        return Success(
            status_code=response.status_code,
            headers=headers,
            body=self._decode(endpoint, response),
        )

    def _decode(self, endpoint: Endpoint, response: httpx.Response):
        if not response.content:
            return None

        try:
            data = response.json()
            if endpoint.many:
                if not isinstance(data, list):
                    raise ValueError(f"Expected a JSON array, got {type(data).__name__}")
                return [Post.from_dict(item) for item in data]
            return Post.from_dict(data)
        except ValueError as e:
            raise ResponseDecodeError(
                f"{endpoint.name}: cannot decode response body: {e}"
            ) from e
