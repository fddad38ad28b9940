"""Exceptions raised by the Posts Client."""


class PostsClientError(Exception):
    """Base class for all errors raised by this package."""


class InvalidParameterError(PostsClientError, ValueError):
    """A call argument cannot be encoded into a request; nothing was sent."""


class ResponseDecodeError(PostsClientError):
    """A successful response carried a body that is not a post or a list of posts."""
