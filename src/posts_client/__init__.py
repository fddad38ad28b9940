"""
Posts Client

Typed async client for the JSONPlaceholder posts API, layered as
client -> repository -> view-model with observable result cells.
"""

from .api import APIClient, CallResult, Failure, Post, Success, TransportError
from .config import Config
from .errors import InvalidParameterError, PostsClientError, ResponseDecodeError
from .live import ResultCell
from .repository import InMemoryRepository, PostsRepository, Repository
from .viewmodel import PostsViewModel

__all__ = [
    "APIClient",
    "CallResult",
    "Config",
    "Failure",
    "InMemoryRepository",
    "InvalidParameterError",
    "Post",
    "PostsClientError",
    "PostsRepository",
    "PostsViewModel",
    "Repository",
    "ResponseDecodeError",
    "ResultCell",
    "Success",
    "TransportError",
]
