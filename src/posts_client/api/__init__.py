"""
API Client Module

Provides the async HTTP client for the JSONPlaceholder posts resource.
"""

from .client import APIClient
from .models import Post
from .results import CallResult, Failure, Success, TransportError

__all__ = ["APIClient", "Post", "CallResult", "Success", "Failure", "TransportError"]
