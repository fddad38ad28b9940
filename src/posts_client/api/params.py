"""
Argument checks shared by every posts repository.

Each check raises ``InvalidParameterError`` before anything is sent, so the
HTTP client and in-memory substitutes reject exactly the same inputs.
"""

from typing import Any, Mapping, Optional

from ..errors import InvalidParameterError
from .models import Post


def check_int(name: str, value: Any) -> int:
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    return value


def check_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidParameterError(f"{name} must be a string, got {value!r}")
    return value


def check_options(options: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    """Validate an option set; ``None`` means no extra parameters."""
    if options is None:
        return {}
    if not isinstance(options, Mapping):
        raise InvalidParameterError(f"options must be a mapping, got {type(options).__name__}")
    for key, value in options.items():
        check_str("option key", key)
        check_str(f"option {key!r}", value)
    return options


def check_post(post: Any) -> Post:
    if not isinstance(post, Post):
        raise InvalidParameterError(f"post must be a Post, got {type(post).__name__}")
    return post


def check_form_fields(user_id: Any, id: Any, title: Any, body: Any) -> Post:
    """Validate the four create-form fields and bundle them as a ``Post``."""
    return Post(
        user_id=check_int("user_id", user_id),
        id=check_int("id", id),
        title=check_str("title", title),
        body=check_str("body", body),
    )
