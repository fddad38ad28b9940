"""
Post Model

The single record type exchanged with the posts API, and its mapping
onto the JSON object used on the wire.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping


def _require_int(data: Mapping[str, Any], key: str) -> int:
    value = data[key]
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Field {key!r} must be an integer, got {type(value).__name__}")
    return value


def _require_str(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"Field {key!r} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Post:
    """Represents a post from the API."""
    user_id: int
    id: int
    title: str
    body: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Post":
        """
        Build a post from its decoded JSON object.

        Raises:
            ValueError: If a field is missing or has the wrong type.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        missing = [key for key in ("userId", "id", "title", "body") if key not in data]
        if missing:
            raise ValueError(f"Missing field(s): {', '.join(missing)}")

        return cls(
            user_id=_require_int(data, "userId"),
            id=_require_int(data, "id"),
            title=_require_str(data, "title"),
            body=_require_str(data, "body"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON object for this post, keys in wire order."""
        return {
            "userId": self.user_id,
            "id": self.id,
            "title": self.title,
            "body": self.body,
        }

    def to_form(self) -> Dict[str, str]:
        """The four fields as strings, ready for form encoding."""
        return {key: str(value) for key, value in self.to_dict().items()}

    def format_row(self) -> str:
        """Format the post as a list row for terminal output."""
        return f"#{self.id} (user {self.user_id})\n{self.title}\n{self.body}"
