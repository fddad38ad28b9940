"""
Tests for the Post Model

Tests for JSON mapping and row formatting.
"""

import json
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from posts_client.api.models import Post


class TestPostMapping:
    """Tests for converting posts to and from JSON."""

    def test_to_dict_uses_wire_names(self):
        post = Post(user_id=3, id=11, title="x", body="y")
        assert post.to_dict() == {"userId": 3, "id": 11, "title": "x", "body": "y"}
        assert list(post.to_dict()) == ["userId", "id", "title", "body"]

    @pytest.mark.parametrize("post", [
        Post(user_id=1, id=1, title="sunt aut facere", body="quia et suscipit"),
        Post(user_id=0, id=0, title="", body=""),
        Post(user_id=-5, id=-1, title="Unicode: café 🎉", body="line\nbreak\ttab"),
    ])
    def test_json_round_trip(self, post):
        """Encoding to JSON and back yields an equal post."""
        assert Post.from_dict(json.loads(json.dumps(post.to_dict()))) == post

    def test_to_form_stringifies_fields(self):
        post = Post(user_id=1, id=2, title="Aadarsh", body="Android Developer")
        assert post.to_form() == {"userId": "1", "id": "2", "title": "Aadarsh", "body": "Android Developer"}

    def test_post_is_immutable(self):
        post = Post(user_id=1, id=2, title="t", body="b")
        with pytest.raises(AttributeError):
            post.title = "changed"

    def test_missing_field(self):
        with pytest.raises(ValueError, match="body"):
            Post.from_dict({"userId": 1, "id": 1, "title": "t"})

    @pytest.mark.parametrize("data", [
        {"userId": "1", "id": 1, "title": "t", "body": "b"},
        {"userId": 1, "id": True, "title": "t", "body": "b"},
        {"userId": 1, "id": 1, "title": None, "body": "b"},
    ])
    def test_wrong_field_type(self, data):
        with pytest.raises(ValueError):
            Post.from_dict(data)

    def test_not_an_object(self):
        with pytest.raises(ValueError):
            Post.from_dict(["userId", 1])


class TestPostFormatting:
    """Tests for post row formatting."""

    def test_format_row(self):
        post = Post(user_id=3, id=11, title="Test Title", body="Test body content")
        row = post.format_row()

        assert row.splitlines() == ["#11 (user 3)", "Test Title", "Test body content"]

    def test_format_with_special_characters(self):
        post = Post(
            user_id=1,
            id=1,
            title="Test & Title <with> 'special' \"chars\"",
            body="Body with\nnewlines\nand\ttabs"
        )
        row = post.format_row()

        assert "&" in row
        assert "newlines" in row

    def test_format_with_unicode(self):
        post = Post(user_id=1, id=1, title="Unicode: café résumé naïve", body="Emoji: 🎉")
        row = post.format_row()

        assert "café" in row
        assert "🎉" in row


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
