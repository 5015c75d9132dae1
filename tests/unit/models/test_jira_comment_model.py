"""
Tests for the JiraComment and CommentPostResult Pydantic models.
"""

import pytest

from jira_mcp_server.models.constants import EMPTY_STRING, UNKNOWN_AUTHOR
from jira_mcp_server.models.jira import CommentPostResult, JiraComment


class TestJiraComment:
    """Tests for the JiraComment model."""

    def test_from_api_response_with_valid_data(self):
        """Test creating a JiraComment from valid API data."""
        data = {
            "id": "10000",
            "body": "This is a test comment",
            "created": "2024-01-01T12:00:00.000+0000",
            "updated": "2024-01-02T12:00:00.000+0000",
            "author": {"name": "cuser", "displayName": "Comment User"},
        }
        comment = JiraComment.from_api_response(data)
        assert comment.author == "Comment User"
        assert comment.body == "This is a test comment"
        assert comment.created == "2024-01-01T12:00:00.000+0000"

    def test_from_api_response_with_empty_data(self):
        """Test creating a JiraComment from empty data."""
        comment = JiraComment.from_api_response({})
        assert comment.author == UNKNOWN_AUTHOR
        assert comment.body == EMPTY_STRING
        assert comment.created == EMPTY_STRING

    def test_author_absent_maps_to_unknown(self):
        comment = JiraComment.from_api_response({"body": "orphan"})
        assert comment.author == "Unknown"

    @pytest.mark.parametrize(
        "author,expected",
        [
            ({"name": "jdoe", "displayName": "Jane Doe"}, "Jane Doe"),
            ({"name": "jdoe"}, "jdoe"),
            ({"name": "jdoe", "displayName": ""}, "jdoe"),
            ({}, "Unknown"),
            (None, "Unknown"),
        ],
    )
    def test_author_fallback_chain(self, author, expected):
        comment = JiraComment.from_api_response({"author": author, "body": "x"})
        assert comment.author == expected

    def test_null_body_and_created_default_to_empty(self):
        comment = JiraComment.from_api_response(
            {"author": {"displayName": "A"}, "body": None, "created": None}
        )
        assert comment.body == ""
        assert comment.created == ""

    def test_non_dict_data_returns_default(self):
        comment = JiraComment.from_api_response("not-a-dict")  # type: ignore[arg-type]
        assert comment == JiraComment()

    def test_to_simplified_dict(self):
        """Test converting JiraComment to a simplified dictionary."""
        comment = JiraComment(
            author="Comment User", body="Hi", created="2024-01-01T12:00:00.000+0000"
        )
        assert comment.to_simplified_dict() == {
            "author": "Comment User",
            "body": "Hi",
            "created": "2024-01-01T12:00:00.000+0000",
        }


class TestCommentPostResult:
    """Tests for the CommentPostResult model."""

    def test_from_api_response(self):
        result = CommentPostResult.from_api_response({"id": "123", "body": "hello"})
        assert result.success is True
        assert result.to_simplified_dict() == {"success": True, "commentId": "123"}

    def test_missing_id_defaults_to_empty(self):
        result = CommentPostResult.from_api_response({})
        assert result.to_simplified_dict() == {"success": True, "commentId": ""}

    def test_success_is_always_true(self):
        with pytest.raises(ValueError):
            CommentPostResult(success=False)  # type: ignore[arg-type]
