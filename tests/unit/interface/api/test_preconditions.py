"""Unit tests for request preconditions."""

import pytest
from fastapi import Request

from ballot.interface.api.preconditions import require_json_content_type
from ballot.interface.error import UnsupportedMediaTypeError


def make_request(content_type: str | None) -> Request:
    headers = []
    if content_type is not None:
        headers.append((b"content-type", content_type.encode()))
    return Request({"type": "http", "method": "POST", "headers": headers})


class TestRequireJsonContentType:
    """Tests for require_json_content_type."""

    @pytest.mark.parametrize(
        "content_type",
        ["application/json", "application/json; charset=utf-8", "Application/JSON"],
    )
    def test_json_is_accepted(self, content_type):
        require_json_content_type(make_request(content_type))

    @pytest.mark.parametrize(
        "content_type", [None, "", "text/plain", "application/jsonp", "multipart/form-data"]
    )
    def test_anything_else_is_rejected(self, content_type):
        with pytest.raises(
            UnsupportedMediaTypeError, match="Content-Type must be application/json"
        ):
            require_json_content_type(make_request(content_type))
