"""Unit tests for caller token extraction."""

import pytest

from qna.interface.api.auth import _extract_token


class TestExtractToken:
    @pytest.mark.parametrize(
        "cookie,header,expected",
        [
            (None, None, None),
            ("cookie-token", None, "cookie-token"),
            (None, "Bearer header-token", "header-token"),
            (None, "bearer header-token", "header-token"),
            ("cookie-token", "Bearer header-token", "header-token"),
            ("cookie-token", "Basic dXNlcjpwYXNz", "cookie-token"),
            (None, "Bearer   ", None),
            ("", None, None),
        ],
    )
    def test_extract(self, cookie, header, expected):
        assert _extract_token(cookie, header) == expected
