"""Tests for request dependencies."""

from topmeup.interface.api.dependencies import auth_token


class TestAuthToken:
    def test_bearer_header(self):
        assert auth_token(authorization="Bearer abc.def", auth_token=None) == "abc.def"

    def test_scheme_is_case_insensitive(self):
        assert auth_token(authorization="bearer abc", auth_token=None) == "abc"

    def test_header_wins_over_cookie(self):
        assert auth_token(authorization="Bearer header", auth_token="cookie") == "header"

    def test_cookie_fallback(self):
        assert auth_token(authorization=None, auth_token="cookie") == "cookie"

    def test_non_bearer_header_falls_back_to_cookie(self):
        assert auth_token(authorization="Basic dXNlcg==", auth_token="cookie") == "cookie"

    def test_empty_bearer(self):
        assert auth_token(authorization="Bearer   ", auth_token=None) is None

    def test_nothing(self):
        assert auth_token(authorization=None, auth_token=None) is None
