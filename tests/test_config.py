# =============================================================================
# tests/test_config.py - Static Settings Tests
# =============================================================================
# Tests for app/config.py, lib/utils.py, app/middleware.py and the request
# validation handler:
# - Size limit parsing and the request body cap
# - Remote image allowlist patterns
# - Settings validation at startup
#
# Run with: poetry run pytest tests/test_config.py -v
# =============================================================================

import asyncio
import json

import pytest
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app.config import Settings, is_allowed_image_url, settings
from app.exceptions import validation_exception_handler
from lib.utils import RemotePattern, parse_remote_pattern, parse_size_limit

TWO_MB = 2 * 1024 * 1024


# =============================================================================
# Size Limit Tests
# =============================================================================

class TestParseSizeLimit:
    """Tests for parse_size_limit."""

    @pytest.mark.parametrize("value,expected", [
        ("2mb", TWO_MB),
        ("2MB", TWO_MB),
        ("500kb", 500 * 1024),
        ("1gb", 1024 ** 3),
        ("1.5kb", 1536),
        ("1024", 1024),
        ("10b", 10),
        (4096, 4096),
    ])
    def test_valid_sizes(self, value, expected):
        """Binary units, bare numbers and ints are accepted."""
        assert parse_size_limit(value) == expected

    @pytest.mark.parametrize("value", ["", "two mb", "2tb", "-1mb"])
    def test_invalid_sizes(self, value):
        """Unrecognized sizes raise ValueError."""
        with pytest.raises(ValueError):
            parse_size_limit(value)


class TestBodySizeLimit:
    """Tests for the request body cap middleware."""

    def test_default_limit(self):
        """The default cap is 2mb."""
        assert settings.ACTIONS_BODY_SIZE_LIMIT == "2mb"
        assert settings.body_size_limit_bytes == TWO_MB

    def test_body_at_limit_accepted(self, client):
        """A body exactly at the limit passes."""
        response = client.post("/api/portal/logout", content=b"x" * TWO_MB)
        assert response.status_code == 200

    def test_oversized_body_rejected(self, client):
        """A body one byte over the limit is rejected with 413."""
        response = client.post("/api/portal/logout", content=b"x" * (TWO_MB + 1))

        assert response.status_code == 413
        body = response.json()
        assert body["code"] == "PAYLOAD_TOO_LARGE"
        assert body["details"] == {"size": TWO_MB + 1, "limit": TWO_MB}

    def test_chunked_body_requires_length(self, client):
        """A streamed body of unknown size is refused with 411."""
        def chunks():
            yield b"x" * 1024
            yield b"x" * 1024

        response = client.post("/api/portal/logout", content=chunks())

        assert response.status_code == 411
        assert response.json()["code"] == "LENGTH_REQUIRED"

    def test_empty_post_allowed(self, client):
        """A POST with no body passes the cap."""
        response = client.post("/api/portal/logout")
        assert response.status_code == 200

    def test_invalid_setting_fails_fast(self):
        """A bad size string is rejected when settings load."""
        with pytest.raises(ValidationError):
            Settings(ACTIONS_BODY_SIZE_LIMIT="a lot")


# =============================================================================
# Remote Image Pattern Tests
# =============================================================================

class TestRemotePatterns:
    """Tests for parse_remote_pattern and is_allowed_image_url."""

    def test_parse_default_pattern(self):
        """The default allowlist entry parses into its parts."""
        pattern = parse_remote_pattern("https://**.amazonaws.com/**")

        assert pattern == RemotePattern(protocol="https", hostname="**.amazonaws.com", pathname="/**")
        assert settings.image_remote_patterns_list == [pattern]

    def test_parse_with_port(self):
        """Ports are kept as strings."""
        pattern = parse_remote_pattern("http://localhost:9000/uploads/**")

        assert pattern.port == "9000"
        assert pattern.pathname == "/uploads/**"

    def test_parse_without_path(self):
        """A pattern without a path allows any path."""
        assert parse_remote_pattern("https://cdn.example.com").pathname == "/**"

    @pytest.mark.parametrize("value", ["cdn.example.com/**", "https:///images/**"])
    def test_parse_invalid(self, value):
        """Patterns need a protocol and a hostname."""
        with pytest.raises(ValueError):
            parse_remote_pattern(value)

    @pytest.mark.parametrize("url", [
        "https://my-bucket.s3.amazonaws.com/tenants/logo.png",
        "https://s3.ap-south-1.amazonaws.com/bucket/avatar.jpg",
        "https://BUCKET.S3.AMAZONAWS.COM/a.png",
    ])
    def test_allowed_urls(self, url):
        """S3 hosts at any depth are allowed."""
        assert is_allowed_image_url(url) is True

    @pytest.mark.parametrize("url", [
        "http://my-bucket.s3.amazonaws.com/logo.png",
        "https://amazonaws.com/logo.png",
        "https://amazonaws.com.evil.example/logo.png",
        "https://images.example.com/logo.png",
        "not a url",
    ])
    def test_rejected_urls(self, url):
        """Other protocols and hosts are not allowed."""
        assert is_allowed_image_url(url) is False

    def test_single_star_matches_one_label(self):
        """`*` stays within one hostname label."""
        pattern = parse_remote_pattern("https://*.example.com/images/*")

        assert pattern.matches("https://cdn.example.com/images/a.png")
        assert not pattern.matches("https://a.cdn.example.com/images/a.png")
        assert not pattern.matches("https://cdn.example.com/images/nested/a.png")

    def test_port_must_match(self):
        """A pattern with a port only allows that port."""
        pattern = parse_remote_pattern("http://localhost:9000/**")

        assert pattern.matches("http://localhost:9000/a.png")
        assert not pattern.matches("http://localhost:9001/a.png")

    def test_invalid_setting_fails_fast(self):
        """A malformed allowlist is rejected when settings load."""
        with pytest.raises(ValidationError):
            Settings(IMAGE_REMOTE_PATTERNS="https://**.amazonaws.com/**,cdn.example.com")


# =============================================================================
# Validation Handler Tests
# =============================================================================

class TestValidationHandler:
    """Tests for the RequestValidationError handler."""

    def test_errors_as_path_message_pairs(self):
        """Each violation is reported as {path, message}."""
        exc = RequestValidationError([
            {"loc": ("body", "amount"), "msg": "Amount must be positive", "type": "too_small"},
            {"loc": ("body", "items", 0), "msg": "Field required", "type": "missing"},
        ])

        response = asyncio.run(validation_exception_handler(None, exc))

        assert response.status_code == 422
        assert json.loads(response.body) == {
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": [
                {"path": ["body", "amount"], "message": "Amount must be positive"},
                {"path": ["body", "items", "0"], "message": "Field required"},
            ],
        }
