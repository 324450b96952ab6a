"""
Unit tests for the session identity protocol.

Tests cover:
- Token issuance and parsing
- Read gate (AuthorizationError)
- Write-side resolution (reuse vs. issue)
- Cookie attributes per environment
"""

import uuid

import pytest

from session_ledger.config.settings import Settings
from session_ledger.core.exceptions import AuthorizationError
from session_ledger.services.session_identity import (
    SESSION_MAX_AGE_SECONDS,
    new_session_id,
    parse_session_id,
    require_session,
    resolve_write_session,
    session_cookie_kwargs,
)


class TestTokens:
    """Tests for issuing and parsing tokens."""

    def test_new_session_ids_are_unique_uuids(self):
        ids = {new_session_id() for _ in range(50)}

        assert len(ids) == 50
        for sid in ids:
            assert str(uuid.UUID(sid)) == sid

    @pytest.mark.parametrize("raw", [None, "", "not-a-uuid", "12345"])
    def test_parse_rejects_missing_or_malformed(self, raw):
        assert parse_session_id(raw) is None

    @pytest.mark.parametrize(
        "raw",
        [
            "{7f1d3a52-2a4c-4b8e-9f6a-2f1f0e3b9c11}",
            "urn:uuid:7f1d3a52-2a4c-4b8e-9f6a-2f1f0e3b9c11",
            "7f1d3a522a4c4b8e9f6a2f1f0e3b9c11",
            "7f1d3a52-2a4c-4b8e-9f6a-2f1f0e3b9c11\n",
        ],
    )
    def test_parse_rejects_non_hyphenated_forms(self, raw):
        assert parse_session_id(raw) is None

    def test_parse_canonicalizes(self):
        sid = new_session_id()

        assert parse_session_id(sid.upper()) == sid


class TestReadGate:
    """Tests for require_session."""

    def test_valid_token_passes(self):
        sid = new_session_id()

        assert require_session(sid) == sid

    @pytest.mark.parametrize("raw", [None, "", "garbage"])
    def test_missing_or_invalid_token_is_unauthorized(self, raw):
        """
        GIVEN no usable session cookie
        WHEN a read requires a session
        THEN AuthorizationError (401) is raised
        """
        with pytest.raises(AuthorizationError) as exc_info:
            require_session(raw)

        assert exc_info.value.status_code == 401


class TestWriteResolution:
    """Tests for resolve_write_session."""

    def test_first_write_issues_token(self):
        session_id, issued = resolve_write_session(None)

        assert issued is True
        assert parse_session_id(session_id) == session_id

    def test_existing_token_is_reused(self):
        sid = new_session_id()

        assert resolve_write_session(sid) == (sid, False)

    def test_unparseable_token_is_replaced(self):
        session_id, issued = resolve_write_session("tampered")

        assert issued is True
        assert session_id != "tampered"


class TestCookieAttributes:
    """Tests for session_cookie_kwargs."""

    def test_development_cookie_is_not_secure(self):
        kwargs = session_cookie_kwargs(Settings(environment="development"))

        assert kwargs == {
            "httponly": True,
            "secure": False,
            "samesite": "strict",
            "path": "/",
            "max_age": 604800,
        }

    def test_production_cookie_is_secure(self):
        kwargs = session_cookie_kwargs(Settings(environment="production"))

        assert kwargs["secure"] is True
        assert kwargs["max_age"] == SESSION_MAX_AGE_SECONDS
