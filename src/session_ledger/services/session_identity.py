"""Anonymous session identity carried in a client cookie.

A client is Unidentified until its first write, which issues a random UUID
token. Every read must present that token. The token is an opaque grouping
key: it is not signed, so whoever holds the string owns the session.
"""

import uuid
from typing import Any, Optional

from session_ledger.config.settings import Settings
from session_ledger.core.exceptions import AuthorizationError
from session_ledger.domain.models import canonical_uuid

SESSION_COOKIE_NAME = "sessionId"
SESSION_MAX_AGE_SECONDS = 60 * 60 * 24 * 7  # 7 days


def new_session_id() -> str:
    """Issue a fresh session token."""
    return str(uuid.uuid4())


def parse_session_id(raw: Optional[str]) -> Optional[str]:
    """Return the canonical token if raw is a hyphenated UUID, else None."""
    return canonical_uuid(raw)


def require_session(raw: Optional[str]) -> str:
    """Return the session token for a read, or raise AuthorizationError."""
    session_id = parse_session_id(raw)
    if session_id is None:
        raise AuthorizationError()
    return session_id


def resolve_write_session(raw: Optional[str]) -> tuple[str, bool]:
    """
    Resolve the session a write belongs to.

    Returns:
        (session_id, issued) where issued is True when a new token was created
        because the client presented none or an unparseable one
    """
    session_id = parse_session_id(raw)
    if session_id is not None:
        return session_id, False
    return new_session_id(), True


def session_cookie_kwargs(settings: Settings) -> dict[str, Any]:
    """Cookie attributes passed to Response.set_cookie."""
    return {
        "httponly": True,
        "secure": settings.is_production,
        "samesite": "strict",
        "path": "/",
        "max_age": SESSION_MAX_AGE_SECONDS,
    }
