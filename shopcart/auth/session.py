"""Web session utilities (in-memory)."""
import secrets
from datetime import datetime, timezone, timedelta
from typing import Dict, Optional

from shopcart.config import SESSION_TTL_HOURS


class SessionStore:
    """Opaque bearer tokens for shoppers.

    Tokens carry no claims; the store maps them to session data and drops
    them once they expire.
    """

    def __init__(self, ttl_hours: int = SESSION_TTL_HOURS):
        self.ttl = timedelta(hours=ttl_hours)
        self._web_sessions: Dict[str, dict] = {}

    def create_web_session(self, username: str) -> str:
        """Create a new web session and return the token."""
        session_token = secrets.token_urlsafe(32)
        now = datetime.now(timezone.utc)
        self._web_sessions[session_token] = {
            "username": username,
            "created_at": now.isoformat(),
            "expires_at": (now + self.ttl).isoformat(),
        }
        return session_token

    def verify_web_session_token(self, token: Optional[str]) -> Optional[dict]:
        """Verify a web session token and return session data."""
        if not token:
            return None
        session = self._web_sessions.get(token)
        if not session:
            return None

        expires_at = datetime.fromisoformat(session["expires_at"])
        if datetime.now(timezone.utc) > expires_at:
            del self._web_sessions[token]
            return None

        return session

    def is_valid(self, token: Optional[str]) -> bool:
        return self.verify_web_session_token(token) is not None

    def purge_expired(self) -> int:
        """Drop every expired session. Returns how many were dropped."""
        now = datetime.now(timezone.utc)
        expired = [
            token for token, session in self._web_sessions.items()
            if now > datetime.fromisoformat(session["expires_at"])
        ]
        for token in expired:
            del self._web_sessions[token]
        return len(expired)

    def revoke_web_session(self, token: str) -> bool:
        """Drop a session. Returns False if it did not exist."""
        return self._web_sessions.pop(token, None) is not None


# Singleton instance
_session_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """Get SessionStore singleton."""
    global _session_store
    if _session_store is None:
        _session_store = SessionStore()
    return _session_store
