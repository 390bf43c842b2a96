"""Authentication package."""
from .session import SessionStore, get_session_store
from .dependencies import get_session_token

__all__ = [
    "SessionStore",
    "get_session_store",
    "get_session_token",
]
