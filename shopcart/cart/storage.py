"""In-memory cart storage with per-session locks."""
import asyncio
import json
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List, Optional


class CartStorage:
    """
    Keeps serialized carts keyed by session id.

    Carts are stored as JSON strings so that whatever a caller holds is a
    detached copy; only ``set`` changes stored state. ``lock`` serializes
    read-modify-write cycles of one session without blocking other sessions.
    """

    def __init__(self):
        self._data: Dict[str, str] = {}
        self._locks: Dict[str, asyncio.Lock] = {}

    @staticmethod
    def cart_key(session_id: str) -> str:
        return f"cart:{session_id}"

    async def get(self, session_id: str) -> Optional[dict]:
        raw = self._data.get(self.cart_key(session_id))
        if raw is None:
            return None
        return json.loads(raw)

    async def set(self, session_id: str, data: dict) -> None:
        self._data[self.cart_key(session_id)] = json.dumps(data)

    async def delete(self, session_id: str) -> bool:
        return self._data.pop(self.cart_key(session_id), None) is not None

    @asynccontextmanager
    async def lock(self, session_id: str) -> AsyncIterator[None]:
        """Hold the session's lock for the duration of the block."""
        session_lock = self._locks.setdefault(session_id, asyncio.Lock())
        async with session_lock:
            yield

    def forget(self, session_id: str) -> None:
        """Drop the lock of a finished session."""
        self._locks.pop(session_id, None)

    def purge(self, session_id: str) -> bool:
        """Drop both the cart and the lock of a session that is gone."""
        removed = self._data.pop(self.cart_key(session_id), None) is not None
        self.forget(session_id)
        return removed

    def session_ids(self) -> List[str]:
        """Sessions that currently hold a cart or a lock."""
        prefix = self.cart_key("")
        ids = {key[len(prefix):] for key in self._data}
        ids.update(self._locks)
        return sorted(ids)

    def __len__(self) -> int:
        return len(self._data)
