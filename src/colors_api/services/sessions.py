"""In-memory cache of generated palettes, keyed by session id."""

from __future__ import annotations

import secrets
import string
import threading
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from colors_api.domain.colors import Palette
from colors_api.exceptions import SessionNotFoundError
from colors_api.logging_config import get_logger
from colors_api.services.interfaces import PaletteSession, PaletteSessionStore

logger = get_logger(__name__)

_BASE36 = string.digits + string.ascii_lowercase
SESSION_ID_SUFFIX_LENGTH = 9


def _utcnow() -> datetime:
    return datetime.now(UTC)


class InMemoryPaletteSessionStore(PaletteSessionStore):
    """Thread-safe dict-backed session store.

    Expired entries are invisible to ``get`` and are removed by
    ``sweep_expired``. Nothing survives a process restart.
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock
        self._sessions: dict[str, PaletteSession] = {}
        self._lock = threading.Lock()

    def new_session_id(self) -> str:
        """``session_{epoch_ms}_{9 base36 chars}``."""
        millis = int(self._clock().timestamp() * 1000)
        suffix = "".join(
            secrets.choice(_BASE36) for _ in range(SESSION_ID_SUFFIX_LENGTH)
        )
        return f"session_{millis}_{suffix}"

    def put(
        self, session_id: str, palette: Palette, ttl: timedelta
    ) -> PaletteSession:
        now = self._clock()
        session = PaletteSession(
            session_id=session_id,
            palette=palette,
            created_at=now,
            expires_at=now + ttl,
        )
        with self._lock:
            replaced = session_id in self._sessions
            self._sessions[session_id] = session
        logger.info(
            "session_stored",
            session_id=session_id,
            replaced=replaced,
            expires_at=session.expires_at.isoformat(),
        )
        return session

    def get(self, session_id: str) -> PaletteSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None or session.is_expired(self._clock()):
            raise SessionNotFoundError(session_id)
        return session

    def delete(self, session_id: str) -> None:
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            raise SessionNotFoundError(session_id)
        logger.info("session_deleted", session_id=session_id)

    def sweep_expired(self, now: datetime | None = None) -> int:
        now = now or self._clock()
        with self._lock:
            expired = [
                session_id
                for session_id, session in self._sessions.items()
                if session.is_expired(now)
            ]
            for session_id in expired:
                del self._sessions[session_id]
        if expired:
            logger.info("sessions_swept", removed=len(expired), remaining=len(self))
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
