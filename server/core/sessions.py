# server/core/sessions.py

import logging
import secrets
from datetime import datetime, timedelta, timezone
from threading import Lock
from jose import JWTError, jwt

from core.records import Identity


logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class SessionManager:
    """
    Server-side session table.

    The browser only holds a signed token naming a session id; the
    identity itself stays here, so logout really ends the session.
    """

    def __init__(self, secret_key: str, expire_minutes: int = 60):
        self.secret_key = secret_key
        self.expire_minutes = expire_minutes
        self._sessions: dict[str, tuple[Identity, datetime]] = {}
        self._lock = Lock()

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _session_id(self, token: str | None, verify_exp: bool = True) -> str | None:
        if not token:
            return None
        try:
            payload = jwt.decode(
                token, self.secret_key, algorithms=[ALGORITHM],
                options={"verify_exp": verify_exp},
            )
        except JWTError:
            return None
        return payload.get("sid")

    def _purge_expired(self, now: datetime) -> None:
        # Caller holds the lock.
        expired = [sid for sid, (_, expire) in self._sessions.items() if expire <= now]
        for sid in expired:
            del self._sessions[sid]

    def login(self, identity: Identity) -> str:
        sid = secrets.token_urlsafe(32)
        now = self._now()
        expire = now + timedelta(minutes=self.expire_minutes)
        with self._lock:
            self._purge_expired(now)
            self._sessions[sid] = (identity, expire)
        logger.info("Session started for %s", identity.username)
        return jwt.encode({"sid": sid, "exp": expire}, self.secret_key, algorithm=ALGORITHM)

    def current_user(self, token: str | None) -> Identity | None:
        sid = self._session_id(token)
        if sid is None:
            return None
        with self._lock:
            entry = self._sessions.get(sid)
            if entry is None:
                return None
            identity, expire = entry
            if expire <= self._now():
                del self._sessions[sid]
                return None
        return identity

    def logout(self, token: str | None) -> None:
        sid = self._session_id(token, verify_exp=False)
        if sid is None:
            return
        with self._lock:
            entry = self._sessions.pop(sid, None)
        if entry is not None:
            logger.info("Session ended for %s", entry[0].username)
