# telemart/services/session_service.py
import json
import threading
import time
from typing import Any, Dict

import redis
from redis.exceptions import RedisError

from telemart.domain.errors import DependencyFailure
from telemart.utils.logging import get_logger
from telemart.utils.retry import redis_retry
from telemart.utils.security import new_session_token
from telemart.utils.settings import REDIS_URL, SESSION_BACKEND, SESSION_MAX_AGE_SECONDS

logger = get_logger(__name__)


class SessionStore:
    """
    Kontrakt: token -> {"userId": ...} z TTL.
    create zwraca nowy, losowy token; get zwraca None dla wygaslego/nieznanego.
    """

    def __init__(self, ttl: int = SESSION_MAX_AGE_SECONDS):
        self.ttl = ttl

    def create(self, data: Dict[str, Any]) -> str:
        raise NotImplementedError

    def get(self, token: str) -> Dict[str, Any] | None:
        raise NotImplementedError

    def destroy(self, token: str) -> None:
        raise NotImplementedError


class MemorySessionStore(SessionStore):
    """Sesje w pamieci procesu - restart lub drugi worker je gubi."""

    def __init__(self, ttl: int = SESSION_MAX_AGE_SECONDS, clock=time.monotonic):
        super().__init__(ttl)
        self._clock = clock
        self._lock = threading.Lock()
        self._sessions: Dict[str, tuple[float, Dict[str, Any]]] = {}

    def create(self, data: Dict[str, Any]) -> str:
        token = new_session_token()
        with self._lock:
            self._purge_expired()
            self._sessions[token] = (self._clock() + self.ttl, dict(data))
        return token

    def get(self, token: str) -> Dict[str, Any] | None:
        with self._lock:
            entry = self._sessions.get(token)
            if entry is None:
                return None
            expires_at, data = entry
            if expires_at <= self._clock():
                del self._sessions[token]
                return None
            return dict(data)

    def destroy(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def _purge_expired(self):
        now = self._clock()
        for token in [t for t, (exp, _) in self._sessions.items() if exp <= now]:
            del self._sessions[token]


class RedisSessionStore(SessionStore):
    """
    Sesje w redisie, wspoldzielone miedzy workerami.
    SET session:<token> <json> EX ttl - redis sam je wygasza.
    """

    def __init__(self, url: str | None = None, ttl: int = SESSION_MAX_AGE_SECONDS, client=None):
        super().__init__(ttl)
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @staticmethod
    def _key(token: str) -> str:
        return f"session:{token}"

    def create(self, data: Dict[str, Any]) -> str:
        token = new_session_token()
        try:
            self._set(self._key(token), json.dumps(data))
        except RedisError as e:
            logger.error(f"Session store unavailable on create: {e}")
            raise DependencyFailure() from e
        return token

    def get(self, token: str) -> Dict[str, Any] | None:
        try:
            raw = self._get(self._key(token))
        except RedisError as e:
            logger.error(f"Session store unavailable on get: {e}")
            raise DependencyFailure() from e
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding malformed session payload")
            return None

    def destroy(self, token: str) -> None:
        try:
            self._delete(self._key(token))
        except RedisError as e:
            logger.error(f"Session store unavailable on destroy: {e}")
            raise DependencyFailure() from e

    @redis_retry()
    def _set(self, key: str, value: str):
        self.redis.set(name=key, value=value, ex=self.ttl)

    @redis_retry()
    def _get(self, key: str) -> str | None:
        return self.redis.get(key)

    @redis_retry()
    def _delete(self, key: str):
        self.redis.delete(key)


def build_session_store(backend: str = SESSION_BACKEND) -> SessionStore:
    if backend == "memory":
        logger.warning("Using in-memory session store; sessions are lost on restart")
        return MemorySessionStore()
    return RedisSessionStore()
