"""
conversation/session.py — Per-session conversation state.

Every visitor conversation gets its own ChatSession holding context, response
cache and transcript. Nothing is process-wide, so two browser tabs never see
each other's topics or cached answers.

In-process (dict) storage: survives across requests but not restarts.
That is enough for a portfolio site; a shared store would only matter with
several server replicas.
"""
import threading
from dataclasses import dataclass, field

from app.config import get_settings
from app.conversation.cache import ResponseCache
from app.conversation.context import ConversationContext
from app.conversation.history import ConversationHistory
from app.observability.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ChatSession:
    session_id: str
    context: ConversationContext
    cache: ResponseCache
    history: ConversationHistory
    # Serialises pipeline runs within one session
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    @classmethod
    def create(cls, session_id: str) -> "ChatSession":
        settings = get_settings()
        return cls(
            session_id=session_id,
            context=ConversationContext(max_topics=settings.context_max_topics),
            cache=ResponseCache(
                ttl_seconds=settings.cache_ttl_seconds,
                max_entries=settings.cache_max_entries,
            ),
            history=ConversationHistory(max_messages=settings.history_max_messages),
        )

    def reset(self) -> None:
        """Explicit clear: forget topics, cached answers and the transcript."""
        with self.lock:
            self.context.clear()
            self.cache.clear()
            self.history.clear()


_SESSIONS: dict[str, ChatSession] = {}
_REGISTRY_LOCK = threading.Lock()


def get_session(session_id: str) -> ChatSession:
    """Return the session for an id, creating it on first use."""
    with _REGISTRY_LOCK:
        session = _SESSIONS.get(session_id)
        if session is None:
            session = ChatSession.create(session_id)
            _SESSIONS[session_id] = session
            logger.info("session_created", extra={"session_id": session_id})
        return session


def clear_session(session_id: str) -> bool:
    """Reset a session's state. Returns False if the session doesn't exist."""
    with _REGISTRY_LOCK:
        session = _SESSIONS.get(session_id)
    if session is None:
        return False
    session.reset()
    logger.info("session_cleared", extra={"session_id": session_id})
    return True


def find_session(session_id: str) -> ChatSession | None:
    """Existing session for an id, without creating one."""
    with _REGISTRY_LOCK:
        return _SESSIONS.get(session_id)


def drop_session(session_id: str) -> None:
    with _REGISTRY_LOCK:
        _SESSIONS.pop(session_id, None)


def get_session_count() -> int:
    """Number of active sessions — for observability."""
    with _REGISTRY_LOCK:
        return len(_SESSIONS)
