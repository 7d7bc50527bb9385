# newsrag/domain/services/sessions.py

"""
Session Store - Conversation history on top of the key-value store

Each session is stored under its raw id as a JSON array of turns.
Every write refreshes the session TTL.
"""

import json
import logging
import uuid
from typing import Iterable, List, Optional, Union

from newsrag.domain.models import CorruptSession, InvalidRequest, Turn
from newsrag.domain.ports.store import IKeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = 1800

# Key prefixes owned by the cache layer; session ids must never use them
RESERVED_PREFIXES = ("embed:", "retrieve:")

# Keys shorter than this are store probes, not sessions
MIN_SESSION_KEY_LENGTH = 5

TurnLike = Union[Turn, dict]


class SessionStore:
    """
    Conversation history persistence

    Responsibilities:
    - Create, read, append, overwrite and clear session histories
    - Keep session ids out of the cache namespaces
    - Detect corrupt stored histories

    Append is a plain read-modify-write: two concurrent appends to the
    same session can lose one of the turns (last writer wins).
    """

    def __init__(self, store: IKeyValueStore, default_ttl: int = DEFAULT_SESSION_TTL):
        """
        Initialize session store

        Args:
            store: Shared key-value store client
            default_ttl: TTL in seconds applied when a call passes none
        """
        self._store = store
        self._default_ttl = default_ttl

    def create_session(self, session_id: Optional[str] = None, ttl: Optional[int] = None) -> str:
        """
        Create a session with empty history

        Args:
            session_id: Caller-supplied id; a UUID4 is generated if omitted
            ttl: Optional TTL override

        Returns:
            The effective session id
        """
        session_id = session_id or str(uuid.uuid4())
        self._write(session_id, [], ttl)
        logger.info(f"Created session {session_id}")
        return session_id

    def get_session(self, session_id: str) -> Optional[List[Turn]]:
        """
        Load session history

        Args:
            session_id: Session identifier

        Returns:
            List of turns in conversation order, or None if no such session

        Raises:
            CorruptSession: If stored data is not a JSON array of objects
        """
        raw = self._store.get(self._key(session_id))
        if raw is None:
            return None

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise CorruptSession(f"Session {session_id} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise CorruptSession(
                f"Session {session_id} holds {type(data).__name__}, expected array"
            )
        if not all(isinstance(item, dict) for item in data):
            raise CorruptSession(f"Session {session_id} contains non-object turns")

        return [Turn.from_dict(item) for item in data]

    def append_to_session(
        self, session_id: str, turn: TurnLike, ttl: Optional[int] = None
    ) -> List[Turn]:
        """
        Append one turn, creating the session if it does not exist

        Args:
            session_id: Session identifier
            turn: Turn (or dict with query/answer keys) to append
            ttl: Optional TTL override

        Returns:
            The full history after the append
        """
        history = self.get_session(session_id) or []
        history.append(_as_turn(turn))
        self._write(session_id, history, ttl)
        return history

    def save_session(
        self, session_id: str, turns: Iterable[TurnLike], ttl: Optional[int] = None
    ) -> List[Turn]:
        """Overwrite the whole history"""
        history = [_as_turn(t) for t in turns]
        self._write(session_id, history, ttl)
        return history

    def clear_session(self, session_id: str, ttl: Optional[int] = None) -> List[Turn]:
        """Reset history to empty; the id stays valid"""
        self._write(session_id, [], ttl)
        logger.info(f"Cleared session {session_id}")
        return []

    def list_session_ids(self) -> List[str]:
        """
        Enumerate live keys that are not cache entries

        Returns:
            Sorted keys without embed:/retrieve: prefixes and at least
            five characters long
        """
        keys = self._store.keys("*")
        return sorted(
            key for key in keys
            if not key.startswith(RESERVED_PREFIXES)
            and len(key) >= MIN_SESSION_KEY_LENGTH
        )

    def _write(self, session_id: str, history: List[Turn], ttl: Optional[int]) -> None:
        ttl = self._default_ttl if ttl is None else ttl
        if ttl <= 0:
            raise InvalidRequest(f"Session TTL must be positive, got {ttl}")
        payload = json.dumps([turn.to_dict() for turn in history])
        self._store.set(self._key(session_id), payload, ttl)

    def _key(self, session_id: str) -> str:
        if not session_id or not isinstance(session_id, str):
            raise InvalidRequest("Session id is required")
        if session_id.startswith(RESERVED_PREFIXES):
            raise InvalidRequest(f"Session id may not start with {RESERVED_PREFIXES}")
        return session_id


def _as_turn(turn: TurnLike) -> Turn:
    if isinstance(turn, Turn):
        return turn
    if isinstance(turn, dict):
        return Turn.from_dict(turn)
    raise InvalidRequest(f"Unsupported turn type: {type(turn).__name__}")
