# newsrag/domain/services/chat_service.py

"""
Chat Service - Orchestrates conversation flow

This service coordinates the session store, retrieval engine, prompt
template and language model to handle one chat turn.
"""

import logging
import time
from typing import List, Optional

from newsrag.domain.models import (
    ChatTurnResult,
    GenerationFailure,
    InvalidRequest,
    Turn,
)
from newsrag.domain.ports.llm import ILLMProvider
from newsrag.domain.prompts.template import PromptTemplate
from newsrag.domain.services.retrieval import RetrievalEngine
from newsrag.domain.services.sessions import SessionStore

logger = logging.getLogger(__name__)


class ChatService:
    """
    Chat service for handling conversations

    Responsibilities:
    - Orchestrate answer generation
    - Manage session state
    - Leave history untouched when any step fails
    """

    def __init__(
        self,
        session_store: SessionStore,
        retrieval: RetrievalEngine,
        llm: ILLMProvider,
        prompt_template: PromptTemplate,
        default_top_k: int = 5,
    ):
        """
        Initialize chat service

        Args:
            session_store: Session persistence
            retrieval: Retrieval engine for grounding passages
            llm: LLM provider for generation
            prompt_template: Template for building prompts
            default_top_k: Passages to retrieve when the caller passes none
        """
        self._sessions = session_store
        self._retrieval = retrieval
        self._llm = llm
        self._prompt_template = prompt_template
        self._default_top_k = default_top_k

    def handle_chat_turn(
        self, session_id: str, query: str, k: Optional[int] = None
    ) -> ChatTurnResult:
        """
        Answer a query within a session

        Steps:
        1. Validate input
        2. Load history (missing session counts as empty)
        3. Retrieve top-k passages
        4. Build prompt
        5. Generate answer
        6. Append {query, answer} to the session

        The append is the last step, so a failure anywhere earlier
        leaves the stored history exactly as it was.

        Args:
            session_id: Session identifier
            query: User's question
            k: Number of passages to retrieve

        Returns:
            ChatTurnResult with answer and updated history

        Raises:
            InvalidRequest: If query is empty or k is invalid
            EmbeddingUnavailable: If the query cannot be embedded
            GenerationFailure: If the model call fails or returns nothing
        """
        start_time = time.time()

        # 1. Validate input
        if not query or not isinstance(query, str) or not query.strip():
            raise InvalidRequest("Query cannot be empty")
        if not session_id:
            raise InvalidRequest("Session id is required")
        k = self._default_top_k if k is None else k
        if not isinstance(k, int) or isinstance(k, bool) or k < 1:
            raise InvalidRequest(f"k must be a positive integer, got {k!r}")

        # 2. Load history
        history = self._sessions.get_session(session_id) or []

        logger.info(f"Processing query for session {session_id}")

        # 3. Retrieve passages
        passages = self._retrieval.retrieve_top_k(query, k)

        # 4. Build prompt
        prompt = self._prompt_template.render(history, query, passages)
        logger.debug(f"Prompt:\n{prompt}")

        # 5. Generate answer
        try:
            answer = self._llm.generate(prompt)
        except GenerationFailure:
            raise
        except Exception as e:
            logger.error(f"LLM generation failed: {e}")
            raise GenerationFailure(f"Generation failed: {e}") from e

        if not answer:
            raise GenerationFailure("Empty response from LLM")

        # 6. Persist turn
        updated = self._sessions.append_to_session(
            session_id, Turn(query=query, answer=answer)
        )

        latency_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Answered turn {len(updated)} for session {session_id} "
            f"from {len(passages)} passages in {latency_ms:.0f}ms"
        )

        return ChatTurnResult(answer=answer, history=updated, passages=passages)

    def create_session(self, session_id: Optional[str] = None) -> str:
        """Create a new session and return its id"""
        return self._sessions.create_session(session_id)

    def get_history(self, session_id: str) -> Optional[List[Turn]]:
        """
        Get session history

        Args:
            session_id: Session identifier

        Returns:
            List of turns, or None if the session does not exist
        """
        return self._sessions.get_session(session_id)

    def clear_session(self, session_id: str) -> List[Turn]:
        return self._sessions.clear_session(session_id)

    def list_sessions(self) -> List[str]:
        return self._sessions.list_session_ids()
