"""
agent.memory - Per-run conversation memory.

The client owns the conversation and resends prior messages with every run;
this class turns them into LangChain messages for the 'chat_history' input
key. Stores messages as a plain list[BaseMessage].
"""

from __future__ import annotations

import logging
from typing import Iterable

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from application.dto import ChatTurn

logger = logging.getLogger(__name__)


class ConversationMemory:
    """Per-run conversation memory.

    NOT global; each run gets its own instance.
    """

    def __init__(self, max_messages: int = 50):
        self._max_messages = max_messages
        self._messages: list[BaseMessage] = []

    @property
    def messages(self) -> list[BaseMessage]:
        """Current history; pass as 'chat_history' to agent invoke()."""
        return self._messages

    def add_user_message(self, content: str) -> None:
        self._messages.append(HumanMessage(content=content))
        self._trim()

    def add_ai_message(self, content: str) -> None:
        self._messages.append(AIMessage(content=content))
        self._trim()

    def add_system_message(self, content: str) -> None:
        self._messages.append(SystemMessage(content=content))
        self._trim()

    def load_turns(self, turns: Iterable[ChatTurn]) -> int:
        """Load prior client messages into the in-memory list.

        Unknown roles (e.g. tool messages echoed by the client) are skipped.
        Returns the number of messages kept after trimming.
        """
        skipped = 0
        for turn in turns:
            if turn.role == "user":
                self.add_user_message(turn.content)
            elif turn.role == "assistant":
                self.add_ai_message(turn.content)
            elif turn.role == "system":
                self.add_system_message(turn.content)
            else:
                skipped += 1
        if skipped:
            logger.debug("Skipped %d message(s) with unsupported roles", skipped)
        return len(self._messages)

    def _trim(self) -> None:
        if self._max_messages <= 0:
            self._messages = []
        elif len(self._messages) > self._max_messages:
            self._messages = self._messages[-self._max_messages:]

    def clear(self) -> None:
        """Clear all conversation history."""
        self._messages.clear()
