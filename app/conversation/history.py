"""
conversation/history.py — Sliding-window transcript of a conversation.

Only the most recent messages are kept (12 by default = 6 exchanges).
The rule-based responder never reads this; it exists to give the optional
LLM path some conversational context and to back the history endpoint.
"""
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

Role = Literal["user", "assistant"]

DEFAULT_MAX_MESSAGES = 12


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class ConversationHistory:
    def __init__(self, max_messages: int = DEFAULT_MAX_MESSAGES) -> None:
        # deque's maxlen evicts the oldest message automatically
        self._messages: deque[ChatMessage] = deque(maxlen=max_messages)

    def add(self, role: Role, content: str) -> ChatMessage:
        message = ChatMessage(role=role, content=content)
        self._messages.append(message)
        return message

    def messages(self) -> list[ChatMessage]:
        return list(self._messages)

    def as_prompt_messages(self, limit: int | None = None) -> list[dict]:
        """History as [{"role": ..., "content": ...}] for a chat-completion call."""
        recent = self.messages()
        if limit is not None:
            recent = recent[-limit:] if limit > 0 else []
        return [{"role": m.role, "content": m.content} for m in recent]

    def clear(self) -> None:
        self._messages.clear()

    def __len__(self) -> int:
        return len(self._messages)
