from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class Sender(StrEnum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class TurnHints:
    has_map: bool = False
    has_images: bool = False
    related_questions: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ConversationTurn:
    id: str
    text: str
    sender: Sender
    timestamp: datetime
    hints: TurnHints | None = None

    @property
    def is_user(self) -> bool:
        return self.sender is Sender.USER
