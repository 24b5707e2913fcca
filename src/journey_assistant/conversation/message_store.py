from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime

from journey_assistant.conversation.models import ConversationTurn, Sender, TurnHints


class MessageStore:
    """Append-only, in-memory turn log for one conversation view."""

    def __init__(self) -> None:
        self._turns: list[ConversationTurn] = []
        self._last_id_millis = 0

    def append_user(self, text: str) -> ConversationTurn:
        if not text.strip():
            raise ValueError("User turns must contain text")
        return self._append(text, Sender.USER, None)

    def append_assistant(self, text: str, hints: TurnHints | None = None) -> ConversationTurn:
        return self._append(text, Sender.ASSISTANT, hints)

    @property
    def turns(self) -> tuple[ConversationTurn, ...]:
        return tuple(self._turns)

    def last(self, sender: Sender | None = None) -> ConversationTurn | None:
        for turn in reversed(self._turns):
            if sender is None or turn.sender is sender:
                return turn
        return None

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[ConversationTurn]:
        return iter(tuple(self._turns))

    def _append(self, text: str, sender: Sender, hints: TurnHints | None) -> ConversationTurn:
        now = datetime.now(UTC)
        turn = ConversationTurn(
            id=self._next_id(now),
            text=text,
            sender=sender,
            timestamp=now,
            hints=hints,
        )
        self._turns.append(turn)
        return turn

    def _next_id(self, now: datetime) -> str:
        # Millisecond ids; bump past the previous id when the clock has not moved.
        millis = max(int(now.timestamp() * 1000), self._last_id_millis + 1)
        self._last_id_millis = millis
        return str(millis)
