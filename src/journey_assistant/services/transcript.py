from __future__ import annotations

from datetime import datetime

from journey_assistant.conversation.models import ConversationTurn
from journey_assistant.session_identity import Session


class TranscriptFormatter:
    def __init__(self, *, line_prefix: str, preview_len: int = 60, short_id_len: int = 24):
        self._line_prefix = line_prefix
        self._preview_len = preview_len
        self._short_id_len = short_id_len

    def short_token(self, token: str) -> str:
        if len(token) <= self._short_id_len:
            return token
        return token[: self._short_id_len]

    def preview(self, text: str) -> str:
        flat = " ".join(text.split())
        if len(flat) <= self._preview_len:
            return flat
        return flat[: self._preview_len - 3] + "..."

    @staticmethod
    def format_time(timestamp: datetime) -> str:
        return timestamp.astimezone().strftime("%H:%M")

    def format_history_entry(self, turn: ConversationTurn) -> str:
        who = "you" if turn.is_user else "assistant"
        return f"{self._line_prefix}[{self.format_time(turn.timestamp)}] {who}: {self.preview(turn.text)}"

    def format_summary_lines(self, session: Session, turns: tuple[ConversationTurn, ...]) -> list[str]:
        user_count = sum(1 for t in turns if t.is_user)
        assistant_count = len(turns) - user_count
        lines = [f"{self._line_prefix}Conversation [{self.short_token(session.token)}]"]
        lines.append(f"{self._line_prefix}- Opened: {self.format_time(session.created_at)}")
        lines.append(
            f"{self._line_prefix}- Turns: {len(turns)} "
            f"(user={user_count}, assistant={assistant_count})"
        )
        return lines
