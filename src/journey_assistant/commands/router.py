from __future__ import annotations

from collections.abc import Awaitable, Callable


class CommandRouter:
    def __init__(
        self,
        *,
        on_help: Callable[[], Awaitable[None]],
        on_new: Callable[[], Awaitable[None]],
        on_history: Callable[[], Awaitable[None]],
        on_ask: Callable[[str], Awaitable[None]],
        on_suggest: Callable[[], Awaitable[None]],
        on_unknown: Callable[[str], None],
    ) -> None:
        self._on_help = on_help
        self._on_new = on_new
        self._on_history = on_history
        self._on_ask = on_ask
        self._on_suggest = on_suggest
        self._on_unknown = on_unknown

    async def try_handle(self, user_message: str) -> bool:
        trimmed = user_message.strip()
        if not trimmed.startswith("/"):
            return False

        if trimmed == "/help":
            await self._on_help()
            return True
        if trimmed == "/new":
            await self._on_new()
            return True
        if trimmed == "/history":
            await self._on_history()
            return True
        if trimmed == "/ask" or trimmed.startswith("/ask "):
            await self._on_ask(trimmed)
            return True
        if trimmed == "/suggest":
            await self._on_suggest()
            return True

        self._on_unknown(trimmed)
        return True


def parse_ask_index(command: str) -> int | None:
    """Return the 1-based question number of an ``/ask <n>`` command."""
    parts = command.split()
    if len(parts) != 2:
        return None
    try:
        index = int(parts[1])
    except ValueError:
        return None
    return index if index >= 1 else None
