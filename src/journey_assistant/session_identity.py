from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

DEFAULT_SESSION_PREFIX = "travel_agent_"


def create_session_token(prefix: str = DEFAULT_SESSION_PREFIX) -> str:
    millis = int(time.time() * 1000)
    return f"{prefix}{millis}_{uuid4().hex[:12]}"


@dataclass(frozen=True)
class Session:
    """Identity of one open conversation view.

    Created once when the view opens and reused for every outbound call so the
    backend can correlate the turns of a conversation.
    """

    token: str
    created_at: datetime

    @classmethod
    def open(cls, prefix: str = DEFAULT_SESSION_PREFIX) -> Session:
        return cls(token=create_session_token(prefix), created_at=datetime.now(UTC))
