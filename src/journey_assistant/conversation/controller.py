from __future__ import annotations

from typing import Protocol, runtime_checkable

from journey_assistant.conversation.hints import derive_hints
from journey_assistant.conversation.message_store import MessageStore
from journey_assistant.conversation.models import ConversationTurn, Sender
from journey_assistant.logging_config import session_logger
from journey_assistant.session_identity import DEFAULT_SESSION_PREFIX, Session

WELCOME_MESSAGE = (
    "Hi! I'm your AI travel assistant. I can help you plan your perfect journey, "
    "find destinations, create itineraries, and answer any travel questions you have.\n"
    "\n"
    "Here are some things you can ask me:\n"
    '• "Plan a 7-day trip to Japan"\n'
    '• "What\'s the best time to visit Bali?"\n'
    '• "Create a budget itinerary for Europe"\n'
    '• "Suggest romantic destinations for couples"\n'
    '• "Help me pack for a winter trip to Iceland"\n'
    "\n"
    "How can I help you today?"
)

QUICK_SUGGESTIONS: tuple[str, ...] = (
    "Plan a 7-day trip to Japan",
    "What's the best time to visit Bali?",
    "Create a budget itinerary for Europe",
    "Suggest romantic destinations for couples",
    "Help me pack for a winter trip to Iceland",
)

CONNECTION_TROUBLE_MESSAGE = (
    "I'm sorry, I'm having trouble connecting right now. Please try again in a moment!"
)


@runtime_checkable
class AssistantBackend(Protocol):
    async def send(self, user_text: str, session: Session) -> str: ...


class ConversationController:
    """Turn lifecycle for one open conversation view.

    Owns the view's session, message store, busy flag and input buffer. At
    most one reply is outstanding at a time; submits while busy are ignored.
    """

    def __init__(
        self,
        client: AssistantBackend,
        *,
        greeting: str | None = WELCOME_MESSAGE,
        quick_suggestions: tuple[str, ...] = QUICK_SUGGESTIONS,
        session_prefix: str = DEFAULT_SESSION_PREFIX,
    ) -> None:
        self._client = client
        self._quick_suggestions = quick_suggestions
        self._session: Session | None = Session.open(session_prefix)
        self._store: MessageStore | None = MessageStore()
        self._log = session_logger(self._session.token)
        self._busy = False
        self._input_text = ""
        self._greeting_turns = 0
        if greeting is not None:
            self._store.append_assistant(greeting)
            self._greeting_turns = 1
        self._log.debug("Conversation opened")

    @property
    def is_open(self) -> bool:
        return self._store is not None

    @property
    def is_busy(self) -> bool:
        return self._busy

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def turns(self) -> tuple[ConversationTurn, ...]:
        if self._store is None:
            return ()
        return self._store.turns

    @property
    def input_text(self) -> str:
        return self._input_text

    def set_input(self, text: str) -> None:
        self._input_text = text

    @property
    def quick_suggestions(self) -> tuple[str, ...]:
        if self._store is None or len(self._store) > self._greeting_turns:
            return ()
        return self._quick_suggestions

    def choose_related_question(self, question: str) -> None:
        self._input_text = question

    def last_reply(self) -> ConversationTurn | None:
        if self._store is None:
            return None
        return self._store.last(Sender.ASSISTANT)

    async def submit(self, text: str | None = None) -> bool:
        """Send one user turn. Returns False when the submit was ignored."""
        message = (self._input_text if text is None else text).strip()
        if not message or self._busy or self._store is None or self._session is None:
            return False

        store = self._store
        session = self._session
        store.append_user(message)
        self._input_text = ""
        self._busy = True
        self._log.debug(f"Turn submitted: turns={len(store)}")

        try:
            reply = await self._client.send(message, session)
        except Exception as ex:
            self._log.error(f"Error getting assistant reply: {type(ex).__name__}: {ex}")
            store.append_assistant(CONNECTION_TROUBLE_MESSAGE)
        else:
            store.append_assistant(reply, derive_hints(reply))
        finally:
            self._busy = False

        return True

    def close(self) -> None:
        if self._session is not None:
            self._log.debug("Conversation closed")
        self._store = None
        self._session = None
        self._busy = False
        self._input_text = ""
