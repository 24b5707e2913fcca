from journey_assistant.conversation.controller import ConversationController
from journey_assistant.conversation.message_store import MessageStore
from journey_assistant.conversation.models import ConversationTurn, Sender, TurnHints

__all__ = [
    "ConversationController",
    "ConversationTurn",
    "MessageStore",
    "Sender",
    "TurnHints",
]
