from __future__ import annotations

from journey_assistant.conversation.models import TurnHints
from journey_assistant.rendering.classifier import BlockKind, classify, mentioned_places

PLACE_QUESTIONS: dict[str, tuple[str, ...]] = {
    "Bali": (
        "What are the average temperatures in Bali during the low tourist season?",
        "Which months have the lowest rainfall and pleasant humidity in Bali?",
        "How does crowd density vary between the dry and wet seasons in Bali?",
        "What are the best months for family-friendly activities with fewer tourists in Bali?",
    ),
    "Japan": (
        "When is cherry blossom season in Japan?",
        "Is the Japan Rail Pass worth it for a one-week trip?",
        "Which Japanese cities are best for first-time visitors?",
        "How much cash should I carry in Japan?",
    ),
    "Europe": (
        "Which European cities are easiest to connect by train?",
        "When is the shoulder season in Europe?",
        "How many cities can I realistically visit in two weeks?",
        "Do I need a visa to travel around Europe?",
    ),
}

GENERIC_QUESTIONS: tuple[str, ...] = (
    "What's the weather like during peak season?",
    "Are there any local festivals to consider?",
    "What are the accommodation prices like?",
    "How crowded are the main attractions?",
)


def derive_hints(text: str) -> TurnHints:
    places = mentioned_places(text)
    if not places:
        return TurnHints()

    has_map = any(block.kind is BlockKind.LOCATION for block in classify(text))
    related = next(
        (PLACE_QUESTIONS[place] for place in places if place in PLACE_QUESTIONS),
        GENERIC_QUESTIONS,
    )
    return TurnHints(has_map=has_map, has_images=True, related_questions=related)
