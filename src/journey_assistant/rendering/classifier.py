from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum


class BlockKind(StrEnum):
    HEADING = "heading"
    BULLET = "bullet"
    QUESTION = "question"
    LOCATION = "location"
    TIP = "tip"
    CELEBRATION = "celebration"
    PARAGRAPH = "paragraph"
    SPACER = "spacer"


@dataclass(frozen=True)
class ClassifiedBlock:
    kind: BlockKind
    content: str | None = None


BULLET_MARKERS: tuple[str, ...] = ("•", "◦", "▪", "- ", "* ")

# Case-sensitive; matched as substrings of the line.
PLACE_NAMES: tuple[str, ...] = (
    "Bali",
    "Ubud",
    "Seminyak",
    "Indonesia",
    "Japan",
    "Tokyo",
    "Kyoto",
    "Osaka",
    "Europe",
    "Paris",
    "Rome",
    "London",
    "Barcelona",
    "Amsterdam",
    "Lisbon",
    "Santorini",
    "Iceland",
    "Thailand",
    "Bangkok",
    "Vietnam",
    "Maldives",
    "New York",
)

ADVICE_WORDS: tuple[str, ...] = ("recommend", "suggest", "tip", "advice", "consider", "try")

CELEBRATORY_OPENERS: tuple[str, ...] = (
    "Absolutely!",
    "Great!",
    "Excellent!",
    "Perfect!",
    "Wonderful!",
    "Fantastic!",
    "Amazing!",
)

_MIN_QUESTION_LENGTH = 10
_MIN_LOCATION_LENGTH = 20
_MIN_TIP_LENGTH = 15
_MAX_HEADING_LENGTH = 50


def _is_blank(line: str) -> bool:
    return not line


def _is_bullet(line: str) -> bool:
    return line.startswith(BULLET_MARKERS)


def _strip_bullet(line: str) -> str:
    for marker in BULLET_MARKERS:
        if line.startswith(marker):
            return line[len(marker):].strip()
    return line


def _is_question(line: str) -> bool:
    return line.endswith("?") and len(line) > _MIN_QUESTION_LENGTH


def _is_location(line: str) -> bool:
    return len(line) > _MIN_LOCATION_LENGTH and any(place in line for place in PLACE_NAMES)


def _is_tip(line: str) -> bool:
    if len(line) <= _MIN_TIP_LENGTH:
        return False
    lowered = line.lower()
    return any(word in lowered for word in ADVICE_WORDS)


def _is_celebration(line: str) -> bool:
    return line.startswith(CELEBRATORY_OPENERS)


def _is_heading(line: str) -> bool:
    return line.endswith(":") and len(line) < _MAX_HEADING_LENGTH


def _always(line: str) -> bool:
    return True


def _block(kind: BlockKind) -> Callable[[str], ClassifiedBlock]:
    return lambda line: ClassifiedBlock(kind, line)


# Checked top to bottom; the first matching predicate decides the block.
RULES: tuple[tuple[Callable[[str], bool], Callable[[str], ClassifiedBlock]], ...] = (
    (_is_blank, lambda line: ClassifiedBlock(BlockKind.SPACER)),
    (_is_bullet, lambda line: ClassifiedBlock(BlockKind.BULLET, _strip_bullet(line))),
    (_is_question, _block(BlockKind.QUESTION)),
    (_is_location, _block(BlockKind.LOCATION)),
    (_is_tip, _block(BlockKind.TIP)),
    (_is_celebration, _block(BlockKind.CELEBRATION)),
    (_is_heading, _block(BlockKind.HEADING)),
    (_always, _block(BlockKind.PARAGRAPH)),
)


def classify_line(line: str) -> ClassifiedBlock:
    trimmed = line.strip()
    for predicate, build in RULES:
        if predicate(trimmed):
            return build(trimmed)
    raise AssertionError("paragraph rule must match every line")


def classify(text: str) -> list[ClassifiedBlock]:
    """Split reply text into display blocks, one per line.

    Accepts \\n, \\r\\n and lone \\r line breaks. Empty text is a single spacer.
    """
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    return [classify_line(line) for line in lines]


def mentioned_places(text: str) -> list[str]:
    found = [(text.find(place), place) for place in PLACE_NAMES if place in text]
    return [place for _, place in sorted(found)]
