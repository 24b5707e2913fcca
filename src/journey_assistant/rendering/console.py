from __future__ import annotations

from journey_assistant.conversation.models import ConversationTurn
from journey_assistant.rendering.classifier import BlockKind, ClassifiedBlock, classify

_CALLOUT_MARKERS: dict[BlockKind, str] = {
    BlockKind.QUESTION: "? ",
    BlockKind.LOCATION: "@ ",
    BlockKind.TIP: "* Tip: ",
    BlockKind.CELEBRATION: "! ",
}


def render_block(block: ClassifiedBlock) -> str:
    if block.kind is BlockKind.SPACER:
        return ""
    content = block.content or ""
    if block.kind is BlockKind.HEADING:
        return content.upper()
    if block.kind is BlockKind.BULLET:
        return f"  • {content}"
    marker = _CALLOUT_MARKERS.get(block.kind)
    if marker:
        return f"{marker}{content}"
    return content


def render_reply(turn: ConversationTurn, *, line_prefix: str = "") -> list[str]:
    """Render an assistant turn as terminal lines, classified block by block."""
    indent = " " * len(line_prefix)
    lines: list[str] = []
    for i, block in enumerate(classify(turn.text)):
        prefix = line_prefix if i == 0 else indent
        lines.append(f"{prefix}{render_block(block)}".rstrip())

    hints = turn.hints
    if hints is not None:
        extras = []
        if hints.has_map:
            extras.append("map")
        if hints.has_images:
            extras.append("photos")
        if extras:
            lines.append(f"{indent}[{' + '.join(extras)} available]")
        if hints.related_questions:
            lines.append("")
            lines.append(f"{indent}People like you also asked (use /ask <n>):")
            for n, question in enumerate(hints.related_questions, start=1):
                lines.append(f"{indent}  {n}. {question}")
    return lines
