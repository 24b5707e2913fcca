import unittest
from datetime import UTC, datetime

from journey_assistant.conversation import ConversationTurn, Sender
from journey_assistant.services.transcript import TranscriptFormatter
from journey_assistant.session_identity import Session

_WHEN = datetime(2026, 10, 19, 9, 5, tzinfo=UTC)


def _turn(text: str, sender: Sender) -> ConversationTurn:
    return ConversationTurn(id="1", text=text, sender=sender, timestamp=_WHEN)


class TranscriptFormatterTests(unittest.TestCase):
    def setUp(self) -> None:
        self.formatter = TranscriptFormatter(line_prefix="> ", preview_len=20)

    def test_preview_flattens_and_truncates(self) -> None:
        self.assertEqual("a b c", self.formatter.preview("a\n b\n\n c"))
        self.assertEqual("01234567890123456...", self.formatter.preview("0123456789" * 3))

    def test_history_entry(self) -> None:
        entry = self.formatter.format_history_entry(_turn("hello there", Sender.USER))
        expected_time = _WHEN.astimezone().strftime("%H:%M")
        self.assertEqual(f"> [{expected_time}] you: hello there", entry)

    def test_history_entry_for_assistant(self) -> None:
        entry = self.formatter.format_history_entry(_turn("welcome aboard", Sender.ASSISTANT))
        self.assertTrue(entry.endswith("] assistant: welcome aboard"))

    def test_summary_counts_turns(self) -> None:
        session = Session(token="travel_agent_1700000000000_abcdef123456", created_at=_WHEN)
        turns = (
            _turn("welcome", Sender.ASSISTANT),
            _turn("hi", Sender.USER),
            _turn("hello", Sender.ASSISTANT),
        )
        lines = self.formatter.format_summary_lines(session, turns)
        self.assertEqual("> Conversation [travel_agent_17000000000]", lines[0])
        self.assertEqual("> - Turns: 3 (user=1, assistant=2)", lines[2])


if __name__ == "__main__":
    unittest.main()
