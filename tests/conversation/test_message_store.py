import dataclasses
import unittest
from datetime import UTC, datetime
from unittest.mock import patch

from journey_assistant.conversation import MessageStore, Sender, TurnHints


class MessageStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MessageStore()

    def test_appends_preserve_order(self) -> None:
        self.store.append_user("hi")
        self.store.append_assistant("hello", TurnHints(has_map=True))
        self.store.append_user("plan a trip")

        self.assertEqual(["hi", "hello", "plan a trip"], [t.text for t in self.store])
        self.assertEqual([Sender.USER, Sender.ASSISTANT, Sender.USER], [t.sender for t in self.store.turns])
        self.assertEqual(3, len(self.store))

    def test_user_turns_must_have_text(self) -> None:
        with self.assertRaises(ValueError):
            self.store.append_user("   ")
        self.assertEqual(0, len(self.store))

    def test_turns_are_immutable(self) -> None:
        turn = self.store.append_user("hi")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            turn.text = "changed"  # type: ignore[misc]

    def test_turns_snapshot_is_read_only(self) -> None:
        self.store.append_user("hi")
        snapshot = self.store.turns
        self.assertIsInstance(snapshot, tuple)
        self.store.append_assistant("hello")
        self.assertEqual(1, len(snapshot))

    def test_ids_strictly_increase_when_clock_stalls(self) -> None:
        frozen = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
        with patch("journey_assistant.conversation.message_store.datetime") as mock_datetime:
            mock_datetime.now.return_value = frozen
            ids = [self.store.append_user(f"m{i}").id for i in range(3)]

        as_ints = [int(i) for i in ids]
        self.assertEqual(as_ints, sorted(set(as_ints)))
        self.assertEqual(int(frozen.timestamp() * 1000), as_ints[0])

    def test_last_filters_by_sender(self) -> None:
        self.assertIsNone(self.store.last())
        self.store.append_assistant("welcome")
        self.store.append_user("hi")
        self.assertEqual("hi", self.store.last().text)
        self.assertEqual("welcome", self.store.last(Sender.ASSISTANT).text)

    def test_user_turns_have_no_hints(self) -> None:
        self.assertIsNone(self.store.append_user("hi").hints)


if __name__ == "__main__":
    unittest.main()
