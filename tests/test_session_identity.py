import unittest
from unittest.mock import patch

from journey_assistant.session_identity import Session, create_session_token


class SessionIdentityTests(unittest.TestCase):
    def test_token_has_prefix_time_and_random_parts(self) -> None:
        with patch("journey_assistant.session_identity.time.time", return_value=1_700_000_000.5):
            token = create_session_token()
        self.assertTrue(token.startswith("travel_agent_1700000000500_"))
        self.assertEqual(12, len(token.rsplit("_", 1)[1]))

    def test_custom_prefix(self) -> None:
        self.assertTrue(create_session_token("chat_").startswith("chat_"))

    def test_tokens_differ_at_same_instant(self) -> None:
        with patch("journey_assistant.session_identity.time.time", return_value=1_700_000_000.0):
            tokens = {create_session_token() for _ in range(50)}
        self.assertEqual(50, len(tokens))

    def test_open_creates_timestamped_session(self) -> None:
        session = Session.open()
        self.assertTrue(session.token.startswith("travel_agent_"))
        self.assertIsNotNone(session.created_at.tzinfo)


if __name__ == "__main__":
    unittest.main()
