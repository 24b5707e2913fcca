import sys
import unittest
from unittest.mock import patch

from journey_assistant.logging_config import NO_SESSION, ConsoleLogConsumer, session_logger, setup_logging


class SetupLoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        from loguru import logger

        logger.remove()

    @patch("journey_assistant.logging_config.logger")
    def test_defaults_are_file_plus_error_console(self, mock_logger) -> None:
        descriptions = setup_logging("DEBUG")
        self.assertEqual(["console (stderr, ERROR)", "file (assistant.log, DEBUG)"], descriptions)
        mock_logger.remove.assert_called_once()
        sinks = [c.args[0] for c in mock_logger.add.call_args_list]
        self.assertEqual([sys.stderr, "assistant.log"], sinks)
        self.assertEqual("ERROR", mock_logger.add.call_args_list[0].kwargs["level"])

    def test_console_consumer_with_own_level(self) -> None:
        descriptions = setup_logging("INFO", [{"type": "console", "level": "WARNING"}])
        self.assertEqual(["console (stderr, WARNING)"], descriptions)

    def test_unknown_consumer_skipped(self) -> None:
        descriptions = setup_logging("INFO", [{"type": "syslog"}, {"type": "console"}])
        self.assertEqual(["console (stderr, INFO)"], descriptions)

    def test_console_stream_validated(self) -> None:
        self.assertEqual(["console (stdout, INFO)"], setup_logging("INFO", [{"type": "console", "stream": "stdout"}]))
        with self.assertRaises(ValueError):
            ConsoleLogConsumer("printer")

    def test_records_carry_session_token(self) -> None:
        from loguru import logger

        setup_logging("INFO", [])
        captured: list[str] = []
        logger.add(captured.append, format="{extra[session]} {message}")

        session_logger("travel_agent_1_abc").info("inside")
        logger.info("outside")

        self.assertEqual(["travel_agent_1_abc inside\n", f"{NO_SESSION} outside\n"], captured)


if __name__ == "__main__":
    unittest.main()
