import json
import shutil
import unittest
from pathlib import Path
from unittest.mock import patch
from uuid import uuid4

from journey_assistant.app_config import load_json_config, parse_app_config, resolve_runtime_env

PROJECT_ROOT = Path(__file__).resolve().parents[1]


class ParseAppConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        app = parse_app_config({})
        self.assertEqual("topic", app.fallback_strategy_name)
        self.assertEqual(30.0, app.request_timeout_seconds)
        self.assertEqual("travel_agent_", app.session_prefix)
        self.assertTrue(app.show_greeting)
        self.assertEqual("INFO", app.log_level)
        self.assertIsNone(app.log_consumers)

    def test_overrides(self) -> None:
        app = parse_app_config({
            "FallbackStrategy": " Uniform ",
            "RequestTimeoutSeconds": "12.5",
            "ShowGreeting": "off",
            "LogLevel": "DEBUG",
            "LogConsumers": [{"type": "console"}],
        })
        self.assertEqual("uniform", app.fallback_strategy_name)
        self.assertEqual(12.5, app.request_timeout_seconds)
        self.assertFalse(app.show_greeting)
        self.assertEqual("DEBUG", app.log_level)
        self.assertEqual([{"type": "console"}], app.log_consumers)


class LoadJsonConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp_dir = PROJECT_ROOT / ".test-artifacts" / f"config-{uuid4().hex}"
        self._tmp_dir.mkdir(parents=True, exist_ok=True)

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp_dir, ignore_errors=True)

    def test_missing_file_returns_empty(self) -> None:
        self.assertEqual({}, load_json_config(self._tmp_dir))

    def test_reads_file(self) -> None:
        (self._tmp_dir / "config.json").write_text(json.dumps({"LogLevel": "WARNING"}))
        self.assertEqual({"LogLevel": "WARNING"}, load_json_config(self._tmp_dir))


class RuntimeEnvTests(unittest.TestCase):
    def test_reads_webhook_and_user(self) -> None:
        env_vars = {"N8N_WEBHOOK_URL": " https://hooks.acme.io/webhook/chat ", "JOURNEY_USER_ID": "u-1"}
        with patch.dict("os.environ", env_vars, clear=True):
            env = resolve_runtime_env()
        self.assertEqual("https://hooks.acme.io/webhook/chat", env.webhook_url)
        self.assertEqual("u-1", env.user_id)

    def test_blank_values_become_none(self) -> None:
        with patch.dict("os.environ", {"N8N_WEBHOOK_URL": "  "}, clear=True):
            env = resolve_runtime_env()
        self.assertIsNone(env.webhook_url)
        self.assertIsNone(env.user_id)


if __name__ == "__main__":
    unittest.main()
