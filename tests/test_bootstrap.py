import unittest

from journey_assistant.app_config import RuntimeEnv, parse_app_config
from journey_assistant.bootstrap import bootstrap_runtime


class BootstrapRuntimeTests(unittest.TestCase):
    def test_offline_runtime(self) -> None:
        app = parse_app_config({"LogConsumers": [], "ShowGreeting": False})
        runtime = bootstrap_runtime(app, RuntimeEnv(webhook_url=None, user_id=None))

        self.assertFalse(runtime.client.is_configured)
        self.assertEqual([], runtime.log_descriptions)
        self.assertEqual((), runtime.shell.controller.turns)

    def test_configured_runtime(self) -> None:
        app = parse_app_config({"LogConsumers": [], "SessionPrefix": "trip_"})
        env = RuntimeEnv(webhook_url="https://hooks.acme.io/webhook/chat", user_id="u-1")
        runtime = bootstrap_runtime(app, env)

        self.assertTrue(runtime.client.is_configured)
        self.assertTrue(runtime.shell.controller.session.token.startswith("trip_"))
        self.assertEqual(1, len(runtime.shell.controller.turns))

    def test_unknown_fallback_strategy_raises(self) -> None:
        app = parse_app_config({"LogConsumers": [], "FallbackStrategy": "llm"})
        with self.assertRaises(ValueError):
            bootstrap_runtime(app, RuntimeEnv(webhook_url=None, user_id=None))


if __name__ == "__main__":
    unittest.main()
