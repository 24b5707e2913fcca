from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

WEBHOOK_URL_ENV_VAR = "N8N_WEBHOOK_URL"
USER_ID_ENV_VAR = "JOURNEY_USER_ID"


@dataclass
class RuntimeEnv:
    webhook_url: str | None
    user_id: str | None


@dataclass
class AppConfig:
    fallback_strategy_name: str
    request_timeout_seconds: float
    session_prefix: str
    show_greeting: bool
    log_level: str
    log_consumers: list | None


def load_json_config(directory: Path | None = None) -> dict:
    config_path = (directory or Path.cwd()) / "config.json"
    if config_path.exists():
        with open(config_path) as f:
            return json.load(f)
    return {}


def _to_bool(value: object, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
    return bool(value)


def parse_app_config(config: dict) -> AppConfig:
    return AppConfig(
        fallback_strategy_name=str(config.get("FallbackStrategy", "topic")).strip().lower(),
        request_timeout_seconds=float(config.get("RequestTimeoutSeconds", 30)),
        session_prefix=str(config.get("SessionPrefix", "travel_agent_")),
        show_greeting=_to_bool(config.get("ShowGreeting", True), default=True),
        log_level=config.get("LogLevel", "INFO"),
        log_consumers=config.get("LogConsumers"),
    )


def resolve_runtime_env() -> RuntimeEnv:
    return RuntimeEnv(
        webhook_url=os.environ.get(WEBHOOK_URL_ENV_VAR, "").strip() or None,
        user_id=os.environ.get(USER_ID_ENV_VAR, "").strip() or None,
    )
