from __future__ import annotations

from dataclasses import dataclass
from functools import partial

from journey_assistant.app_config import AppConfig, RuntimeEnv
from journey_assistant.assistant_client import RemoteAssistantClient
from journey_assistant.chat_shell import ChatShell
from journey_assistant.conversation.controller import WELCOME_MESSAGE, ConversationController
from journey_assistant.fallback import create_fallback
from journey_assistant.logging_config import setup_logging


@dataclass
class AppRuntime:
    shell: ChatShell
    client: RemoteAssistantClient
    log_descriptions: list[str]


def bootstrap_runtime(app: AppConfig, env: RuntimeEnv) -> AppRuntime:
    log_descriptions = setup_logging(level=app.log_level, consumers=app.log_consumers)

    client = RemoteAssistantClient(
        env.webhook_url,
        create_fallback(app.fallback_strategy_name),
        timeout_seconds=app.request_timeout_seconds,
        user_id=env.user_id,
    )

    controller_factory = partial(
        ConversationController,
        client,
        greeting=WELCOME_MESSAGE if app.show_greeting else None,
        session_prefix=app.session_prefix,
    )

    return AppRuntime(
        shell=ChatShell(controller_factory),
        client=client,
        log_descriptions=log_descriptions,
    )
