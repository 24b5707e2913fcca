import asyncio
import sys

from dotenv import load_dotenv
from loguru import logger

from journey_assistant.app_config import load_json_config, parse_app_config, resolve_runtime_env
from journey_assistant.bootstrap import bootstrap_runtime


async def main() -> None:
    load_dotenv()

    env = resolve_runtime_env()

    try:
        app = parse_app_config(load_json_config())
        runtime = bootstrap_runtime(app, env)
    except ValueError as ex:
        logger.error(f"Invalid configuration: {ex}")
        sys.exit(1)

    shell = runtime.shell

    print("AI Travel Assistant (type 'exit' to quit, '/help' for commands)")
    if runtime.client.is_configured:
        print("Backend: connected to n8n workflow")
    else:
        print(f"Backend: offline replies ({app.fallback_strategy_name} fallback)")
    if runtime.log_descriptions:
        print(f"Logging: {', '.join(runtime.log_descriptions)}")
    print()
    shell.print_opening()

    try:
        while True:
            try:
                user_input = input("you> ")
            except (EOFError, KeyboardInterrupt):
                break

            trimmed = user_input.strip()

            if trimmed in ("exit", "quit"):
                break

            if not trimmed:
                continue

            try:
                await shell.run(trimmed)
                print()
            except Exception as ex:
                logger.error(f"Unhandled error: {ex}")
    finally:
        shell.close()


if __name__ == "__main__":
    asyncio.run(main())
