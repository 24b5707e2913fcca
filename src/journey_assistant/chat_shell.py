from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from journey_assistant.commands.router import CommandRouter, parse_ask_index
from journey_assistant.conversation.controller import ConversationController
from journey_assistant.conversation.models import Sender
from journey_assistant.rendering.console import render_reply
from journey_assistant.services.transcript import TranscriptFormatter
from journey_assistant.spinner import Spinner


class ChatShell:
    """Terminal front end for a conversation view."""

    _LINE_PREFIX = "assistant> "

    def __init__(
        self,
        controller_factory: Callable[[], ConversationController],
        *,
        show_spinner: bool = True,
        output: Callable[[str], None] = print,
    ) -> None:
        self._controller_factory = controller_factory
        self._show_spinner = show_spinner
        self._output = output
        self._controller = controller_factory()
        self._transcript = TranscriptFormatter(line_prefix=self._LINE_PREFIX)
        self._command_router = CommandRouter(
            on_help=self._on_help,
            on_new=self._on_new,
            on_history=self._on_history,
            on_ask=self._on_ask,
            on_suggest=self._on_suggest,
            on_unknown=self._on_unknown_command,
        )

    @property
    def controller(self) -> ConversationController:
        return self._controller

    def print_opening(self) -> None:
        for turn in self._controller.turns:
            if turn.sender is Sender.ASSISTANT:
                self._print_lines(render_reply(turn, line_prefix=self._LINE_PREFIX))
        self._output("")

    async def run(self, user_message: str) -> None:
        if await self._command_router.try_handle(user_message):
            return
        await self._submit(user_message)

    def close(self) -> None:
        self._controller.close()

    async def _submit(self, text: str | None = None) -> None:
        if self._show_spinner:
            with Spinner(prefix=self._LINE_PREFIX):
                accepted = await self._controller.submit(text)
        else:
            accepted = await self._controller.submit(text)

        if not accepted:
            logger.debug("Submit ignored (blank input, busy or closed)")
            return
        reply = self._controller.last_reply()
        if reply is not None:
            self._print_lines(render_reply(reply, line_prefix=self._LINE_PREFIX))

    async def _on_help(self) -> None:
        self._print_lines([
            f"{self._LINE_PREFIX}Commands:",
            "  /help           Show this help",
            "  /new            Start a new conversation",
            "  /history        Show this conversation's turns",
            "  /ask <n>        Ask related question n from the last reply",
            "  /suggest        Show quick suggestions",
            "  exit | quit     Leave",
        ])

    async def _on_new(self) -> None:
        old = self._controller
        if old.session is not None:
            self._print_lines(self._transcript.format_summary_lines(old.session, old.turns))
        old.close()
        self._controller = self._controller_factory()
        self._output(f"{self._LINE_PREFIX}Started a new conversation.")
        self.print_opening()

    async def _on_history(self) -> None:
        session = self._controller.session
        if session is None:
            self._output(f"{self._LINE_PREFIX}No open conversation.")
            return
        self._print_lines(self._transcript.format_summary_lines(session, self._controller.turns))
        for turn in self._controller.turns:
            self._output(self._transcript.format_history_entry(turn))

    async def _on_ask(self, command: str) -> None:
        index = parse_ask_index(command)
        if index is None:
            self._output(f"{self._LINE_PREFIX}Usage: /ask <n>")
            return

        reply = self._controller.last_reply()
        questions = reply.hints.related_questions if reply is not None and reply.hints else ()
        if index > len(questions):
            self._output(f"{self._LINE_PREFIX}No related question #{index} on the last reply.")
            return

        question = questions[index - 1]
        self._controller.choose_related_question(question)
        self._output(f"you> {question}")
        await self._submit()

    async def _on_suggest(self) -> None:
        suggestions = self._controller.quick_suggestions
        if not suggestions:
            self._output(f"{self._LINE_PREFIX}Quick suggestions are shown only at the start of a conversation.")
            return
        self._output(f"{self._LINE_PREFIX}Quick suggestions:")
        for suggestion in suggestions:
            self._output(f"  - {suggestion}")

    def _on_unknown_command(self, command: str) -> None:
        self._output(f"{self._LINE_PREFIX}Unknown command: {command}. Type /help for commands.")

    def _print_lines(self, lines: list[str]) -> None:
        for line in lines:
            self._output(line)
