from __future__ import annotations

from collections.abc import Callable
from typing import TextIO
import sys

from live_translator.application.keyboard import DEFAULT_KEYBOARD_HIDDEN_RATIO
from live_translator.application.ports import SessionEffects
from live_translator.application.scheduling import DeferredQueue
from live_translator.application.session import CommitEvent, TranslationSession
from live_translator.application.view_state import LIVE_LABEL_PREFIX
from live_translator.notifications import messages as notify_messages

PROMPT = "> "
HELP_TEXT = (
    "type text to edit the field; commands: :focus :blur :tap :back :submit "
    ":keyboard-hidden :viewport <ratio> :history :help :quit"
)


class TerminalEffects(SessionEffects):
    """Outbound effects of the terminal host.

    Clearing focus echoes a focus-lost event back into the session the way a
    toolkit would.
    """

    def __init__(self) -> None:
        self.session: TranslationSession | None = None
        self.keyboard_visible = False
        self.exit_requested = False

    def hide_keyboard(self) -> None:
        self.keyboard_visible = False

    def clear_focus(self) -> None:
        if self.session is not None:
            self.session.on_focus_changed(False)

    def propagate_back_to_host(self) -> None:
        self.exit_requested = True


class TerminalHost:
    def __init__(
        self,
        *,
        keyboard_hidden_ratio: float = DEFAULT_KEYBOARD_HIDDEN_RATIO,
    ) -> None:
        self.effects = TerminalEffects()
        self.queue = DeferredQueue()
        self._messages: list[str] = []
        self.session = TranslationSession(
            effects=self.effects,
            scheduler=self.queue,
            keyboard_hidden_ratio=keyboard_hidden_ratio,
            on_commit=self._on_commit,
        )
        self.effects.session = self.session
        self._commands: dict[str, Callable[[str], None]] = {
            "focus": self._cmd_focus,
            "blur": self._cmd_blur,
            "tap": self._cmd_tap,
            "back": self._cmd_back,
            "submit": self._cmd_submit,
            "keyboard-hidden": self._cmd_keyboard_hidden,
            "viewport": self._cmd_viewport,
            "history": self._cmd_history,
            "help": self._cmd_help,
            "quit": self._cmd_quit,
        }

    @property
    def finished(self) -> bool:
        return self.effects.exit_requested

    def handle_line(self, line: str) -> list[str]:
        """Apply one input line, run the next tick and return the output lines."""
        self._messages = []
        if line.startswith(":"):
            name, _, argument = line[1:].strip().partition(" ")
            command = self._commands.get(name.casefold())
            if command is None:
                self._messages.append(f"unknown command: {name or ':'}")
                self._messages.append(HELP_TEXT)
                return self._messages
            command(argument.strip())
        else:
            self._type(line)
        self.queue.drain()
        if not self.finished:
            self._messages.append(LIVE_LABEL_PREFIX + self.session.state.live_translation)
        return self._messages

    def _type(self, text: str) -> None:
        if not self.session.state.is_focused:
            self._cmd_focus("")
        self.session.on_text_changed(text)

    def _cmd_focus(self, _argument: str) -> None:
        self.effects.keyboard_visible = True
        self.session.on_focus_changed(True)

    def _cmd_blur(self, _argument: str) -> None:
        self.session.on_focus_changed(False)

    def _cmd_tap(self, _argument: str) -> None:
        self.session.on_outside_tap()

    def _cmd_back(self, _argument: str) -> None:
        self.session.on_back_action()

    def _cmd_submit(self, _argument: str) -> None:
        self.session.on_submit()

    def _cmd_keyboard_hidden(self, _argument: str) -> None:
        self.effects.keyboard_visible = False
        self.session.on_keyboard_visibility(False)

    def _cmd_viewport(self, argument: str) -> None:
        try:
            ratio = float(argument)
        except ValueError:
            self._messages.append("usage: :viewport <ratio between 0 and 1>")
            return
        if not 0.0 <= ratio <= 1.0:
            self._messages.append("usage: :viewport <ratio between 0 and 1>")
            return
        self.session.on_viewport_changed(ratio)

    def _cmd_history(self, _argument: str) -> None:
        history = self.session.history
        if not history:
            self._messages.append("history: (empty)")
            return
        self._messages.append("history:")
        for index, item in enumerate(history, start=1):
            self._messages.append(f"{index}. {item}")

    def _cmd_help(self, _argument: str) -> None:
        self._messages.append(HELP_TEXT)

    def _cmd_quit(self, _argument: str) -> None:
        self.effects.exit_requested = True

    def _on_commit(self, event: CommitEvent) -> None:
        self._messages.append(notify_messages.for_commit(event).message)


def run(
    host: TerminalHost,
    *,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> int:
    print(f"live translator: {HELP_TEXT}", file=stdout)
    while not host.finished:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            print("", file=stdout)
            break
        for message in host.handle_line(line.rstrip("\r\n")):
            print(message, file=stdout)
    return 0

