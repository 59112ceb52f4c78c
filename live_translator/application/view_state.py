from __future__ import annotations

from dataclasses import dataclass, field

from live_translator.application.session import SessionSnapshot

WRAP_LIMIT = 85
LIVE_LABEL_PREFIX = "Live Translation: "
HISTORY_TITLE = "Translation History:"
DEFAULT_PLACEHOLDER = "Enter text to translate"


@dataclass(frozen=True, slots=True)
class ScreenViewState:
    input_text: str
    placeholder: str
    placeholder_visible: bool
    live_translation: str
    history_title: str
    history_lines: tuple[str, ...]
    focused: bool
    saving: bool

    @classmethod
    def empty(cls, placeholder: str = DEFAULT_PLACEHOLDER) -> "ScreenViewState":
        return cls(
            input_text="",
            placeholder=placeholder,
            placeholder_visible=True,
            live_translation=LIVE_LABEL_PREFIX,
            history_title=HISTORY_TITLE,
            history_lines=(),
            focused=False,
            saving=False,
        )


@dataclass(slots=True)
class ScreenPresenter:
    placeholder: str = DEFAULT_PLACEHOLDER
    _state: ScreenViewState | None = field(default=None)

    @property
    def state(self) -> ScreenViewState:
        if self._state is None:
            self._state = ScreenViewState.empty(self.placeholder)
        return self._state

    def render(self, snapshot: SessionSnapshot) -> ScreenViewState:
        self._state = ScreenViewState(
            input_text=snapshot.input_text,
            placeholder=self.placeholder,
            placeholder_visible=not snapshot.input_text,
            live_translation=LIVE_LABEL_PREFIX + _wrap_text(snapshot.live_translation),
            history_title=HISTORY_TITLE,
            history_lines=tuple(f"- {_wrap_text(item)}" for item in snapshot.history),
            focused=snapshot.is_focused,
            saving=snapshot.pending_save,
        )
        return self._state


def _wrap_text(value: str) -> str:
    if not value:
        return ""
    lines: list[str] = []
    for chunk in value.splitlines():
        if not chunk:
            lines.append("")
            continue
        remaining = chunk
        while len(remaining) > WRAP_LIMIT:
            lines.append(remaining[:WRAP_LIMIT])
            remaining = remaining[WRAP_LIMIT:]
        lines.append(remaining)
    return "\n".join(lines)
