from __future__ import annotations

from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Final

from live_translator.application.keyboard import DEFAULT_KEYBOARD_HIDDEN_RATIO
from live_translator.application.view_state import DEFAULT_PLACEHOLDER
from live_translator.runtime_namespace import runtime_namespace

CONFIG_FILE_NAME: Final[str] = "config.json"
DEFAULT_WINDOW_WIDTH: Final[int] = 420
DEFAULT_WINDOW_HEIGHT: Final[int] = 520


@dataclass(frozen=True, slots=True)
class ScreenConfig:
    placeholder: str
    keyboard_hidden_ratio: float
    close_on_back: bool


@dataclass(frozen=True, slots=True)
class WindowConfig:
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class AppConfig:
    screen: ScreenConfig
    window: WindowConfig


def config_path() -> Path:
    xdg_home = os.environ.get("XDG_CONFIG_HOME", "").strip()
    base = Path(xdg_home) if xdg_home else Path.home() / ".config"
    return base / runtime_namespace() / CONFIG_FILE_NAME


def load_config() -> AppConfig:
    path = config_path()
    if not path.exists():
        return default_config()
    try:
        raw_data = path.read_text(encoding="utf-8")
        payload: object = json.loads(raw_data)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return default_config()
    return parse_config(payload)


def save_config(config: AppConfig) -> None:
    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    data = json.dumps(_config_to_dict(config), ensure_ascii=True, indent=2)
    path.write_text(data, encoding="utf-8")


def default_config() -> AppConfig:
    return AppConfig(
        screen=ScreenConfig(
            placeholder=DEFAULT_PLACEHOLDER,
            keyboard_hidden_ratio=DEFAULT_KEYBOARD_HIDDEN_RATIO,
            close_on_back=True,
        ),
        window=WindowConfig(
            width=DEFAULT_WINDOW_WIDTH,
            height=DEFAULT_WINDOW_HEIGHT,
        ),
    )


def parse_config(payload: object) -> AppConfig:
    """Build a config from decoded JSON; bad or missing fields keep defaults."""
    defaults = default_config()
    payload_dict = _get_dict(payload)
    if payload_dict is None:
        return defaults
    screen_data = _get_dict(payload_dict.get("screen")) or {}
    window_data = _get_dict(payload_dict.get("window")) or {}
    screen = ScreenConfig(
        placeholder=_get_str(
            screen_data.get("placeholder"), defaults.screen.placeholder
        ),
        keyboard_hidden_ratio=_get_ratio(
            screen_data.get("keyboard_hidden_ratio"),
            defaults.screen.keyboard_hidden_ratio,
        ),
        close_on_back=_get_bool(
            screen_data.get("close_on_back"), defaults.screen.close_on_back
        ),
    )
    window = WindowConfig(
        width=_get_positive_int(window_data.get("width"), defaults.window.width),
        height=_get_positive_int(window_data.get("height"), defaults.window.height),
    )
    return AppConfig(screen=screen, window=window)


def _config_to_dict(config: AppConfig) -> dict[str, object]:
    return {
        "screen": {
            "placeholder": config.screen.placeholder,
            "keyboard_hidden_ratio": config.screen.keyboard_hidden_ratio,
            "close_on_back": config.screen.close_on_back,
        },
        "window": {
            "width": config.window.width,
            "height": config.window.height,
        },
    }


def _get_dict(value: object | None) -> dict[str, object] | None:
    if isinstance(value, dict):
        output: dict[str, object] = {}
        for raw_key, raw_item in value.items():
            if isinstance(raw_key, str):
                output[raw_key] = raw_item
        return output
    return None


def _get_str(value: object | None, default: str) -> str:
    if isinstance(value, str):
        return value
    return default


def _get_bool(value: object | None, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    return default


def _get_ratio(value: object | None, default: float) -> float:
    # bool is an int subclass; "true" is not a ratio.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    ratio = float(value)
    if 0.0 < ratio < 1.0:
        return ratio
    return default


def _get_positive_int(value: object | None, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value > 0:
        return value
    return default
