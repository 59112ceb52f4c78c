from __future__ import annotations

import argparse
import os
import sys

from live_translator.config import config_path, load_config
from live_translator import repl
from live_translator import telemetry


def _reset_if_requested() -> None:
    if os.environ.get("LIVE_TRANSLATOR_RESET", "").strip() != "1":
        return
    os.environ.pop("LIVE_TRANSLATOR_RESET", None)
    path = config_path()
    try:
        if path.exists():
            path.unlink()
    except OSError as exc:
        telemetry.log_error("main.reset_failed", exc)
        return
    telemetry.log_event("main.reset")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="live-translator",
        description="Live translation screen with a session history.",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run the terminal host instead of the GTK window.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    raw_args = sys.argv[1:] if argv is None else argv
    args, toolkit_args = _build_parser().parse_known_args(raw_args)
    reset_flag = os.environ.pop("LIVE_TRANSLATOR_LOG_RESET", "").strip()
    telemetry.setup(reset=reset_flag != "0")
    telemetry.log_event("main.start", headless=args.headless)
    _reset_if_requested()
    if args.headless:
        config = load_config()
        host = repl.TerminalHost(
            keyboard_hidden_ratio=config.screen.keyboard_hidden_ratio
        )
        status = repl.run(host)
    else:
        from live_translator.app import LiveTranslatorApp

        status = LiveTranslatorApp().run([sys.argv[0], *toolkit_args])
    telemetry.log_event("main.exit", status=status)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
