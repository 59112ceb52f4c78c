from __future__ import annotations

import io

from live_translator import repl
from live_translator.repl import TerminalHost


def test_typing_shows_live_translation() -> None:
    host = TerminalHost()

    assert host.handle_line("hello") == ["Live Translation: HELLO"]
    assert host.session.state.is_focused is True


def test_blur_saves_once() -> None:
    host = TerminalHost()
    host.handle_line("hello")

    assert host.handle_line(":blur") == [
        "Saved to history: HELLO",
        "Live Translation: HELLO",
    ]
    host.handle_line(":focus")
    assert host.handle_line(":blur") == ["Live Translation: HELLO"]
    assert host.handle_line(":history") == [
        "history:",
        "1. HELLO",
        "Live Translation: HELLO",
    ]


def test_back_saves_then_exits() -> None:
    host = TerminalHost()
    host.handle_line("abc")

    output = host.handle_line(":back")

    assert output[0] == "Saved to history: ABC"
    assert host.finished is False
    assert host.effects.keyboard_visible is False

    assert host.handle_line(":back") == []
    assert host.finished is True
    assert host.session.history == ("ABC",)


def test_viewport_shrink_saves_on_the_same_tick() -> None:
    host = TerminalHost()
    host.handle_line("xyz")

    assert host.handle_line(":viewport 0.05") == [
        "Saved to history: XYZ",
        "Live Translation: XYZ",
    ]
    assert host.session.history == ("XYZ",)
    assert len(host.queue) == 0


def test_submit_reports_duplicates() -> None:
    host = TerminalHost()
    host.handle_line("hello")
    host.handle_line(":submit")
    host.handle_line("HELLO")

    assert host.handle_line(":submit")[0] == "Already in history: HELLO"


def test_bad_input_prints_usage() -> None:
    host = TerminalHost()

    assert host.handle_line(":viewport wide")[0].startswith("usage:")
    assert host.handle_line(":jump")[0] == "unknown command: jump"


def test_run_reads_until_quit() -> None:
    stdin = io.StringIO("hi\n:tap\n:history\n:quit\nignored\n")
    stdout = io.StringIO()

    status = repl.run(TerminalHost(), stdin=stdin, stdout=stdout)

    output = stdout.getvalue()
    assert status == 0
    assert "Saved to history: HI" in output
    assert "1. HI" in output
    assert "IGNORED" not in output


def test_run_stops_at_end_of_input() -> None:
    stdout = io.StringIO()

    assert repl.run(TerminalHost(), stdin=io.StringIO("x\n"), stdout=stdout) == 0
    assert "Live Translation: X" in stdout.getvalue()


def test_run_strips_windows_line_endings() -> None:
    host = TerminalHost()
    stdout = io.StringIO()

    repl.run(host, stdin=io.StringIO("hello\r\n:submit\r\n:quit\r\n"), stdout=stdout)

    assert host.session.history == ("HELLO",)
    assert "unknown command" not in stdout.getvalue()
