"""Executable Textual app that hosts the vimlet engine."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' extra to use vimlet.adapters.textual.app"
    ) from exc

from vimlet.buffer import BufferMirror, Span
from vimlet.editor import Vim
from vimlet.runtime import telemetry

from .controller import TextualUIHooks, TextualVimAdapter

CURSOR_STYLE = "reverse"
HIGHLIGHT_STYLE = "on dark_blue"

DEMO_TEXT = "The quick brown fox\njumps over the lazy dog"


def _span_columns(span: Span, y: int, width: int) -> Optional[tuple[int, int]]:
    if not span.y1 <= y <= span.y2:
        return None
    start = max(span.x1, 0)
    end = min(span.x2, width - 1)
    if end < start:
        return None
    return start, end + 1


def render_mirror(mirror: BufferMirror) -> Text:
    """Draw the mirror's lines with highlight spans and the cursor cell styled."""

    text = Text(no_wrap=True)
    for y, line in enumerate(mirror.lines):
        row = Text(line)
        for span in mirror.highlights or ():
            columns = _span_columns(span, y, len(line))
            if columns is not None:
                row.stylize(HIGHLIGHT_STYLE, *columns)
        if y == mirror.cursor.y:
            x = mirror.cursor.x
            if x >= len(line):
                row.append(" ")
            row.stylize(CURSOR_STYLE, x, x + 1)
        if y:
            text.append("\n")
        text.append_text(row)
    return text


class VimletApp(App[None]):
    """Minimal Textual UI embedding the engine."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, text: str = DEMO_TEXT) -> None:
        super().__init__()
        self.vim = Vim(text)
        self.adapter: TextualVimAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self.logger = telemetry.get_logger("vimlet.textual")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            log=self.logger.debug,
        )
        self.adapter = TextualVimAdapter(self.vim, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key in {"ctrl+c", "ctrl+q"}:
            return
        if self.adapter.handle_textual_key(event.key, character=event.character):
            event.stop()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_mirror(mirror))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the vimlet Textual demo.")
    parser.add_argument(
        "--text",
        default=None,
        help="Initial buffer contents (default: a short sample)",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("VIMLET_LOG_LEVEL"),
        help="Minimum telelog level (default: $VIMLET_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    # the TUI owns the terminal, so console logging stays off
    os.environ.setdefault("VIMLET_DISABLE_CONSOLE", "1")
    telemetry.configure(level=args.log_level)
    text = DEMO_TEXT if args.text is None else args.text.replace("\\n", "\n")
    VimletApp(text=text).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
