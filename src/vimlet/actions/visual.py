"""Actions dedicated to Visual mode selection management."""

from __future__ import annotations

from typing import List, Optional

from vimlet.buffer import CursorState, Span
from vimlet.modes.base_mode import ModeContext, ModeName, ModeResult


def highlight_spans(
    mode: ModeName, anchor: Optional[CursorState], cursor: CursorState
) -> Optional[List[Span]]:
    """Rectangles covering the active selection, or ``None`` outside Visual."""

    if anchor is None or not mode.is_visual:
        return None

    y1 = min(anchor.y, cursor.y)
    y2 = max(anchor.y, cursor.y)

    if mode is ModeName.VISUAL_BLOCK:
        x1 = min(anchor.x, cursor.x)
        x2 = max(anchor.x, cursor.x)
        return [Span(x1=x1, y1=y1, x2=x2, y2=y2)]

    buffer = cursor.buffer
    spans = [
        Span(x1=0, y1=y, x2=buffer.line_length(y) - 1, y2=y) for y in range(y1, y2 + 1)
    ]
    if mode is ModeName.VISUAL:
        # top row starts at the anchor column, bottom row ends at the cursor
        # column, whichever of the two is on top
        first = spans[0]
        spans[0] = Span(x1=anchor.x, y1=first.y1, x2=first.x2, y2=first.y2)
        last = spans[-1]
        spans[-1] = Span(x1=last.x1, y1=last.y1, x2=cursor.x, y2=last.y2)
    return spans


def current_highlights(context: ModeContext, mode: ModeName) -> Optional[List[Span]]:
    return highlight_spans(mode, context.anchor, context.state)


def selected_text(context: ModeContext, mode: ModeName) -> Optional[str]:
    spans = current_highlights(context, mode)
    if spans is None:
        return None
    buffer = context.state.buffer
    return "\n".join(
        buffer.get_selection(span.x1, span.y1, span.x2, span.y2) for span in spans
    )


def delete_highlighted(
    context: ModeContext, mode: ModeName, spans: List[Span]
) -> ModeResult:
    """Delete ``spans`` in a new snapshot and return to Normal mode."""

    snapshot = context.commit("visual_delete")
    buffer = snapshot.buffer
    for span in spans:
        buffer.delete_span(span, remove_empty_lines=mode is ModeName.VISUAL_LINE)
    if mode is ModeName.VISUAL and len(spans) > 1:
        top = min(span.y1 for span in spans)
        buffer.merge_lines(top, top + 1)
    buffer.compact()
    snapshot.set_y(lambda y: y)
    context.keys.clear()
    context.bus.emit(
        "visual.delete",
        {"mode": mode.value, "spans": tuple(spans)},
    )
    return ModeResult(
        consumed=True,
        switch_to=ModeName.NORMAL,
        status="visual_delete",
    )


__all__ = [
    "highlight_spans",
    "current_highlights",
    "selected_text",
    "delete_highlighted",
]
