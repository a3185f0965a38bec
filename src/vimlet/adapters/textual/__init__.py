"""Optional Textual host for the engine (install the ``textual`` extra)."""

from .controller import TextualUIHooks, TextualVimAdapter, status_line, translate_key

__all__ = ["TextualUIHooks", "TextualVimAdapter", "status_line", "translate_key"]
