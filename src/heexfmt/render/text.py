"""Text placement for normal (non-verbatim) mode."""

from __future__ import annotations

from typing import TYPE_CHECKING

from heexfmt._types import ExprTagRender, TagOpen
from heexfmt.utils.constants import HTML_COMMENT_CLOSE, HTML_COMMENT_OPEN

if TYPE_CHECKING:
    from heexfmt.render.context import RenderContext
    from heexfmt.render.state import RenderState


def is_html_comment(text: str) -> bool:
    """True if the text holds a complete ``<!-- ... -->`` comment."""
    return HTML_COMMENT_OPEN in text and HTML_COMMENT_CLOSE in text


def is_doctype(text: str) -> bool:
    return "<!doctype" in text.lower()


def render_blank(text: str) -> str:
    """Collapse whitespace-only text.

    Two or more newlines mean the author left a blank line on purpose, so
    one is kept; anything less disappears.
    """
    return "\n" if text.count("\n") > 1 else ""


def render_text(text: str, state: RenderState, context: RenderContext) -> str:
    """Place non-blank text relative to the previous significant token."""
    previous = state.previous_token
    trimmed = text.strip()
    on_new_line = "\n" + context.config.indentation(state.indentation) + trimmed

    if previous is None:
        return text.rstrip() if is_html_comment(text) else trimmed

    if isinstance(previous, ExprTagRender):
        # "<%= @price %> in Dollars" stays on one line unless a body opens.
        return on_new_line if previous.block else " " + trimmed

    if isinstance(previous, TagOpen):
        if not previous.attributes and len(trimmed) < context.config.line_length:
            return trimmed
        return on_new_line

    if is_html_comment(text):
        return text.rstrip()
    if is_doctype(text):
        return trimmed
    return on_new_line
