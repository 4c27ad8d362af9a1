"""Canonicalization of embedded expressions.

The code inside a rendering tag is usually an incomplete construct: a
``do`` block whose body is template markup, or an anonymous function whose
body follows in later tokens. Such fragments are completed with synthetic
code before formatting, and the synthetic code is removed again afterwards.

    <%= for item <- @items do %>           ->  "for item <- @items do\\nend"
    <%= form_for @cs, url, fn f -> %>      ->  "form_for @cs, url, fn f ->\\nnil\\nend"
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from heexfmt.render.context import RenderContext

logger = logging.getLogger(__name__)

_RENDER_TAG = re.compile(r"\A<%=\s*(.*?)\s*%>\Z", re.DOTALL)
_EXPR_TAG = re.compile(r"\A<%\s*(.*?)\s*%>\Z", re.DOTALL)
_ENDS_WITH_DO = re.compile(r"\sdo\Z")

_DO_BLOCK_END = "\nend"
_FN_BODY = "\nnil\nend"
_FN_SYNTHETIC_LINES = 2


def render_tag_code(content: str) -> str:
    """Code between ``<%=`` and ``%>``."""
    match = _RENDER_TAG.match(content.strip())
    return match.group(1) if match else content.strip()


def expression_keyword(content: str) -> str:
    """Code between ``<%`` and ``%>`` of a non-rendering tag, e.g. ``else``."""
    match = _EXPR_TAG.match(content.strip())
    return match.group(1) if match else content.strip()


def block_keyword(content: str) -> str:
    """First keyword of a rendering tag's code.

    >>> block_keyword('<%= case {:ok, "elixir"} do %>')
    'case'
    """
    words = render_tag_code(content).split()
    return words[0] if words else ""


def _format_do_block(code: str, context: RenderContext) -> str:
    formatted = context.format_code(code + _DO_BLOCK_END)
    return formatted.removesuffix(_DO_BLOCK_END)


def _unwrap_call(code: str) -> str:
    """Undo the parentheses the formatter adds around a multi-line call.

    ``form_for(\\n  @cs,\\n  url,\\n  fn f ->`` becomes
    ``form_for @cs,\\n         url,\\n         fn f ->`` with continuation
    lines aligned under the first argument.
    """
    if not code.endswith(")"):
        return code

    name_length = len(code.split("(", 1)[0])
    continuation = "\n" + " " * (name_length + 1)
    code = code.replace("(\n ", "", 1)
    code = code.replace("\n  ", continuation)
    return code.removesuffix("\n)")


def _format_fn_head(code: str, context: RenderContext) -> str:
    formatted = context.format_code(code + _FN_BODY).strip()
    formatted = _unwrap_call(formatted)
    lines = formatted.split("\n")
    return "\n".join(lines[:-_FN_SYNTHETIC_LINES])


def format_render_tag(content: str, indentation: int, context: RenderContext) -> str:
    """Format a ``<%= ... %>`` tag at the given indentation level.

    Continuation lines of multi-line code are re-indented to the tag's
    level so the whole tag moves with its surroundings.
    """
    code = render_tag_code(content)

    if _ENDS_WITH_DO.search(code):
        logger.debug("Formatting do-block head: %r", code)
        formatted = _format_do_block(code, context)
    elif code.endswith("->"):
        logger.debug("Formatting anonymous function head: %r", code)
        formatted = _format_fn_head(code, context)
    else:
        formatted = context.format_code(code)

    separator = "\n" + context.config.indentation(indentation)
    formatted = separator.join(formatted.split("\n"))
    return f"<%= {formatted} %>"
