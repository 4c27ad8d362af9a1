"""Token dispatcher: one rendering step per token.

``render_token(token, state, context)`` returns the state after emitting
the token. Arms are tried in a fixed order and the first match wins:

1. Comment text (text carrying comment markers)
2. Verbatim passthrough (text or expression tags inside script/style/
   code/pre or an open comment)
3. TagOpen
4. TagClose
5. Text
6. ExprTagRender
7. ExprTag

Later arms assume the earlier ones did not match: the Text arm never sees
comment text, and no arm after the second runs in verbatim mode for text
or expression tags.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from heexfmt._types import ExprTag, ExprTagRender, TagClose, TagOpen, Text, Token, TokenType
from heexfmt.environment.exceptions import TokenContractError
from heexfmt.render.attributes import render_tag_open
from heexfmt.render.context import RenderContext
from heexfmt.render.expressions import block_keyword, expression_keyword, format_render_tag
from heexfmt.render.state import RenderState
from heexfmt.render.text import is_html_comment, render_blank, render_text
from heexfmt.utils.constants import (
    COMMENT_MODE,
    ELSE_MARKERS,
    END_MARKERS,
    HTML_COMMENT_CLOSE,
    MULTI_BRANCH_BLOCKS,
    VERBATIM_TAGS,
    VOID_TAGS,
)

# "-->" ending its line, possibly followed by stray spaces or tabs
_CLOSED_COMMENT_LINE = re.compile(re.escape(HTML_COMMENT_CLOSE) + r"[ \t]*\n")

Handler = Callable[[Token, RenderState, RenderContext], RenderState]


def _closes_line(text: str) -> bool:
    return _CLOSED_COMMENT_LINE.search(text) is not None


def _is_comment_text(token: Token | None) -> bool:
    """True for text that is, or is part of, an HTML comment."""
    return isinstance(token, Text) and (token.is_comment or is_html_comment(token.content))


def _ends_comment_line(token: Token | None) -> bool:
    """True if the token is comment text whose output already ends a line."""
    return isinstance(token, Text) and token.is_comment and _closes_line(token.content)


def _new_line(state: RenderState, context: RenderContext, level: int) -> str:
    """Line break plus indentation for content placed on its own line.

    No break is needed at the start of input or after a comment line that
    already ended with one.
    """
    previous = state.previous_token
    line_break = "" if previous is None or _ends_comment_line(previous) else "\n"
    return line_break + context.config.indentation(level)


# ---------------------------------------------------------------------------
# Comments and verbatim content
# ---------------------------------------------------------------------------


def _render_comment(token: Text, state: RenderState, context: RenderContext) -> RenderState:
    text = token.content
    if _closes_line(text):
        text = text.rstrip() + "\n"
    return state.emit(text, verbatim_tag=COMMENT_MODE if token.opens_comment else None)


def _render_verbatim(token: Token, state: RenderState, context: RenderContext) -> RenderState:
    return state.emit(token.content.rstrip())  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------


def _line_break_before_tag(previous: Token | None) -> str:
    """A new line precedes every opening tag except right after a comment."""
    if previous is None:
        return ""
    if _is_comment_text(previous):
        return ""
    return "\n"


def _render_tag_open(token: TagOpen, state: RenderState, context: RenderContext) -> RenderState:
    config = context.config
    rendered = render_tag_open(
        token, config.indentation(state.indentation), config.indent, config.line_length
    )
    nests = not (token.self_close or token.name in VOID_TAGS)

    return state.emit(
        _line_break_before_tag(state.previous_token) + rendered,
        opened_tag=token.name if nests else None,
        indentation=state.indentation + 1 if nests else state.indentation,
        verbatim_tag=token.name if token.name in VERBATIM_TAGS else None,
    )


def _content_spans_lines(state: RenderState, name: str) -> bool:
    """True if the open element ``name`` already covers more than one line.

    That is the case when anything emitted since its opening tag contains a
    line break, or when the opening tag itself had its attributes wrapped.
    """
    for fragment in state.fragments():
        if fragment.opened_tag == name:
            return "\n" in fragment.text.lstrip("\n")
        if "\n" in fragment.text:
            return True
    return True


def _close_inline(token: TagClose, state: RenderState) -> bool:
    previous = state.previous_token
    if isinstance(previous, Text):
        return previous.is_comment or not _content_spans_lines(state, token.name)
    # An empty element collapses: <th></th>
    return isinstance(previous, TagOpen) and previous.name == token.name


def _render_tag_close(token: TagClose, state: RenderState, context: RenderContext) -> RenderState:
    indentation = state.indentation - 1
    closing = f"</{token.name}>"

    if not state.is_verbatim and _close_inline(token, state):
        text = closing
    else:
        text = "\n" + context.config.indentation(indentation) + closing

    return state.emit(text, indentation=indentation, verbatim_tag=None)


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


def _render_text(token: Text, state: RenderState, context: RenderContext) -> RenderState:
    if token.is_blank:
        return state.emit(render_blank(token.content))
    if _ends_comment_line(state.previous_token):
        text = context.config.indentation(state.indentation) + token.content.strip()
        return state.emit(text)
    return state.emit(render_text(token.content, state, context))


# ---------------------------------------------------------------------------
# Expression tags
# ---------------------------------------------------------------------------


def _render_expr_tag_render(
    token: ExprTagRender, state: RenderState, context: RenderContext
) -> RenderState:
    formatted = format_render_tag(token.content, state.indentation, context)
    previous = state.previous_token

    if previous is None:
        text = formatted
    elif isinstance(previous, Text) and not _is_comment_text(previous):
        # Keep "$ <%= @price %>" together on one line.
        text = " " + formatted
    else:
        text = _new_line(state, context, state.indentation) + formatted

    if token.block:
        return state.emit(
            text, indentation=state.indentation + 1, block_stack=state.push_block()
        )
    return state.emit(text)


def _render_expr_tag(token: ExprTag, state: RenderState, context: RenderContext) -> RenderState:
    keyword = expression_keyword(token.content)
    tag = token.content.strip()
    previous = state.previous_token

    if keyword in ELSE_MARKERS:
        return state.emit(_new_line(state, context, state.indentation - 1) + tag)

    if keyword in END_MARKERS:
        # Branch delimiters of case/cond add a level of their own.
        dedent = 2 if state.block_kind in MULTI_BRANCH_BLOCKS else 1
        indentation = state.indentation - dedent
        return state.emit(
            _new_line(state, context, indentation) + tag,
            indentation=indentation,
            block_stack=state.pop_block(),
        )

    if token.block:
        if isinstance(previous, ExprTagRender) and previous.block:
            return state.emit(
                _new_line(state, context, state.indentation) + tag,
                indentation=state.indentation + 1,
                block_stack=state.mark_block(block_keyword(previous.content)),
            )
        return state.emit(_new_line(state, context, state.indentation - 1) + tag)

    if previous is None:
        return state.emit(tag)
    if isinstance(previous, ExprTagRender | ExprTag):
        return state.emit(_new_line(state, context, state.indentation) + tag)

    indentation = state.indentation - 1
    return state.emit(_new_line(state, context, indentation) + tag, indentation=indentation)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

_HANDLERS: dict[TokenType, Handler] = {
    TokenType.TAG_OPEN: _render_tag_open,  # type: ignore[dict-item]
    TokenType.TAG_CLOSE: _render_tag_close,  # type: ignore[dict-item]
    TokenType.TEXT: _render_text,  # type: ignore[dict-item]
    TokenType.EXPR_TAG_RENDER: _render_expr_tag_render,  # type: ignore[dict-item]
    TokenType.EXPR_TAG: _render_expr_tag,  # type: ignore[dict-item]
}

_PASSTHROUGH_TYPES = frozenset({TokenType.TEXT, TokenType.EXPR_TAG, TokenType.EXPR_TAG_RENDER})


def _remember(state: RenderState, token: Token) -> RenderState:
    """Track the previous significant token; blank text does not count."""
    if isinstance(token, Text) and token.is_blank:
        return state
    return state.evolve(previous_token=token)


def render_token(token: Token, state: RenderState, context: RenderContext) -> RenderState:
    """Emit one token and return the resulting state.

    Raises:
        TokenContractError: If the token is not one of the known kinds
    """
    if isinstance(token, Text) and token.is_comment:
        state = _render_comment(token, state, context)
    elif state.is_verbatim and token.type in _PASSTHROUGH_TYPES:
        state = _render_verbatim(token, state, context)
    else:
        handler = _HANDLERS.get(token.type)
        if handler is None:
            raise TokenContractError(
                f"Unsupported token {type(token).__name__!r}",
                lineno=getattr(token, "lineno", None),
                col_offset=getattr(token, "col_offset", None),
                suggestion="Tokens must be TagOpen, TagClose, Text, ExprTag or ExprTagRender",
            )
        state = handler(token, state, context)

    return _remember(state, token)
