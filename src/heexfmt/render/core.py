"""The token fold.

Tokens are consumed strictly left to right with no backtracking: each
token produces a new RenderState, and the final state's buffer becomes the
formatted text.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce

from heexfmt._types import Token
from heexfmt.render.context import RenderContext
from heexfmt.render.dispatch import render_token
from heexfmt.render.state import RenderState, finalize


def fold_tokens(tokens: Iterable[Token], context: RenderContext) -> RenderState:
    """Run every token through the dispatcher, starting from an empty state."""
    return reduce(
        lambda state, token: render_token(token, state, context),
        tokens,
        RenderState(),
    )


def render(tokens: Iterable[Token], context: RenderContext) -> str:
    """Format a token stream into text ending with exactly one newline."""
    return finalize(fold_tokens(tokens, context))
