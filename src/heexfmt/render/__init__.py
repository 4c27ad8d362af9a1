"""Token-to-text rendering engine.

Pipeline:
    tokens → render_token (per token, state in / state out) → finalize → text

Modules:
- state: RenderState and the Fragment buffer chain
- context: RenderContext (configuration and expression formatter)
- dispatch: one arm per token kind
- attributes: attribute rendering and wrapping
- text: text placement and blank-line handling
- expressions: canonicalization of embedded expressions
- core: the fold
"""

from __future__ import annotations

from heexfmt.render.context import RenderContext
from heexfmt.render.core import fold_tokens, render
from heexfmt.render.dispatch import render_token
from heexfmt.render.state import Fragment, RenderState, finalize

__all__ = [
    "Fragment",
    "RenderContext",
    "RenderState",
    "finalize",
    "fold_tokens",
    "render",
    "render_token",
]
