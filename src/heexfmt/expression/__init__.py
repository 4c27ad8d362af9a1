"""Embedded-expression formatters.

The renderer hands the code inside ``<%= ... %>`` tags to an
ExpressionFormatter. Any object with a ``format(code, options)`` method
works; two implementations ship with heexfmt:

- PassthroughFormatter: keeps code as written (default)
- MixFormatter: runs the Elixir formatter in a subprocess
"""

from __future__ import annotations

from heexfmt.expression.mix import MixFormatter, to_elixir_term
from heexfmt.expression.protocol import ExpressionFormatter, PassthroughFormatter

__all__ = [
    "ExpressionFormatter",
    "MixFormatter",
    "PassthroughFormatter",
    "to_elixir_term",
]
