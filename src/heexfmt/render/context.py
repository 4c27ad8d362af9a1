"""Read-only settings shared by every step of one format call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from heexfmt.environment.config import FormatterConfig
    from heexfmt.expression.protocol import ExpressionFormatter


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Configuration and collaborators for a format call.

    Unlike RenderState, the context never changes during the fold.

    Attributes:
        config: Line length, indent unit and expression formatter options
        expression_formatter: Canonicalizes code inside expression tags
    """

    config: FormatterConfig
    expression_formatter: ExpressionFormatter

    def format_code(self, code: str) -> str:
        """Run the expression formatter with the configured options."""
        formatted = self.expression_formatter.format(code, self.config.formatter_options)
        return formatted.rstrip()
