"""Environment: the public entry point for formatting token streams."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from heexfmt._types import Token
from heexfmt.environment.config import FormatterConfig
from heexfmt.expression.protocol import ExpressionFormatter, PassthroughFormatter
from heexfmt.render import RenderContext, render

logger = logging.getLogger(__name__)


class Environment:
    """Formatter configuration plus the embedded-expression formatter.

    An Environment holds no per-format state, so one instance can format
    any number of token streams, from any number of threads.

    Example:
        >>> env = Environment(line_length=80)
        >>> env.format([TagOpen("br")])
        '<br>\\n'

    With the Elixir formatter for embedded code:
        >>> from heexfmt.expression import MixFormatter
        >>> env = Environment(expression_formatter=MixFormatter(), locals_without_parens={"field": 2})

    Args:
        config: Complete configuration; mutually exclusive with ``options``
        expression_formatter: Formatter for code inside ``<%= %>`` tags.
            Defaults to PassthroughFormatter.
        **options: Options bag, resolved with FormatterConfig.from_options
    """

    __slots__ = ("_config", "_context", "_expression_formatter")

    def __init__(
        self,
        config: FormatterConfig | None = None,
        expression_formatter: ExpressionFormatter | None = None,
        **options: Any,
    ) -> None:
        if config is not None and options:
            raise TypeError("Pass either config or keyword options, not both")
        self._config = config or FormatterConfig.from_options(options)
        self._expression_formatter = expression_formatter or PassthroughFormatter()
        self._context = RenderContext(self._config, self._expression_formatter)

    @property
    def config(self) -> FormatterConfig:
        return self._config

    @property
    def expression_formatter(self) -> ExpressionFormatter:
        return self._expression_formatter

    def format(self, tokens: Iterable[Token]) -> str:
        """Format a token stream.

        Returns:
            Formatted text ending with exactly one newline

        Raises:
            TokenContractError: If the stream contains an unknown token
            Exception: Whatever the expression formatter raises, unchanged
        """
        tokens = list(tokens)
        logger.debug(
            "Formatting %d tokens (line_length=%d)", len(tokens), self._config.line_length
        )
        return render(tokens, self._context)

    def __repr__(self) -> str:
        return (
            f"Environment(line_length={self._config.line_length}, "
            f"expression_formatter={self._expression_formatter!r})"
        )


def format_tokens(
    tokens: Iterable[Token],
    options: Mapping[str, Any] | None = None,
    *,
    expression_formatter: ExpressionFormatter | None = None,
) -> str:
    """Format tokens with a one-off Environment built from an options bag.

    ``heex_line_length`` takes precedence over ``line_length``; the whole
    bag is handed to the expression formatter.
    """
    env = Environment(
        FormatterConfig.from_options(options), expression_formatter=expression_formatter
    )
    return env.format(tokens)
