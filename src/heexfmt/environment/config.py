"""Formatter configuration.

Provides FormatterConfig, the immutable settings shared by every step of
a format call.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from heexfmt.environment.exceptions import ConfigurationError, ErrorCode
from heexfmt.utils.constants import DEFAULT_LINE_LENGTH, LINE_LENGTH_OPTIONS, TAB


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Immutable formatter settings.

    Attributes:
        line_length: Budget for opening tags and inline text before they
            are broken over several lines
        indent: One indentation step
        formatter_options: Options passed untouched to the expression
            formatter

    Example:
        >>> config = FormatterConfig.from_options({"line_length": 120})
        >>> config.line_length
        120
    """

    line_length: int = DEFAULT_LINE_LENGTH
    indent: str = TAB
    formatter_options: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if (
            isinstance(self.line_length, bool)
            or not isinstance(self.line_length, int)
            or self.line_length < 1
        ):
            raise ConfigurationError(
                f"line_length must be a positive integer, got {self.line_length!r}",
                code=ErrorCode.INVALID_LINE_LENGTH,
                suggestion=f"Omit it to use the default of {DEFAULT_LINE_LENGTH}",
            )
        if not self.indent or self.indent.strip():
            raise ConfigurationError(
                f"indent must be non-empty whitespace, got {self.indent!r}",
                code=ErrorCode.INVALID_INDENT,
            )
        # Freeze the options bag so a config can be shared across threads.
        object.__setattr__(
            self, "formatter_options", MappingProxyType(dict(self.formatter_options))
        )

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> FormatterConfig:
        """Build a config from a flat options bag.

        The line length is read from ``heex_line_length``, then
        ``line_length``, then the default. The whole bag is kept as the
        expression formatter's options, so a shared ``line_length`` also
        governs embedded code.
        """
        options = dict(options or {})
        line_length = DEFAULT_LINE_LENGTH
        for key in LINE_LENGTH_OPTIONS:
            if options.get(key) is not None:
                line_length = options[key]
                break

        return cls(line_length=line_length, formatter_options=options)

    def indentation(self, level: int) -> str:
        """Indent string for the given level; negative levels clamp to zero."""
        return self.indent * max(0, level)
