"""Configuration, errors and the Environment facade for heexfmt."""

from __future__ import annotations

from heexfmt.environment.exceptions import (
    ConfigurationError,
    ErrorCode,
    ExpressionFormatError,
    FormatterError,
    TokenContractError,
)
from heexfmt.environment.config import FormatterConfig
from heexfmt.environment.core import Environment, format_tokens

__all__ = [
    "ConfigurationError",
    "Environment",
    "ErrorCode",
    "ExpressionFormatError",
    "FormatterConfig",
    "FormatterError",
    "TokenContractError",
    "format_tokens",
]
