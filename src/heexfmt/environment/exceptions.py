"""Exceptions for heexfmt.

Exception Hierarchy:
FormatterError (base)
├── ConfigurationError       # Invalid line length, indent or options
├── TokenContractError       # Token shape the renderer does not understand
└── ExpressionFormatError    # A bundled expression formatter failed

The renderer itself never catches errors: a failure anywhere aborts the
whole format call, so there is no partial output.

Example:
    ```
    H-TOK-001: Unsupported token 'Comment' at 3:7
      Hint: Tokens must be TagOpen, TagClose, Text, ExprTag or ExprTagRender
      Docs: https://heexfmt.readthedocs.io/en/latest/errors.html#h-tok-001
    ```

"""

from __future__ import annotations

from enum import Enum

from heexfmt.environment import terminal

_DOCS_BASE = "https://heexfmt.readthedocs.io/en/latest/errors.html"


class ErrorCode(Enum):
    """Searchable error codes.

    Format: H-{CATEGORY}-{NUMBER}
    Categories: CFG (configuration), TOK (token stream), EXP (expression formatter)
    """

    INVALID_LINE_LENGTH = "H-CFG-001"
    INVALID_INDENT = "H-CFG-002"

    UNSUPPORTED_TOKEN = "H-TOK-001"

    FORMATTER_FAILED = "H-EXP-001"
    FORMATTER_NOT_FOUND = "H-EXP-002"

    @property
    def docs_url(self) -> str:
        return f"{_DOCS_BASE}#{self.value.lower()}"

    @property
    def category(self) -> str:
        """Error category (``configuration``, ``token`` or ``expression``)."""
        prefix = self.value.split("-")[1]
        return {
            "CFG": "configuration",
            "TOK": "token",
            "EXP": "expression",
        }.get(prefix, "unknown")


class FormatterError(Exception):
    """Base exception for all heexfmt errors.

    Attributes:
        message: Error description
        code: Optional ErrorCode for searchable error identification
        lineno: Source line of the offending token, when known
        col_offset: Source column of the offending token, when known
        suggestion: Actionable fix suggestion
    """

    code: ErrorCode | None = None

    def __init__(
        self,
        message: str,
        *,
        lineno: int | None = None,
        col_offset: int | None = None,
        suggestion: str | None = None,
        code: ErrorCode | None = None,
    ):
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.suggestion = suggestion
        if code is not None:
            self.code = code
        super().__init__(self._format_message())

    @property
    def location(self) -> str | None:
        if not self.lineno:
            return None
        if self.col_offset is not None:
            return f"{self.lineno}:{self.col_offset}"
        return str(self.lineno)

    def _format_message(self) -> str:
        if self.location:
            return f"{self.message} at {self.location}"
        return self.message

    def format_compact(self) -> str:
        """Format the error as a short terminal diagnostic.

        Format::

            H-TOK-001: Unsupported token 'Comment' at 3:7
              Hint: Tokens must be TagOpen, TagClose, Text, ExprTag or ExprTagRender
              Docs: https://heexfmt.readthedocs.io/en/latest/errors.html#h-tok-001
        """
        code = self.code.value if self.code else None
        message = self.message
        if self.location:
            message += f" at {terminal.location(self.location)}"
        parts = [terminal.format_error_header(code, message)]

        if self.suggestion:
            parts.append(f"  {terminal.hint('Hint:')} {self.suggestion}")
        if self.code:
            parts.append(f"  Docs: {terminal.docs_url(self.code.docs_url)}")

        return "\n".join(parts)


class ConfigurationError(FormatterError):
    """Invalid formatter configuration.

    Raised by FormatterConfig when the line length or indent unit cannot be
    used for layout decisions.
    """

    code: ErrorCode | None = ErrorCode.INVALID_LINE_LENGTH


class TokenContractError(FormatterError):
    """The token stream contains a token the renderer does not know.

    The tokenizer is trusted to produce well-formed streams, so this is a
    programming error in the caller rather than a problem with the template.
    """

    code: ErrorCode | None = ErrorCode.UNSUPPORTED_TOKEN


class ExpressionFormatError(FormatterError):
    """An external expression formatter failed.

    Carries the formatter's diagnostic output (stderr of the formatter
    process) so the offending expression can be located.
    """

    code: ErrorCode | None = ErrorCode.FORMATTER_FAILED

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        output: str | None = None,
        suggestion: str | None = None,
        code: ErrorCode | None = None,
    ):
        self.source = source
        self.output = output
        super().__init__(message, suggestion=suggestion, code=code)

    def _format_message(self) -> str:
        msg = self.message
        if self.source:
            msg += f"\n  Expression: {self.source}"
        if self.output:
            msg += f"\n  Output: {self.output.strip()}"
        return msg
