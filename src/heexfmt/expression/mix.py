"""Elixir expression formatter backed by a subprocess.

Runs ``Code.format_string!/2`` through the ``elixir`` executable, feeding
the code on stdin and translating the options mapping into an Elixir
keyword list literal.
"""

from __future__ import annotations

import logging
import re
import subprocess
from collections.abc import Mapping, Sequence
from typing import Any

from heexfmt.environment.exceptions import ErrorCode, ExpressionFormatError

logger = logging.getLogger(__name__)

_ATOM_KEY = re.compile(r"^[a-z_][a-zA-Z0-9_]*[?!]?$")

_FORMAT_SCRIPT = (
    "opts = {options}\n"
    "input = IO.read(:stdio, :eof)\n"
    "IO.write(IO.iodata_to_binary(Code.format_string!(input, opts)))\n"
)


def _elixir_string(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("#{", "\\#{")
        .replace("\n", "\\n")
    )
    return f'"{escaped}"'


def _keyword_key(key: str) -> str:
    if _ATOM_KEY.match(key):
        return f"{key}:"
    return f"{_elixir_string(key)}:"


def to_elixir_term(value: Any) -> str:
    """Render a Python value as an Elixir literal.

    Mappings become keyword lists, tuples become tuples, and strings become
    binaries:

        >>> to_elixir_term({"line_length": 80, "locals_without_parens": {"field": 2}})
        '[line_length: 80, locals_without_parens: [field: 2]]'

    Raises:
        TypeError: If the value has no Elixir literal form
    """
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return repr(value)
    if isinstance(value, str):
        return _elixir_string(value)
    if isinstance(value, Mapping):
        pairs = ", ".join(f"{_keyword_key(str(k))} {to_elixir_term(v)}" for k, v in value.items())
        return f"[{pairs}]"
    if isinstance(value, tuple):
        return "{" + ", ".join(to_elixir_term(item) for item in value) + "}"
    if isinstance(value, Sequence):
        return "[" + ", ".join(to_elixir_term(item) for item in value) + "]"
    raise TypeError(f"Cannot express {type(value).__name__} as an Elixir term: {value!r}")


class MixFormatter:
    """Format Elixir code with the host language's own formatter.

    Each call starts one ``elixir`` process. Options not understood by
    ``Code.format_string!/2`` are ignored by Elixir, so the renderer's
    whole options bag can be passed through.

    Example:
        >>> formatter = MixFormatter()
        >>> formatter.format("text_input f,:name", {})
        'text_input(f, :name)'
    """

    __slots__ = ("_executable", "_timeout")

    def __init__(self, executable: str = "elixir", timeout: float | None = 30.0) -> None:
        self._executable = executable
        self._timeout = timeout

    def _command(self, options: Mapping[str, Any]) -> list[str]:
        script = _FORMAT_SCRIPT.format(options=to_elixir_term(dict(options)))
        return [self._executable, "-e", script]

    def format(self, code: str, options: Mapping[str, Any]) -> str:
        """Format code, raising ExpressionFormatError when Elixir rejects it."""
        command = self._command(options)
        logger.debug("Running %s on %d characters of code", self._executable, len(code))
        try:
            result = subprocess.run(
                command,
                input=code,
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise ExpressionFormatError(
                f"Expression formatter executable '{self._executable}' not found",
                code=ErrorCode.FORMATTER_NOT_FOUND,
                suggestion="Install Elixir or pass a different expression_formatter",
            ) from e
        except subprocess.TimeoutExpired as e:
            raise ExpressionFormatError(
                f"Expression formatter timed out after {self._timeout}s",
                source=code,
            ) from e

        if result.returncode != 0:
            logger.warning(
                "%s exited with status %d while formatting an expression",
                self._executable,
                result.returncode,
            )
            raise ExpressionFormatError(
                "Expression formatter rejected the code",
                source=code,
                output=result.stderr,
                suggestion="Check the embedded expression for syntax errors",
            )

        return result.stdout

    def __repr__(self) -> str:
        return f"MixFormatter(executable={self._executable!r})"
