"""Expression formatter protocol."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ExpressionFormatter(Protocol):
    """Canonicalizes a snippet of embedded code.

    Implementations must be deterministic and idempotent: formatting
    already formatted code returns it unchanged, up to trailing
    whitespace. The renderer relies on this for its own idempotence.

    Errors raised by ``format`` are not caught by the renderer; they abort
    the format call.
    """

    def format(self, code: str, options: Mapping[str, Any]) -> str: ...


class PassthroughFormatter:
    """Keeps embedded code as written, minus surrounding whitespace."""

    __slots__ = ()

    def format(self, code: str, options: Mapping[str, Any]) -> str:
        return code.strip()

    def __repr__(self) -> str:
        return "PassthroughFormatter()"
