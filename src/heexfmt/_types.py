"""Token and attribute types consumed by the heexfmt rendering engine.

Tokens are produced by an external template tokenizer. They are immutable
and carry their source position so diagnostics can point back at the
template, even though the rendering decisions never look at it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from heexfmt.utils.constants import (
    COMMENT_END,
    COMMENT_START,
    HTML_COMMENT_CLOSE,
    HTML_COMMENT_OPEN,
)


class TokenType(Enum):
    """Kinds of token in a template token stream."""

    TAG_OPEN = "tag_open"
    TAG_CLOSE = "tag_close"
    TEXT = "text"
    EXPR_TAG = "expr_tag"
    EXPR_TAG_RENDER = "expr_tag_render"


class AttributeValueKind(Enum):
    """How an attribute value is written in the source."""

    STRING = "string"
    EXPR = "expr"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class AttributeValue:
    """Opaque attribute value: ``"value"``, ``{expr}`` or a bare value."""

    kind: AttributeValueKind
    value: str


@dataclass(frozen=True, slots=True)
class Attribute:
    """A single tag attribute.

    ``name`` is ``None`` for a root (spread) attribute such as
    ``<div {@rest}>``; ``value`` is ``None`` for a valueless attribute such
    as ``disabled``.
    """

    name: str | None
    value: AttributeValue | None = None

    @property
    def is_root(self) -> bool:
        return self.name is None


@dataclass(frozen=True, slots=True)
class Token:
    """Base class for all tokens.

    All tokens track their source location for error reporting.
    """

    lineno: int = field(default=0, kw_only=True)
    col_offset: int = field(default=0, kw_only=True)

    type = None  # overridden per token kind


@dataclass(frozen=True, slots=True)
class TagOpen(Token):
    """Opening tag: ``<div class="x">`` or ``<br />``."""

    name: str
    attributes: Sequence[Attribute] = ()
    self_close: bool = False

    type = TokenType.TAG_OPEN


@dataclass(frozen=True, slots=True)
class TagClose(Token):
    """Closing tag: ``</div>``."""

    name: str

    type = TokenType.TAG_CLOSE


@dataclass(frozen=True, slots=True)
class Text(Token):
    """Raw text between tags.

    ``context`` holds comment markers set by the tokenizer when the text is
    part of an HTML comment that spans other tokens.
    """

    content: str
    context: tuple[str, ...] = ()

    type = TokenType.TEXT

    @property
    def is_comment(self) -> bool:
        return bool(self.context)

    @property
    def opens_comment(self) -> bool:
        """True if a comment is still open once this text ends.

        Text such as ``" --><!-- "`` closes one comment and opens the next,
        so both markers are present and the last delimiter decides.
        """
        if COMMENT_START not in self.context:
            return False
        if COMMENT_END not in self.context:
            return True
        return self.content.rfind(HTML_COMMENT_OPEN) > self.content.rfind(HTML_COMMENT_CLOSE)

    @property
    def is_blank(self) -> bool:
        return not self.content.strip()


@dataclass(frozen=True, slots=True)
class ExprTag(Token):
    """Non-rendering expression tag: ``<% else %>``, ``<% end %>``.

    ``block`` marks branch delimiters of multi-branch constructs, such as
    ``<% {:ok, value} -> %>`` inside a ``case``.
    """

    content: str
    block: bool = False

    type = TokenType.EXPR_TAG


@dataclass(frozen=True, slots=True)
class ExprTagRender(Token):
    """Rendering expression tag: ``<%= @user.name %>``.

    ``block`` marks tags that open a nested body, such as
    ``<%= if @show do %>``.
    """

    content: str
    block: bool = False

    type = TokenType.EXPR_TAG_RENDER
