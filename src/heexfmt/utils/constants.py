"""Shared constants for heexfmt.

Tag sets, comment markers and layout defaults used across the renderer.
"""

from __future__ import annotations

# One indentation step.
TAB = "  "

# Opening-tag line length before attributes are split onto their own lines.
DEFAULT_LINE_LENGTH = 98

# Option keys read from the options bag, in priority order.
LINE_LENGTH_OPTIONS: tuple[str, ...] = ("heex_line_length", "line_length")

# Elements that never have a closing tag or children.
# Source: HTML void elements plus the obsolete command/keygen.
VOID_TAGS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "command",
        "keygen",
        "source",
    }
)

# Elements whose content is emitted untouched.
VERBATIM_TAGS: frozenset[str] = frozenset({"script", "style", "code", "pre"})

# Pseudo tag name used for the verbatim mode of an open HTML comment.
COMMENT_MODE = "comment"

# Comment markers carried in a text token's context.
COMMENT_START = "comment_start"
COMMENT_END = "comment_end"

HTML_COMMENT_OPEN = "<!--"
HTML_COMMENT_CLOSE = "-->"

# Expression-tag markers (the keyword between the tag delimiters).
ELSE_MARKERS: frozenset[str] = frozenset({"else"})
END_MARKERS: frozenset[str] = frozenset({"end"})

# Block constructs whose branch delimiters add an extra nesting level.
MULTI_BRANCH_BLOCKS: frozenset[str] = frozenset({"case", "cond"})
