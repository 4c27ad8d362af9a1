"""Attribute rendering and the opening-tag wrap decision."""

from __future__ import annotations

from collections.abc import Sequence

from heexfmt._types import Attribute, AttributeValueKind, TagOpen


def render_attribute(attribute: Attribute) -> str:
    """Render one attribute as source text.

    Root attributes render as ``{expr}``, string values as ``name="value"``,
    expression values as ``name={expr}``, other values as ``name=value`` and
    valueless attributes as the bare name.
    """
    value = attribute.value
    if attribute.is_root:
        return "{" + (value.value if value else "") + "}"
    if value is None:
        return attribute.name or ""
    if value.kind is AttributeValueKind.STRING:
        return f'{attribute.name}="{value.value}"'
    if value.kind is AttributeValueKind.EXPR:
        return f"{attribute.name}={{{value.value}}}"
    return f"{attribute.name}={value.value}"


def same_line_length(tag: TagOpen) -> int:
    """Length of the opening tag if all attributes stay on one line.

    Counts one separating space per attribute, the tag name, and the
    delimiters: ``<`` and ``>`` (2), or ``<`` and `` />`` (4).
    """
    attrs_length = sum(len(render_attribute(attr)) + 1 for attr in tag.attributes)
    return attrs_length + len(tag.name) + (4 if tag.self_close else 2)


def wraps_attributes(tag: TagOpen, line_length: int) -> bool:
    """True if the tag's attributes must go one per line.

    A single attribute never wraps, however long it is.
    """
    if len(tag.attributes) < 2:
        return False
    return same_line_length(tag) > line_length


def render_same_line(attributes: Sequence[Attribute]) -> str:
    """Attributes joined on the opening line, with a leading space."""
    if not attributes:
        return ""
    return " " + " ".join(render_attribute(attr) for attr in attributes)


def render_one_per_line(attributes: Sequence[Attribute], indent: str) -> str:
    """Attributes on their own lines, each prefixed with ``indent``."""
    return "\n".join(f"{indent}{render_attribute(attr)}" for attr in attributes)


def render_tag_open(tag: TagOpen, indent: str, step: str, line_length: int) -> str:
    """Render the opening tag at the given indent.

    Wrapped tags put the closing ``>`` or ``/>`` alone on its own line at the
    tag's indent:

        <link
          rel="icon"
          href={@favicon}
        >
    """
    if wraps_attributes(tag, line_length):
        suffix = "/>" if tag.self_close else ">"
        attrs = render_one_per_line(tag.attributes, indent + step)
        return f"{indent}<{tag.name}\n{attrs}\n{indent}{suffix}"

    suffix = " />" if tag.self_close else ">"
    return f"{indent}<{tag.name}{render_same_line(tag.attributes)}{suffix}"
