"""Rendering state threaded through the token fold.

Every step of the fold returns a new RenderState; nothing is mutated in
place, so a state can be kept and compared while debugging without
worrying about aliasing.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from heexfmt._types import Token


@dataclass(frozen=True, slots=True)
class Fragment:
    """One emitted piece of output, linked to everything emitted before it.

    The buffer is a persistent chain built by prepending, so emitting is
    O(1) and older states stay valid. ``opened_tag`` names the element a
    fragment opened; tag-close decisions walk back to it.
    """

    text: str
    previous: Fragment | None = None
    opened_tag: str | None = None


@dataclass(frozen=True, slots=True)
class RenderState:
    """Per-format state.

    Attributes:
        buffer: Most recently emitted fragment (head of the chain)
        indentation: Current indentation level, never negative
        verbatim_tag: Tag whose content is being passed through untouched,
            or None in normal mode
        previous_token: Last significant token (blank text is skipped)
        block_stack: One entry per open block-opening expression tag; an
            entry holds the construct kind recorded by its first branch
            delimiter, or "" when it has none
    """

    buffer: Fragment | None = None
    indentation: int = 0
    verbatim_tag: str | None = None
    previous_token: Token | None = None
    block_stack: tuple[str, ...] = ()

    @property
    def is_verbatim(self) -> bool:
        return self.verbatim_tag is not None

    @property
    def block_kind(self) -> str | None:
        """Kind of the innermost open block, if one was recorded."""
        if self.block_stack and self.block_stack[-1]:
            return self.block_stack[-1]
        return None

    def emit(self, text: str, *, opened_tag: str | None = None, **changes: object) -> RenderState:
        """Append text to the buffer and apply field changes in one step."""
        if "indentation" in changes:
            changes["indentation"] = max(0, changes["indentation"])  # type: ignore[call-overload]
        return replace(
            self,
            buffer=Fragment(text, self.buffer, opened_tag),
            **changes,  # type: ignore[arg-type]
        )

    def evolve(self, **changes: object) -> RenderState:
        return replace(self, **changes)  # type: ignore[arg-type]

    def fragments(self) -> Iterator[Fragment]:
        """Emitted fragments, most recent first."""
        fragment = self.buffer
        while fragment is not None:
            yield fragment
            fragment = fragment.previous

    def push_block(self) -> tuple[str, ...]:
        return (*self.block_stack, "")

    def pop_block(self) -> tuple[str, ...]:
        return self.block_stack[:-1]

    def mark_block(self, kind: str) -> tuple[str, ...]:
        """Record the kind of the innermost open block."""
        if not self.block_stack:
            return (kind,)
        return (*self.block_stack[:-1], kind)


def finalize(state: RenderState) -> str:
    """Join the buffer oldest-first and end it with exactly one newline."""
    texts = [fragment.text for fragment in state.fragments()]
    texts.reverse()
    return "".join(texts).rstrip("\n") + "\n"
