# topmark:header:start
#
#   project      : SymReport
#   file         : markup.py
#   file_relpath : src/symreport/report/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Pure markup rendering helpers for report nodes.

Every report node renders itself to Firehose-style markup text. This module
holds the shared building blocks so node classes only describe *which* tag,
attributes and children they carry.

The load-bearing rule is the omission rule implemented by `join_nonempty`:
children that render to the empty string are dropped from the join instead
of leaving blank lines behind. Combined with `serialize(None) == ""`, optional
substructure never produces empty tags or stray separators.

It is intentionally:
- I/O-free (no printing, no files)
- deterministic (equal inputs always render identically)

Conventions:
- Children are separated by a single ``\n``; no trailing newline is added.
- Attribute values and text content are XML-escaped, line breaks included.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Protocol
from xml.sax.saxutils import escape

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

MARKUP_SEPARATOR: Final[str] = "\n"

# Line breaks are escaped so text never introduces separators of its own
_TEXT_ENTITIES: Final[dict[str, str]] = {"\n": "&#10;", "\r": "&#13;"}
_ATTR_ENTITIES: Final[dict[str, str]] = {**_TEXT_ENTITIES, '"': "&quot;"}


class Markup(Protocol):
    """Structural interface for anything that renders to markup text."""

    def to_markup(self) -> str:
        """Render this node to markup text (no trailing newline)."""
        ...


def serialize(node: Markup | None) -> str:
    """Render an optional report node.

    Args:
        node: The node to render, or ``None`` when the field is absent.

    Returns:
        The node's markup, or an empty string for an absent node.
    """
    if node is None:
        return ""
    return node.to_markup()


def join_nonempty(parts: Iterable[str], sep: str = MARKUP_SEPARATOR) -> str:
    """Join rendered parts, dropping the empty ones.

    Args:
        parts: Rendered fragments in document order.
        sep: Separator placed between non-empty fragments.

    Returns:
        The joined text; empty when every fragment is empty.
    """
    return sep.join(part for part in parts if part)


def escape_text(value: str) -> str:
    """Escape element text content (``&``, ``<``, ``>`` and line breaks)."""
    return escape(value, _TEXT_ENTITIES)


def escape_attr(value: str) -> str:
    """Escape an attribute value for use inside double quotes."""
    return escape(value, _ATTR_ENTITIES)


def _render_attrs(attrs: Sequence[tuple[str, str]]) -> str:
    return "".join(f' {name}="{escape_attr(value)}"' for name, value in attrs)


def empty_element(tag: str, attrs: Sequence[tuple[str, str]] = ()) -> str:
    """Render a self-closing element, e.g. ``<point column="1" line="2"/>``.

    Args:
        tag: Element name.
        attrs: ``(name, value)`` pairs, rendered in the given order.

    Returns:
        The element markup.
    """
    return f"<{tag}{_render_attrs(attrs)}/>"


def text_element(tag: str, text: str) -> str:
    """Render an element wrapping escaped text on a single line."""
    return f"<{tag}>{escape_text(text)}</{tag}>"


def element(
    tag: str,
    children: Iterable[str],
    attrs: Sequence[tuple[str, str]] = (),
) -> str:
    """Render a container element around already-rendered children.

    The opening tag, each non-empty child and the closing tag are placed on
    their own lines. A container without children still renders its opening
    and closing tags (``<results>\\n</results>``).

    Args:
        tag: Element name.
        children: Rendered child fragments in document order; empty ones are dropped.
        attrs: ``(name, value)`` pairs for the opening tag.

    Returns:
        The element markup.
    """
    return join_nonempty([f"<{tag}{_render_attrs(attrs)}>", *children, f"</{tag}>"])
