"""
Typed markdown token model.

The extractor only cares about three kinds of block tokens (headings, lists,
everything else) and two kinds of inline nodes (links and text). This module
parses markdown with mistune and converts its AST into those variants so the
extractor can dispatch on type instead of poking at loosely-shaped dicts.

mistune AST reference (renderer=None):
    {"type": "heading", "attrs": {"level": 2}, "children": [<inline>...]}
    {"type": "list", "children": [{"type": "list_item", "children": [<block>...]}]}
    {"type": "link", "attrs": {"url": "..."}, "children": [<inline>...]}
    {"type": "text", "raw": "..."}
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

import mistune


# =============================================================================
# Inline Nodes
# =============================================================================

@dataclass(frozen=True)
class Link:
    """An inline link. ``href`` is the link target."""
    href: str
    text: str = ""


@dataclass(frozen=True)
class Text:
    """Any non-link inline node, flattened to its text."""
    text: str
    kind: str = "text"


InlineNode = Union[Link, Text]


# =============================================================================
# Block Tokens
# =============================================================================

@dataclass(frozen=True)
class ListItem:
    """
    One bullet of a list.

    ``groups`` holds the inline nodes of each text block inside the item, in
    order. Nested lists do not contribute a group.
    """
    groups: Tuple[Tuple[InlineNode, ...], ...] = ()


@dataclass(frozen=True)
class Heading:
    text: str
    level: int = 1


@dataclass(frozen=True)
class ListBlock:
    items: Tuple[ListItem, ...] = ()


@dataclass(frozen=True)
class Other:
    """Any block the extractor ignores (paragraphs, code, tables...)."""
    kind: str


BlockToken = Union[Heading, ListBlock, Other]


# Blocks inside a list item that carry inline content
_INLINE_BLOCKS = ("block_text", "paragraph", "heading")

# Inline nodes rendered as a space when flattening text
_BREAKS = ("softbreak", "linebreak")

_parse_markdown = mistune.create_markdown(
    renderer=None,
    plugins=["strikethrough", "table", "url"],
)


# =============================================================================
# Conversion
# =============================================================================

def flatten_text(nodes: Iterable[dict]) -> str:
    """Concatenate the visible text of mistune inline nodes."""
    parts: List[str] = []
    for node in nodes:
        if node.get("type") in _BREAKS:
            parts.append(" ")
        elif "children" in node:
            parts.append(flatten_text(node["children"]))
        else:
            parts.append(node.get("raw", ""))
    return "".join(parts)


def _convert_inline(node: dict) -> InlineNode:
    if node.get("type") == "link":
        attrs = node.get("attrs") or {}
        return Link(
            href=attrs.get("url", ""),
            text=flatten_text(node.get("children", [])),
        )
    return Text(text=flatten_text([node]), kind=node.get("type", "text"))


def _convert_list_item(node: dict) -> ListItem:
    groups = tuple(
        tuple(_convert_inline(child) for child in block.get("children", []))
        for block in node.get("children", [])
        if block.get("type") in _INLINE_BLOCKS
    )
    return ListItem(groups=groups)


def convert_block(node: dict) -> BlockToken:
    """Convert one top-level mistune block token."""
    kind = node.get("type", "")

    if kind == "heading":
        attrs = node.get("attrs") or {}
        return Heading(
            text=flatten_text(node.get("children", [])),
            level=attrs.get("level", 1),
        )

    if kind == "list":
        return ListBlock(
            items=tuple(
                _convert_list_item(child)
                for child in node.get("children", [])
                if child.get("type") == "list_item"
            )
        )

    return Other(kind=kind)


def tokenize(markdown_text: str) -> List[BlockToken]:
    """
    Parse markdown into a flat sequence of block tokens, in document order.
    """
    return [convert_block(node) for node in _parse_markdown(markdown_text)]
