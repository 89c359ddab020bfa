"""
Markdown extractor: turns a curated plugin list into Resource records.

Every list item is tagged with the heading in effect above it (any heading
level resets the scope). Only the first inline node of a list item text is
considered, and only github.com links produce a Resource.

Example:
    ## Colorschemes
    - [a/b](https://github.com/a/b) - a nice theme

    -> Resource(username="a", repo="b", tags=["colorschemes"])
"""

import re
from dataclasses import dataclass, replace
from functools import reduce
from typing import Iterable, List, Optional, Tuple

from neovimcraft.exceptions import MalformedLinkError
from neovimcraft.models.resource import Resource
from neovimcraft.scrape.tags import normalize_tag
from neovimcraft.scrape.tokens import (
    BlockToken,
    Heading,
    InlineNode,
    Link,
    ListBlock,
    tokenize,
)


# Sections of the list that never hold plugins
EXCLUDED_HEADINGS = frozenset({"contents", "vim"})

GITHUB_HOST = "github.com"
GITHUB_PREFIX = "https://github.com/"
GITHUB_INSECURE_PREFIX = "http://github.com"

_FRAGMENT = re.compile(r"#.+")


@dataclass(frozen=True)
class ExtractionState:
    """Accumulator carried through the token stream."""
    heading: str = ""
    resources: Tuple[Resource, ...] = ()


def parse_github_link(href: str) -> Tuple[str, str]:
    """
    Split a github.com link into (username, repo).

    The URL fragment, if any, is removed from the repo segment.

    Raises:
        MalformedLinkError: If either segment is missing or empty.
    """
    path = href.replace(GITHUB_PREFIX, "", 1).replace(GITHUB_INSECURE_PREFIX, "", 1)
    segments = path.split("/")

    if len(segments) < 2:
        raise MalformedLinkError(href)

    username = segments[0]
    repo = _FRAGMENT.sub("", segments[1])

    if not username or not repo:
        raise MalformedLinkError(href)

    return username, repo


def resource_from_group(group: Tuple[InlineNode, ...], heading: str) -> Optional[Resource]:
    """
    Build a Resource from the inline nodes of one list item block.

    Returns None when the group is skipped: empty group, excluded heading,
    first node is not a link, or the link is not on github.com.
    """
    if not group:
        return None

    if heading in EXCLUDED_HEADINGS:
        return None

    first = group[0]
    if not isinstance(first, Link) or not first.href:
        return None

    if GITHUB_HOST not in first.href:
        return None

    username, repo = parse_github_link(first.href)
    return Resource(username=username, repo=repo, tags=(normalize_tag(heading),))


def _resources_from_list(block: ListBlock, heading: str) -> List[Resource]:
    resources = []
    for item in block.items:
        for group in item.groups:
            resource = resource_from_group(group, heading)
            if resource is not None:
                resources.append(resource)
    return resources


def _step(state: ExtractionState, token: BlockToken) -> ExtractionState:
    if isinstance(token, Heading):
        return replace(state, heading=token.text.lower())

    if isinstance(token, ListBlock):
        found = _resources_from_list(token, state.heading)
        if found:
            return replace(state, resources=state.resources + tuple(found))

    return state


def extract_from_tokens(tokens: Iterable[BlockToken]) -> List[Resource]:
    """Fold over block tokens in document order, collecting Resources."""
    final = reduce(_step, tokens, ExtractionState())
    return list(final.resources)


def extract_resources(markdown_text: str) -> List[Resource]:
    """
    Extract plugin Resources from a markdown document.

    Args:
        markdown_text: Raw markdown (e.g. an awesome-list README).

    Returns:
        Resources in document order. Duplicates are kept.

    Raises:
        MalformedLinkError: If a github.com link lacks a username/repo path.
    """
    return extract_from_tokens(tokenize(markdown_text))
