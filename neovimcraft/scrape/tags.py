"""
Tag normalization for headings scraped from the plugin list.
"""

import re

# Headings whose generic normalization reads badly
TAG_OVERRIDES = {
    "(requires neovim 0.5)": "neovim-0.5",
    "treesitter supported colorschemes": "treesitter-colorschemes",
}

_WHITESPACE = re.compile(r"\s")


def normalize_tag(raw: str) -> str:
    """
    Map a raw heading string to a canonical tag id.

    Overrides match the raw string exactly. Otherwise the string is
    lower-cased and every whitespace character becomes one hyphen
    (runs of whitespace are not collapsed).

    Examples:
        >>> normalize_tag("My Cool Heading")
        'my-cool-heading'
        >>> normalize_tag("(requires neovim 0.5)")
        'neovim-0.5'
    """
    if raw in TAG_OVERRIDES:
        return TAG_OVERRIDES[raw]
    return _WHITESPACE.sub("-", raw.lower())
