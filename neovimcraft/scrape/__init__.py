"""
Scrape module.

Extracts plugin resources from curated markdown lists.
"""

from neovimcraft.scrape.tags import normalize_tag, TAG_OVERRIDES
from neovimcraft.scrape.extractor import (
    EXCLUDED_HEADINGS,
    extract_resources,
    extract_from_tokens,
    parse_github_link,
)
from neovimcraft.scrape.sorter import sort_resources, collation_key

__all__ = [
    "normalize_tag",
    "TAG_OVERRIDES",
    "EXCLUDED_HEADINGS",
    "extract_resources",
    "extract_from_tokens",
    "parse_github_link",
    "sort_resources",
    "collation_key",
]
