"""
Markdown sources module.

Fetchers for the curated plugin lists: remote URLs and local files.
"""

from neovimcraft.sources.base import MarkdownSource
from neovimcraft.sources.url import UrlMarkdownSource
from neovimcraft.sources.file import FileMarkdownSource
from neovimcraft.sources.fetch import fetch_all, source_for

__all__ = [
    "MarkdownSource",
    "UrlMarkdownSource",
    "FileMarkdownSource",
    "fetch_all",
    "source_for",
]
