"""
Markdown source read from the local filesystem.
"""

from pathlib import Path

from neovimcraft.sources.base import MarkdownSource


class FileMarkdownSource(MarkdownSource):
    """Reads a UTF-8 markdown file."""

    def __init__(self, path):
        self.path = Path(path)

    @property
    def name(self) -> str:
        return str(self.path)

    def fetch_text(self) -> str:
        return self.path.read_text(encoding="utf-8")
