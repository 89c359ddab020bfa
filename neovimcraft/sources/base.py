"""
Base source abstraction for neovimcraft.

Defines the interface for anything that can supply the markdown text of a
curated plugin list.
"""

from abc import ABC, abstractmethod


class MarkdownSource(ABC):
    """
    Abstract base class for markdown list sources.

    Attributes:
        name: Identifier used in progress output.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a short identifier for this source."""
        pass

    @abstractmethod
    def fetch_text(self) -> str:
        """
        Return the markdown text of this source.

        Errors are not handled here: a failed fetch raises and aborts the
        scrape.
        """
        pass

    def __str__(self) -> str:
        return f"MarkdownSource({self.name})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
