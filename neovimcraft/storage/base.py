"""
Base repository abstraction for neovimcraft.

The renderer never touches data files directly: it reads plugins and
pre-rendered README fragments through a PluginRepository. This allows
swapping the on-disk JSON files for an in-memory set in tests.
"""

from abc import ABC, abstractmethod
from typing import Dict

from neovimcraft.models.plugin import Plugin


class PluginRepository(ABC):
    """
    Read-only access to persisted plugin data.

    Implementations must return plugins in their persisted insertion order;
    the listing pages rely on it to break ties.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return the name of this repository.

        Used for progress output.
        """
        pass

    @abstractmethod
    def get_plugins(self) -> Dict[str, Plugin]:
        """
        Return all plugins keyed by id ("username/repo").
        """
        pass

    @abstractmethod
    def get_html(self) -> Dict[str, str]:
        """
        Return pre-rendered detail HTML keyed by "username/repo".

        Plugins without an entry are rendered with an empty fragment.
        """
        pass

    def get_plugin(self, plugin_id: str):
        """Return a single plugin by id, or None."""
        return self.get_plugins().get(plugin_id)

    def __str__(self) -> str:
        return f"PluginRepository({self.name})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
