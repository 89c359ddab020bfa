"""
Storage module.

Reads persisted plugin data and writes the scrape output.
"""

from neovimcraft.storage.base import PluginRepository
from neovimcraft.storage.json_files import (
    JsonFileRepository,
    InMemoryRepository,
    save_resources,
    load_resources,
)

__all__ = [
    "PluginRepository",
    "JsonFileRepository",
    "InMemoryRepository",
    "save_resources",
    "load_resources",
]
