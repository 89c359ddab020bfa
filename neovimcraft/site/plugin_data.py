"""
Plugin data derivation.

Builds the tag index and the unified PluginData view from the persisted
plugin mapping. Rebuilt on every render; nothing here is persisted.
"""

from typing import Dict, Mapping

from neovimcraft.models.plugin import Plugin
from neovimcraft.models.tag import PluginData, Tag
from neovimcraft.storage.base import PluginRepository


def derive_plugin_data(plugin_map: Mapping[str, Plugin]) -> PluginData:
    """
    Derive plugins, tags and the tag lookup table.

    Every (plugin, tag) occurrence counts once: a tag seen for the first time
    is inserted with count 1, later occurrences increment it. Tag ids are used
    as-is (already normalized at scrape time).

    Args:
        plugin_map: Plugin id -> Plugin, in persisted order.

    Returns:
        PluginData with plugins in mapping order and tags in first-seen order.
    """
    plugins = list(plugin_map.values())
    tag_db: Dict[str, Tag] = {}

    for plugin in plugins:
        for tag_id in plugin.tags:
            tag = tag_db.get(tag_id)
            if tag is None:
                tag_db[tag_id] = Tag(id=tag_id, count=1)
            else:
                tag.count += 1

    return PluginData(
        plugins=plugins,
        tags=list(tag_db.values()),
        tag_db=tag_db,
    )


def derive_from_repository(repository: PluginRepository) -> PluginData:
    """Derive PluginData from a repository's plugins."""
    return derive_plugin_data(repository.get_plugins())
