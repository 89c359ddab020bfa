"""
Data models module.

Defines data structures for resources, plugins, and derived tags.
"""

from neovimcraft.models.resource import Resource
from neovimcraft.models.plugin import Plugin
from neovimcraft.models.tag import Tag, PluginData, tag_color

__all__ = [
    "Resource",
    "Plugin",
    "Tag",
    "PluginData",
    "tag_color",
]
