"""
Tag and PluginData: aggregates derived from the plugin set on every render.

Tags are never persisted. A tag's count is the number of plugins whose tag
list contains it, and tags with a zero count do not exist.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from neovimcraft.models.plugin import Plugin


def tag_color(count: int) -> str:
    """
    Display color for a tag, by how many plugins carry it.

    Bands are inclusive on their upper bound:
    1 -> pink, 2-3 -> yellow, 4-10 -> orange, 11-15 -> green, >15 -> purple.
    """
    if count == 1:
        return "pink"
    if 1 < count <= 3:
        return "yellow"
    if 3 < count <= 10:
        return "orange"
    if 10 < count <= 15:
        return "green"
    return "purple"


@dataclass
class Tag:
    """A canonical tag with its usage count."""

    id: str
    count: int = 0

    @property
    def color(self) -> str:
        return tag_color(self.count)

    def __str__(self) -> str:
        return f"{self.id} x {self.count}"


@dataclass
class PluginData:
    """
    Unified view over the plugin set used by the renderer.

    Attributes:
        plugins: Plugins in the source mapping's insertion order.
        tags: Tags in first-seen order while scanning plugins.
        tag_db: Tag id -> Tag lookup table.
    """

    plugins: List[Plugin] = field(default_factory=list)
    tags: List[Tag] = field(default_factory=list)
    tag_db: Dict[str, Tag] = field(default_factory=dict)

    def get_tags(self, tag_ids: Iterable[str]) -> List[Tag]:
        """Resolve tag ids, silently dropping ids with no Tag entry."""
        return [self.tag_db[tag_id] for tag_id in tag_ids if tag_id in self.tag_db]

    def tags_for(self, plugin: Plugin) -> List[Tag]:
        return self.get_tags(plugin.tags)
