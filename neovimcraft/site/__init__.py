"""
Site module.

Derives plugin/tag data and renders the static HTML pages.
"""

from neovimcraft.site.plugin_data import derive_plugin_data, derive_from_repository
from neovimcraft.site.renderer import (
    SiteRenderer,
    SortMode,
    RenderConfig,
    RenderResult,
    plugin_page_path,
    render_site,
)

__all__ = [
    "derive_plugin_data",
    "derive_from_repository",
    "SiteRenderer",
    "SortMode",
    "RenderConfig",
    "RenderResult",
    "plugin_page_path",
    "render_site",
]
