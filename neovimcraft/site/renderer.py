"""
Static site renderer for neovimcraft.

Renders the plugin directory into static HTML with Jinja2 templates.

Output (relative to the output directory):
    index.html                          listing sorted by stars
    created/index.html                  listing sorted by creation date
    updated/index.html                  listing sorted by last update
    about/index.html                    about page
    plugin/<username>/<repo>/index.html one detail page per plugin

Listing sorts are descending and stable: plugins that tie keep the order of
the persisted mapping.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape

from neovimcraft.config import RENDER_WORKERS, SITE_NAME, SITE_URL, STATIC_DIR
from neovimcraft.dates import format_date, relative_time
from neovimcraft.models.plugin import Plugin
from neovimcraft.models.tag import PluginData, Tag
from neovimcraft.site.plugin_data import derive_from_repository
from neovimcraft.storage.base import PluginRepository


TEMPLATES_DIR = Path(__file__).parent / "templates"


# =============================================================================
# Sort Modes
# =============================================================================

class SortMode(Enum):
    """The three orderings of the listing page."""

    STARS = "stars"
    CREATED = "created"
    UPDATED = "updated"

    @property
    def label(self) -> str:
        return self.value

    @property
    def href(self) -> str:
        """Site URL of the listing page for this mode."""
        return _SORT_HREFS[self]

    @property
    def output_path(self) -> str:
        """File path of the listing page, relative to the output directory."""
        return _SORT_PATHS[self]

    def sort(self, plugins: List[Plugin]) -> List[Plugin]:
        """Return plugins sorted descending by this mode's key (stable)."""
        return sorted(plugins, key=_SORT_KEYS[self], reverse=True)


_SORT_KEYS: Dict[SortMode, Callable[[Plugin], object]] = {
    SortMode.STARS: lambda p: p.stars,
    SortMode.CREATED: lambda p: p.created_sort_key,
    SortMode.UPDATED: lambda p: p.updated_sort_key,
}

_SORT_HREFS = {
    SortMode.STARS: "/",
    SortMode.CREATED: "/created",
    SortMode.UPDATED: "/updated",
}

_SORT_PATHS = {
    SortMode.STARS: "index.html",
    SortMode.CREATED: "created/index.html",
    SortMode.UPDATED: "updated/index.html",
}

ABOUT_PATH = "about/index.html"


def plugin_page_path(plugin: Plugin) -> str:
    """Detail page path, relative to the output directory."""
    return f"plugin/{plugin.username}/{plugin.repo}/index.html"


# =============================================================================
# Render Configuration / Result
# =============================================================================

@dataclass
class RenderConfig:
    """
    Configuration for site rendering.

    Attributes:
        output_dir: Directory the pages are written to.
        max_workers: Parallel page writes.
        site_name: Title used across pages.
        site_url: Canonical site URL for og: tags.
        now: Reference time for "updated X ago". Defaults to render time.
    """
    output_dir: str = STATIC_DIR
    max_workers: int = RENDER_WORKERS
    site_name: str = SITE_NAME
    site_url: str = SITE_URL
    now: Optional[datetime] = None


@dataclass
class RenderResult:
    """
    Result of a site render.

    Attributes:
        output_dir: Directory the pages were written to.
        files_written: Paths of every written page.
        plugins_rendered: Number of plugin detail pages.
        tags_rendered: Number of distinct tags in the sidebar.
    """
    output_dir: str
    files_written: List[str] = field(default_factory=list)
    plugins_rendered: int = 0
    tags_rendered: int = 0

    @property
    def pages_written(self) -> int:
        return len(self.files_written)


# =============================================================================
# Templates
# =============================================================================

def create_environment() -> Environment:
    """Jinja2 environment with the site's filters registered."""
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["format_date"] = format_date
    env.filters["relative_time"] = relative_time
    return env


# =============================================================================
# Site Renderer
# =============================================================================

class SiteRenderer:
    """
    Renders every page of the site from derived plugin data.

    Usage:
        repository = JsonFileRepository()
        renderer = SiteRenderer.from_repository(repository)
        result = renderer.render()
        print(f"Wrote {result.pages_written} pages to {result.output_dir}")
    """

    def __init__(
        self,
        data: PluginData,
        html: Dict[str, str] = None,
        config: RenderConfig = None,
    ):
        """
        Initialize the renderer.

        Args:
            data: Derived plugin data.
            html: Pre-rendered detail HTML keyed by "username/repo".
            config: Render configuration. Defaults to RenderConfig().
        """
        self.data = data
        self.html = html or {}
        self.config = config or RenderConfig()
        self.env = create_environment()

    @classmethod
    def from_repository(
        cls,
        repository: PluginRepository,
        config: RenderConfig = None,
    ) -> "SiteRenderer":
        return cls(
            derive_from_repository(repository),
            repository.get_html(),
            config,
        )

    # -------------------------------------------------------------------------
    # Page builders
    # -------------------------------------------------------------------------

    def _context(self, **kwargs) -> dict:
        context = {
            "site_name": self.config.site_name,
            "site_url": self.config.site_url,
            "now": self.config.now,
        }
        context.update(kwargs)
        return context

    def detail_html(self, plugin: Plugin) -> str:
        """Pre-rendered README fragment for a plugin, or an empty string."""
        return self.html.get(f"{plugin.username}/{plugin.repo}", "")

    def render_search_page(self, mode: SortMode) -> str:
        plugins = mode.sort(self.data.plugins)
        template = self.env.get_template("search.html")
        return template.render(self._context(
            mode=mode,
            sort_modes=list(SortMode),
            plugins=[(plugin, self.data.tags_for(plugin)) for plugin in plugins],
            tags=self.data.tags,
        ))

    def render_about_page(self) -> str:
        template = self.env.get_template("about.html")
        return template.render(self._context())

    def render_plugin_page(self, plugin: Plugin, tags: List[Tag] = None) -> str:
        if tags is None:
            tags = self.data.tags_for(plugin)
        template = self.env.get_template("plugin.html")
        return template.render(self._context(
            plugin=plugin,
            tags=tags,
            html=self.detail_html(plugin),
        ))

    def build_pages(self) -> List[Tuple[str, str]]:
        """
        Build every page in memory.

        Returns:
            List of (relative path, HTML) pairs.
        """
        pages = [
            (mode.output_path, self.render_search_page(mode))
            for mode in SortMode
        ]
        pages.append((ABOUT_PATH, self.render_about_page()))

        for plugin in self.data.plugins:
            pages.append((plugin_page_path(plugin), self.render_plugin_page(plugin)))

        return pages

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def _write_file(self, relative_path: str, content: str) -> Path:
        filepath = Path(self.config.output_dir) / relative_path
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(content, encoding="utf-8")
        return filepath

    def write_pages(self, pages: List[Tuple[str, str]]) -> List[str]:
        """
        Write pages in parallel and wait for all of them.

        Writes are independent and idempotent. The first failed write (in
        page order) propagates.
        """
        if not pages:
            return []

        workers = max(1, min(self.config.max_workers, len(pages)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(self._write_file, path, content)
                for path, content in pages
            ]
            return [str(future.result()) for future in futures]

    def render(self) -> RenderResult:
        """
        Render and write the whole site.

        Returns:
            RenderResult describing the written files.
        """
        files = self.write_pages(self.build_pages())
        return RenderResult(
            output_dir=self.config.output_dir,
            files_written=files,
            plugins_rendered=len(self.data.plugins),
            tags_rendered=len(self.data.tags),
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def render_site(
    repository: PluginRepository,
    output_dir: str = None,
    now: datetime = None,
) -> RenderResult:
    """
    Render the site from a repository.

    Args:
        repository: Source of plugins and detail HTML.
        output_dir: Output directory (default: STATIC_DIR).
        now: Reference time for relative dates (default: now).

    Returns:
        RenderResult describing the written files.
    """
    config = RenderConfig(output_dir=output_dir or STATIC_DIR, now=now)
    return SiteRenderer.from_repository(repository, config).render()
