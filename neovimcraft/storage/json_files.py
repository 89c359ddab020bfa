"""
JSON file backed repository and the scrape output file.

=============================================================================
FILE FORMATS
=============================================================================

data/db.json
    {"plugins": {"username/repo": {"username": ..., "repo": ..., "stars": ...,
                                   "openIssues": ..., "createdAt": ..., ...}}}

data/html.json
    {"html": {"username/repo": "<div>rendered README</div>"}}

data/scrape.json
    {"resources": [{"username": ..., "repo": ..., "tags": [...]}]}

=============================================================================
"""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from neovimcraft.config import DB_FILE, HTML_FILE
from neovimcraft.exceptions import RepositoryError
from neovimcraft.models.plugin import Plugin
from neovimcraft.models.resource import Resource
from neovimcraft.storage.base import PluginRepository


def _read_json(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise RepositoryError(f"{path}: expected a JSON object at the top level")
    return data


def _section(data: dict, key: str, path: Path) -> dict:
    section = data.get(key, {})
    if not isinstance(section, dict):
        raise RepositoryError(f"{path}: {key!r} must be an object")
    return section


class JsonFileRepository(PluginRepository):
    """
    Repository reading db.json and html.json.

    Files are read lazily on first access and cached for the lifetime of the
    instance. A missing db file raises FileNotFoundError; a missing html
    file means no plugin has detail HTML.
    """

    def __init__(self, db_path: str = None, html_path: str = None):
        self.db_path = Path(db_path or DB_FILE)
        self.html_path = Path(html_path or HTML_FILE)
        self._plugins: Optional[Dict[str, Plugin]] = None
        self._html: Optional[Dict[str, str]] = None

    @property
    def name(self) -> str:
        return f"json:{self.db_path}"

    def get_plugins(self) -> Dict[str, Plugin]:
        if self._plugins is None:
            data = _read_json(self.db_path)
            records = _section(data, "plugins", self.db_path)
            plugins = {}
            for plugin_id, record in records.items():
                try:
                    plugins[plugin_id] = Plugin.from_dict(record)
                except (KeyError, TypeError) as e:
                    raise RepositoryError(
                        f"{self.db_path}: invalid plugin record {plugin_id!r}: {e}"
                    ) from e
            self._plugins = plugins
        return self._plugins

    def get_html(self) -> Dict[str, str]:
        if self._html is None:
            if not self.html_path.exists():
                self._html = {}
            else:
                data = _read_json(self.html_path)
                self._html = dict(_section(data, "html", self.html_path))
        return self._html


class InMemoryRepository(PluginRepository):
    """
    Repository over in-memory data, for tests and programmatic use.

    Accepts either Plugin instances or persisted-shape dicts.
    """

    def __init__(self, plugins: dict = None, html: Dict[str, str] = None):
        self._plugins: Dict[str, Plugin] = {}
        for plugin_id, plugin in (plugins or {}).items():
            if not isinstance(plugin, Plugin):
                plugin = Plugin.from_dict(plugin)
            self._plugins[plugin_id] = plugin
        self._html = dict(html or {})

    @property
    def name(self) -> str:
        return "memory"

    def get_plugins(self) -> Dict[str, Plugin]:
        return dict(self._plugins)

    def get_html(self) -> Dict[str, str]:
        return dict(self._html)

    def add_plugin(self, plugin: Plugin, html: str = None) -> None:
        self._plugins[plugin.id] = plugin
        if html is not None:
            self._html[plugin.id] = html


# =============================================================================
# Scrape Output
# =============================================================================

def save_resources(resources: Iterable[Resource], path: str) -> Path:
    """
    Write resources as {"resources": [...]} with 2-space indentation.

    Resources are written in the order given; callers sort first.

    Returns:
        Path to the written file.
    """
    filepath = Path(path)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    data = {"resources": [resource.to_dict() for resource in resources]}
    filepath.write_text(json.dumps(data, indent=2), encoding="utf-8")

    return filepath


def load_resources(path: str) -> List[Resource]:
    """Read a scrape file back into Resources."""
    filepath = Path(path)
    data = _read_json(filepath)
    records = data.get("resources", [])
    if not isinstance(records, list):
        raise RepositoryError(f"{filepath}: 'resources' must be a list")
    return [Resource.from_dict(record) for record in records]
