"""
Plugin: the enriched, persisted record for a resource.

Plugins are produced by the enrichment step (GitHub API) and stored in
db.json keyed by "username/repo". The core treats them as read-only.

JSON keys are camelCase (openIssues, createdAt, ...) to stay compatible
with the persisted files; attributes are snake_case.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from neovimcraft.dates import EPOCH, parse_iso_datetime


# Python attribute -> persisted JSON key, where they differ
_JSON_KEYS = {
    "open_issues": "openIssues",
    "created_at": "createdAt",
    "updated_at": "updatedAt",
}


@dataclass
class Plugin:
    """
    A plugin with GitHub metadata.

    Attributes:
        username: GitHub account or organization name.
        repo: Repository name.
        id: Canonical key, "username/repo" unless persisted otherwise.
        link: Canonical GitHub URL.
        description: Repository description.
        homepage: Project website (may be empty).
        stars: Stargazer count.
        open_issues: Open issue count.
        subscribers: Watcher count.
        forks: Fork count.
        created_at: ISO-8601 creation timestamp.
        updated_at: ISO-8601 last update timestamp.
        tags: Tag ids in the order they were assigned.
    """

    # Required fields
    username: str
    repo: str

    # Identity, derived when missing
    id: str = ""
    link: str = ""

    # Metadata
    description: str = ""
    homepage: str = ""
    stars: int = 0
    open_issues: int = 0
    subscribers: int = 0
    forks: int = 0
    created_at: str = ""
    updated_at: str = ""
    tags: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.id:
            self.id = f"{self.username}/{self.repo}"
        if not self.link:
            self.link = f"https://github.com/{self.username}/{self.repo}"

    @property
    def created(self) -> Optional[datetime]:
        """Parsed created_at, or None."""
        return parse_iso_datetime(self.created_at)

    @property
    def updated(self) -> Optional[datetime]:
        """Parsed updated_at, or None."""
        return parse_iso_datetime(self.updated_at)

    @property
    def created_sort_key(self) -> datetime:
        return self.created or EPOCH

    @property
    def updated_sort_key(self) -> datetime:
        return self.updated or EPOCH

    def to_dict(self) -> dict:
        """Convert to the persisted JSON shape (camelCase keys)."""
        return {
            "id": self.id,
            "username": self.username,
            "repo": self.repo,
            "link": self.link,
            "description": self.description,
            "homepage": self.homepage,
            "stars": self.stars,
            "openIssues": self.open_issues,
            "subscribers": self.subscribers,
            "forks": self.forks,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Plugin":
        """
        Create a Plugin from a persisted record.

        Accepts camelCase or snake_case keys. Unknown keys are ignored and
        null values fall back to the field defaults.

        Raises:
            KeyError: If username or repo is missing.
        """
        kwargs = {
            "username": data["username"],
            "repo": data["repo"],
        }

        for attr in (
            "id", "link", "description", "homepage", "stars",
            "open_issues", "subscribers", "forks", "created_at", "updated_at",
        ):
            key = _JSON_KEYS.get(attr, attr)
            value = data.get(key, data.get(attr))
            if value is not None:
                kwargs[attr] = value

        kwargs["tags"] = list(data.get("tags") or [])
        return cls(**kwargs)

    def __str__(self) -> str:
        return f"{self.id} ({self.stars} stars)"
