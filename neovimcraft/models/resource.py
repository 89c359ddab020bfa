"""
Resource: a candidate plugin discovered in a curated markdown list.

A Resource is created once per matching list item by the extractor and is
never mutated afterwards. The sorted list of resources is the output of the
scrape step.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Resource:
    """
    A plugin link extracted from markdown, before enrichment.

    Attributes:
        username: GitHub account or organization name.
        repo: Repository name with any URL fragment stripped.
        tags: Normalized tags assigned at extraction time. Not deduplicated.
    """

    username: str
    repo: str
    tags: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "tags", tuple(self.tags))

    @property
    def id(self) -> str:
        """Canonical key used by the persisted plugin records."""
        return f"{self.username}/{self.repo}"

    def to_dict(self) -> dict:
        """Convert to the persisted JSON shape."""
        return {
            "username": self.username,
            "repo": self.repo,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Resource":
        return cls(
            username=data["username"],
            repo=data["repo"],
            tags=tuple(data.get("tags") or ()),
        )

    def __str__(self) -> str:
        return f"{self.id} [{', '.join(self.tags)}]"
