"""
Deterministic ordering for scraped resources.

The persisted scrape file is sorted by username, then repo, so that re-runs
over the same list produce identical output.
"""

from typing import Iterable, List, Tuple

from neovimcraft.models.resource import Resource


def collation_key(value: str) -> Tuple[str, str]:
    """
    Locale-style comparison key.

    Compares case-insensitively first; on a tie lower case sorts before
    upper case ("abc" < "Abc" < "abd").
    """
    return (value.casefold(), value.swapcase())


def resource_sort_key(resource: Resource) -> Tuple[Tuple[str, str], Tuple[str, str]]:
    return (collation_key(resource.username), collation_key(resource.repo))


def sort_resources(resources: Iterable[Resource]) -> List[Resource]:
    """
    Sort resources by (username, repo) ascending.

    The sort is stable and performs no deduplication: the same repo listed
    under two headings yields two entries with their own tags.
    """
    return sorted(resources, key=resource_sort_key)
