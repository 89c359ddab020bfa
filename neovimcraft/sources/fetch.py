"""
Parallel fetching of markdown sources.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

from neovimcraft.config import FETCH_WORKERS
from neovimcraft.sources.base import MarkdownSource
from neovimcraft.sources.file import FileMarkdownSource
from neovimcraft.sources.url import UrlMarkdownSource


def source_for(location: str) -> MarkdownSource:
    """Build a source from a URL or a file path."""
    if location.startswith(("http://", "https://")):
        return UrlMarkdownSource(location)
    return FileMarkdownSource(location)


def fetch_all(
    sources: Sequence[MarkdownSource],
    max_workers: int = None,
    verbose: bool = False,
) -> List[str]:
    """
    Fetch every source in parallel and wait for all of them.

    Fetches are independent; results come back in the order of ``sources``.

    Raises:
        Exception: The first failing fetch (in source order) propagates.
    """
    if not sources:
        return []

    workers = min(max_workers or FETCH_WORKERS, len(sources))

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(source.fetch_text) for source in sources]
        texts = []
        for source, future in zip(sources, futures):
            text = future.result()
            if verbose:
                print(f"[source:{source.name}] Fetched {len(text)} characters")
            texts.append(text)

    return texts
