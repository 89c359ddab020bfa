"""
Exception types for neovimcraft.
"""


class NeovimcraftError(Exception):
    """Base class for all neovimcraft errors."""


class MalformedLinkError(NeovimcraftError, ValueError):
    """
    Raised when a github.com link in a plugin list does not have the
    ``username/repo`` shape. Aborts the whole extraction.
    """

    def __init__(self, href: str, reason: str = "missing username or repo segment"):
        self.href = href
        self.reason = reason
        super().__init__(f"Malformed plugin link {href!r}: {reason}")


class RepositoryError(NeovimcraftError, ValueError):
    """Raised when a persisted data file does not have the expected shape."""
