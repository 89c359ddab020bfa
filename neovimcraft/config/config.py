"""
Configuration module for neovimcraft.

Loads environment variables from .env file and exposes them as typed configuration values.
Uses python-dotenv for loading and provides safe defaults where appropriate.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
# The .env file should be in the root directory (parent of neovimcraft/)
_project_root = Path(__file__).parent.parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


# =============================================================================
# Application Environment
# =============================================================================

# Verbose pipeline progress by default (same as --verbose)
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"


# =============================================================================
# Scrape Configuration
# =============================================================================

# Curated markdown lists to scrape, comma-separated
DEFAULT_MARKDOWN_SOURCE = (
    "https://raw.githubusercontent.com/rockerBOO/awesome-neovim/main/README.md"
)
MARKDOWN_SOURCES: list[str] = [
    url.strip()
    for url in os.getenv("MARKDOWN_SOURCES", DEFAULT_MARKDOWN_SOURCE).split(",")
    if url.strip()
]

# HTTP request timeout in seconds
REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))

# Parallel markdown fetches
FETCH_WORKERS: int = int(os.getenv("FETCH_WORKERS", "4"))


# =============================================================================
# Data Files
# =============================================================================

DATA_DIR: str = os.getenv("DATA_DIR", "data")

# Output of the scrape step: {"resources": [...]}
SCRAPE_FILE: str = os.getenv("SCRAPE_FILE", str(Path(DATA_DIR) / "scrape.json"))

# Enriched plugin records: {"plugins": {"username/repo": {...}}}
DB_FILE: str = os.getenv("DB_FILE", str(Path(DATA_DIR) / "db.json"))

# Pre-rendered README fragments: {"html": {"username/repo": "<div>..."}}
HTML_FILE: str = os.getenv("HTML_FILE", str(Path(DATA_DIR) / "html.json"))


# =============================================================================
# Site Output
# =============================================================================

STATIC_DIR: str = os.getenv("STATIC_DIR", "static")

SITE_NAME: str = os.getenv("SITE_NAME", "neovimcraft")
SITE_URL: str = os.getenv("SITE_URL", "https://neovimcraft.com")

# Parallel page writes
RENDER_WORKERS: int = int(os.getenv("RENDER_WORKERS", "8"))

# Port for the local preview server
PREVIEW_PORT: int = int(os.getenv("PREVIEW_PORT", "8000"))


# =============================================================================
# Helper Functions
# =============================================================================

def validate_config() -> list[str]:
    """
    Validate configuration values.

    Returns:
        List of invalid configuration keys (empty if all valid).
    """
    errors = []

    if not MARKDOWN_SOURCES:
        errors.append("MARKDOWN_SOURCES must name at least one source")

    if REQUEST_TIMEOUT < 1:
        errors.append("REQUEST_TIMEOUT must be at least 1 second")

    if FETCH_WORKERS < 1:
        errors.append("FETCH_WORKERS must be at least 1")

    if RENDER_WORKERS < 1:
        errors.append("RENDER_WORKERS must be at least 1")

    if not (0 < PREVIEW_PORT < 65536):
        errors.append(f"PREVIEW_PORT must be a valid port, got {PREVIEW_PORT}")

    return errors


def print_config_summary() -> None:
    """Print a summary of current configuration."""
    print(f"  DEBUG: {DEBUG}")
    print(f"  MARKDOWN_SOURCES: {', '.join(MARKDOWN_SOURCES) or '(none)'}")
    print(f"  REQUEST_TIMEOUT: {REQUEST_TIMEOUT}s")
    print(f"  SCRAPE_FILE: {SCRAPE_FILE}")
    print(f"  DB_FILE: {DB_FILE}")
    print(f"  HTML_FILE: {HTML_FILE}")
    print(f"  STATIC_DIR: {STATIC_DIR}")
    print(f"  SITE_URL: {SITE_URL}")
    print(f"  FETCH_WORKERS: {FETCH_WORKERS}")
    print(f"  RENDER_WORKERS: {RENDER_WORKERS}")
    print(f"  PREVIEW_PORT: {PREVIEW_PORT}")
