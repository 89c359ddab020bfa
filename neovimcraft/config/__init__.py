"""
Configuration module.

Handles environment variables, data file locations, and site settings.
"""

from neovimcraft.config.config import (
    DEBUG,
    DEFAULT_MARKDOWN_SOURCE,
    MARKDOWN_SOURCES,
    REQUEST_TIMEOUT,
    FETCH_WORKERS,
    DATA_DIR,
    SCRAPE_FILE,
    DB_FILE,
    HTML_FILE,
    STATIC_DIR,
    SITE_NAME,
    SITE_URL,
    RENDER_WORKERS,
    PREVIEW_PORT,
    validate_config,
    print_config_summary,
)

__all__ = [
    "DEBUG",
    "DEFAULT_MARKDOWN_SOURCE",
    "MARKDOWN_SOURCES",
    "REQUEST_TIMEOUT",
    "FETCH_WORKERS",
    "DATA_DIR",
    "SCRAPE_FILE",
    "DB_FILE",
    "HTML_FILE",
    "STATIC_DIR",
    "SITE_NAME",
    "SITE_URL",
    "RENDER_WORKERS",
    "PREVIEW_PORT",
    "validate_config",
    "print_config_summary",
]
