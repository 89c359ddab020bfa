"""
Test Configuration - Externalized Test Data

This file contains all configurable test data, expected values, and test parameters.
Update values here when requirements change - no need to modify test scripts.

Structure:
- CONFIG: General test configuration
- EXPECTED: Expected values for validation tests
- TEST_DATA: Test input data (markdown documents, plugin records, ...)
"""

import copy
from typing import Any, Dict


# =============================================================================
# GENERAL TEST CONFIGURATION
# =============================================================================

CONFIG = {
    # Fixed reference time for relative dates ("3 days ago")
    "now": "2024-01-10T00:00:00Z",

    # Pages every render must produce, relative to the output dir
    "listing_pages": ["index.html", "created/index.html", "updated/index.html"],
    "about_page": "about/index.html",

    # CLI subcommands
    "commands": ["scrape", "render", "build", "clean", "serve"],
}


# =============================================================================
# EXPECTED VALUES FOR VALIDATION
# =============================================================================

EXPECTED = {
    "tags": {
        "overrides": {
            "(requires neovim 0.5)": "neovim-0.5",
            "treesitter supported colorschemes": "treesitter-colorschemes",
        },
        "colors": [
            (1, "pink"),
            (2, "yellow"),
            (3, "yellow"),
            (4, "orange"),
            (10, "orange"),
            (11, "green"),
            (15, "green"),
            (16, "purple"),
            (250, "purple"),
        ],
    },

    "scrape_file": {
        "top_level_key": "resources",
        "indent": 2,
    },
}


# =============================================================================
# TEST DATA
# =============================================================================

TEST_DATA = {
    # One resource under Colorschemes; the Contents section is skipped
    "scenario_markdown": (
        "## Colorschemes\n"
        "- [a/b](https://github.com/a/b)\n"
        "## Contents\n"
        "- [c/d](https://github.com/c/d)\n"
    ),

    # A realistic slice of an awesome-list README
    "awesome_markdown": """# Awesome Neovim

Collections of awesome neovim plugins.

## Contents

- [Plugin Manager](#plugin-manager)
- [Colorscheme](#colorscheme)

## Plugin Manager

- [wbthomason/packer.nvim](https://github.com/wbthomason/packer.nvim) - A use-package inspired plugin manager.
- [savq/paq-nvim](https://github.com/savq/paq-nvim#readme) - Neovim package manager written in Lua.
- [Homepage only](https://example.com/plugin) - Not hosted on GitHub.

### (requires Neovim 0.5)

- [nvim-lua/plenary.nvim](https://github.com/nvim-lua/plenary.nvim) - Lua functions.

## Treesitter Supported Colorschemes

- [folke/tokyonight.nvim](https://github.com/folke/tokyonight.nvim) - A clean dark theme.
- [Allianaab2m/vim-material](https://github.com/Allianaab2m/vim-material) - Material theme.

## Vim

- [junegunn/vim-plug](https://github.com/junegunn/vim-plug) - Vim plugin manager.

## Plugin Manager

- [folke/lazy.nvim](https://github.com/folke/lazy.nvim) - Modern plugin manager.
- [wbthomason/packer.nvim](https://github.com/wbthomason/packer.nvim) - Listed twice.
""",

    # Persisted plugin records (db.json "plugins" section)
    "plugins": {
        "a/b": {
            "id": "a/b",
            "username": "a",
            "repo": "b",
            "link": "https://github.com/a/b",
            "description": "A colorful theme",
            "homepage": "https://a.dev",
            "stars": 10,
            "openIssues": 2,
            "subscribers": 3,
            "forks": 1,
            "createdAt": "2021-03-04T12:00:00Z",
            "updatedAt": "2024-01-07T00:00:00Z",
            "tags": ["colorschemes", "lua"],
        },
        "c/d": {
            "id": "c/d",
            "username": "c",
            "repo": "d",
            "link": "https://github.com/c/d",
            "description": "A lua utility",
            "homepage": "",
            "stars": 50,
            "openIssues": 0,
            "subscribers": 9,
            "forks": 4,
            "createdAt": "2022-06-01T00:00:00Z",
            "updatedAt": "2023-12-01T00:00:00Z",
            "tags": ["lua"],
        },
        "e/f": {
            "id": "e/f",
            "username": "e",
            "repo": "f",
            "link": "https://github.com/e/f",
            "description": "Fuzzy finder",
            "homepage": "",
            "stars": 10,
            "openIssues": 7,
            "subscribers": 1,
            "forks": 0,
            "createdAt": "2023-01-01T00:00:00Z",
            "updatedAt": "2024-01-09T00:00:00Z",
            "tags": ["fuzzy-finder"],
        },
    },

    # Pre-rendered detail HTML ("html" section); e/f intentionally missing
    "html": {
        "a/b": "<div class=\"markdown\"><p>Readme for a/b</p></div>",
        "c/d": "<div class=\"markdown\"><p>Readme for c/d</p></div>",
    },
}


def get_plugin_records() -> Dict[str, Dict[str, Any]]:
    """Return a deep copy of the sample plugin records."""
    return copy.deepcopy(TEST_DATA["plugins"])


def get_html_records() -> Dict[str, str]:
    return dict(TEST_DATA["html"])
