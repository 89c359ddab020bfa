"""
neovimcraft - static site generator for a curated Neovim plugin directory.
"""

__version__ = "1.0.0"
