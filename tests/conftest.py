"""
Pytest Configuration and Fixtures

This module provides:
- Shared fixtures for all tests
- Test category markers
"""

import json
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Import test configuration
from tests.test_config import CONFIG, TEST_DATA, get_html_records, get_plugin_records


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def fixed_now():
    """Reference time used for relative dates."""
    return datetime(2024, 1, 10, tzinfo=timezone.utc)


@pytest.fixture
def plugin_records():
    """Persisted-shape plugin records."""
    return get_plugin_records()


@pytest.fixture
def html_records():
    return get_html_records()


@pytest.fixture
def plugin_map(plugin_records):
    """Plugin id -> Plugin."""
    from neovimcraft.models.plugin import Plugin

    return {plugin_id: Plugin.from_dict(record) for plugin_id, record in plugin_records.items()}


@pytest.fixture
def memory_repository(plugin_records, html_records):
    """In-memory repository with the sample plugins."""
    from neovimcraft.storage import InMemoryRepository

    return InMemoryRepository(plugin_records, html_records)


@pytest.fixture
def data_files(tmp_path, plugin_records, html_records):
    """db.json and html.json written to a temp directory."""
    db_path = tmp_path / "db.json"
    html_path = tmp_path / "html.json"
    db_path.write_text(json.dumps({"plugins": plugin_records}), encoding="utf-8")
    html_path.write_text(json.dumps({"html": html_records}), encoding="utf-8")
    return db_path, html_path


@pytest.fixture
def markdown_file(tmp_path):
    """The sample awesome-list README on disk."""
    path = tmp_path / "README.md"
    path.write_text(TEST_DATA["awesome_markdown"], encoding="utf-8")
    return path


@pytest.fixture
def temp_output_dir(tmp_path):
    """Provide a temporary output directory."""
    output_dir = tmp_path / "static"
    output_dir.mkdir()
    return output_dir


# =============================================================================
# MARKERS FOR TEST CATEGORIES
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "extraction: Markdown extraction tests"
    )
    config.addinivalue_line(
        "markers", "rendering: Static page rendering tests"
    )
    config.addinivalue_line(
        "markers", "cli_behavior: CLI interface tests"
    )
