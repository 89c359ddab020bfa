"""
Tests for the scrape and render pipelines.
"""

import argparse
import json
from unittest.mock import patch

import pytest

from neovimcraft.exceptions import MalformedLinkError
from neovimcraft.pipeline import (
    GENERATED_DIRS,
    PipelineConfig,
    RenderPipeline,
    ScrapePipeline,
    clean_site,
    run_render,
    run_scrape,
)
from neovimcraft.storage import InMemoryRepository
from tests.test_config import CONFIG


# =============================================================================
# Test Pipeline Configuration
# =============================================================================

class TestPipelineConfig:

    def test_defaults_come_from_config(self):
        from neovimcraft.config import MARKDOWN_SOURCES, SCRAPE_FILE, STATIC_DIR

        config = PipelineConfig()
        assert config.sources == MARKDOWN_SOURCES
        assert config.scrape_file == SCRAPE_FILE
        assert config.output_dir == STATIC_DIR
        assert config.dry_run is False

    def test_from_args_overrides(self):
        args = argparse.Namespace(
            sources=["README.md"],
            output="out.json",
            db="db.json",
            html="html.json",
            output_dir="public",
            dry_run=True,
            verbose=True,
            clean=True,
        )
        config = PipelineConfig.from_args(args)

        assert config.sources == ["README.md"]
        assert config.scrape_file == "out.json"
        assert config.db_file == "db.json"
        assert config.html_file == "html.json"
        assert config.output_dir == "public"
        assert config.dry_run is True
        assert config.verbose is True
        assert config.clean is True

    def test_from_args_missing_attributes_keep_defaults(self):
        config = PipelineConfig.from_args(argparse.Namespace(output_dir=None))
        assert config.output_dir == PipelineConfig().output_dir
        assert config.dry_run is False
        assert config.clean is False

    def test_debug_setting_makes_runs_verbose(self):
        with patch("neovimcraft.pipeline.DEBUG", True):
            assert PipelineConfig().verbose is True
            assert PipelineConfig.from_args(argparse.Namespace(verbose=False)).verbose is True

    def test_verbose_off_by_default(self):
        with patch("neovimcraft.pipeline.DEBUG", False):
            assert PipelineConfig().verbose is False


# =============================================================================
# Test Scrape Pipeline
# =============================================================================

class TestScrapePipeline:

    def test_writes_sorted_resources(self, markdown_file, tmp_path):
        scrape_file = tmp_path / "data" / "scrape.json"
        config = PipelineConfig(sources=[str(markdown_file)], scrape_file=str(scrape_file))

        result = ScrapePipeline(config).run()

        assert result.output_file == str(scrape_file)
        data = json.loads(scrape_file.read_text(encoding="utf-8"))
        ids = [f"{r['username']}/{r['repo']}" for r in data["resources"]]
        assert ids[0] == "Allianaab2m/vim-material"
        assert ids.count("wbthomason/packer.nvim") == 2
        assert len(ids) == result.total_resources == 7

    def test_sources_are_concatenated(self, markdown_file, tmp_path):
        config = PipelineConfig(
            sources=[str(markdown_file), str(markdown_file)],
            scrape_file=str(tmp_path / "scrape.json"),
        )
        result = ScrapePipeline(config).run()

        assert [sr.resources_found for sr in result.source_results] == [7, 7]
        assert result.total_resources == 14

    def test_dry_run_writes_nothing(self, markdown_file, tmp_path):
        scrape_file = tmp_path / "scrape.json"
        config = PipelineConfig(
            sources=[str(markdown_file)],
            scrape_file=str(scrape_file),
            dry_run=True,
        )
        result = ScrapePipeline(config).run()

        assert not scrape_file.exists()
        assert result.output_file is None
        assert "SKIPPED (dry-run mode)" in result.to_summary()

    def test_missing_source_aborts(self, tmp_path):
        scrape_file = tmp_path / "scrape.json"
        config = PipelineConfig(
            sources=[str(tmp_path / "missing.md")],
            scrape_file=str(scrape_file),
        )
        with pytest.raises(FileNotFoundError):
            ScrapePipeline(config).run()
        assert not scrape_file.exists()

    def test_malformed_link_aborts(self, tmp_path):
        source = tmp_path / "README.md"
        source.write_text("## Lua\n\n- [broken](https://github.com/solo)\n", encoding="utf-8")
        config = PipelineConfig(sources=[str(source)], scrape_file=str(tmp_path / "s.json"))
        with pytest.raises(MalformedLinkError):
            ScrapePipeline(config).run()

    def test_verbose_progress(self, markdown_file, tmp_path, capsys):
        config = PipelineConfig(
            sources=[str(markdown_file)],
            scrape_file=str(tmp_path / "scrape.json"),
            verbose=True,
        )
        ScrapePipeline(config).run()
        out = capsys.readouterr().out
        assert "[scrape] Fetching 1 sources" in out
        assert "7 resources" in out

    def test_run_scrape(self, markdown_file, tmp_path):
        result = run_scrape(sources=[str(markdown_file)], scrape_file=str(tmp_path / "s.json"))
        assert (tmp_path / "s.json").is_file()
        assert "Total resources: 7" in result.to_summary()


# =============================================================================
# Test Render Pipeline
# =============================================================================

class TestRenderPipeline:

    def test_renders_from_repository(self, memory_repository, temp_output_dir, fixed_now):
        config = PipelineConfig(output_dir=str(temp_output_dir), now=fixed_now)
        result = RenderPipeline(config, memory_repository).run()

        assert result.plugins == 3
        assert result.tags == 3
        assert result.pages == 7
        for page in CONFIG["listing_pages"] + [CONFIG["about_page"]]:
            assert (temp_output_dir / page).is_file()
        assert len(result.render_result.files_written) == 7

    def test_reads_json_files_by_default(self, data_files, temp_output_dir):
        db_path, html_path = data_files
        result = run_render(
            db_file=str(db_path),
            html_file=str(html_path),
            output_dir=str(temp_output_dir),
        )
        page = temp_output_dir / "plugin" / "a" / "b" / "index.html"
        assert "Readme for a/b" in page.read_text(encoding="utf-8")
        assert result.render_result.output_dir == str(temp_output_dir)

    def test_dry_run_writes_nothing(self, memory_repository, temp_output_dir):
        config = PipelineConfig(output_dir=str(temp_output_dir), dry_run=True)
        result = RenderPipeline(config, memory_repository).run()

        assert result.pages == 7
        assert result.render_result is None
        assert list(temp_output_dir.iterdir()) == []

    def test_missing_db_aborts(self, tmp_path, temp_output_dir):
        with pytest.raises(FileNotFoundError):
            run_render(db_file=str(tmp_path / "missing.json"), output_dir=str(temp_output_dir))

    def test_summary(self, memory_repository, temp_output_dir):
        config = PipelineConfig(output_dir=str(temp_output_dir))
        summary = RenderPipeline(config, memory_repository).run().to_summary()
        assert "RENDER SUMMARY" in summary
        assert "Pages:   7" in summary

    def test_clean_render_drops_stale_plugin_pages(self, plugin_records, temp_output_dir):
        full = InMemoryRepository(plugin_records)
        shrunk = InMemoryRepository({"a/b": plugin_records["a/b"]})
        (temp_output_dir / "main.css").write_text("body {}")

        RenderPipeline(PipelineConfig(output_dir=str(temp_output_dir)), full).run()
        config = PipelineConfig(output_dir=str(temp_output_dir), clean=True)
        result = RenderPipeline(config, shrunk).run()

        assert result.cleaned > 0
        assert "stale entries" in result.to_summary()
        assert (temp_output_dir / "plugin" / "a" / "b" / "index.html").is_file()
        assert not (temp_output_dir / "plugin" / "c" / "d").exists()
        assert (temp_output_dir / "main.css").is_file()

    def test_clean_skipped_on_dry_run(self, plugin_records, temp_output_dir):
        RenderPipeline(PipelineConfig(output_dir=str(temp_output_dir)), InMemoryRepository(plugin_records)).run()
        config = PipelineConfig(output_dir=str(temp_output_dir), clean=True, dry_run=True)
        result = RenderPipeline(config, InMemoryRepository({})).run()

        assert result.cleaned == 0
        assert (temp_output_dir / "plugin" / "c" / "d" / "index.html").is_file()


# =============================================================================
# Test Clean
# =============================================================================

class TestCleanSite:

    def test_removes_generated_pages_and_keeps_assets(self, memory_repository, temp_output_dir):
        (temp_output_dir / "main.css").write_text("body {}")
        RenderPipeline(PipelineConfig(output_dir=str(temp_output_dir)), memory_repository).run()

        removed = clean_site(str(temp_output_dir))

        assert removed
        assert not (temp_output_dir / "index.html").exists()
        for name in GENERATED_DIRS:
            assert not (temp_output_dir / name).exists()
        assert (temp_output_dir / "main.css").is_file()

    def test_missing_directory(self, tmp_path):
        assert clean_site(str(tmp_path / "nope")) == []
