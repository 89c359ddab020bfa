"""
neovimcraft pipeline - core execution logic.

Two independent tasks:

    scrape:  Sources → Extract → Sort → data/scrape.json
    render:  db.json + html.json → Derive → Render → static/

Enrichment of scraped resources into plugin records (GitHub API) happens
between the two and is not part of this package.

Design principles:
- Fail fast: any fetch, parse or write error aborts the task
- Idempotency: re-running over the same inputs writes identical files
- Dry-run support: do everything except writing (`--dry-run`)
"""

import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from neovimcraft.config import (
    DB_FILE,
    DEBUG,
    HTML_FILE,
    MARKDOWN_SOURCES,
    SCRAPE_FILE,
    STATIC_DIR,
)
from neovimcraft.models.resource import Resource
from neovimcraft.scrape import extract_resources, sort_resources
from neovimcraft.site import RenderConfig, RenderResult, SiteRenderer
from neovimcraft.sources import fetch_all, source_for
from neovimcraft.storage import JsonFileRepository, PluginRepository, save_resources


# Generated entries under the output directory; static assets are left alone
GENERATED_DIRS = ("plugin", "about", "created", "updated")


# =============================================================================
# Pipeline Configuration
# =============================================================================

@dataclass
class PipelineConfig:
    """
    Configuration for a pipeline run.

    CLI arguments override config file defaults.
    """
    sources: List[str] = field(default_factory=lambda: list(MARKDOWN_SOURCES))
    scrape_file: str = SCRAPE_FILE
    db_file: str = DB_FILE
    html_file: str = HTML_FILE
    output_dir: str = STATIC_DIR
    dry_run: bool = False
    verbose: bool = field(default_factory=lambda: DEBUG)

    # Remove previously generated pages before rendering
    clean: bool = False

    # Reference time for relative dates on rendered pages (None = now)
    now: Optional[datetime] = None

    @classmethod
    def from_args(cls, args) -> "PipelineConfig":
        """Create config from an argparse namespace."""
        config = cls()
        if getattr(args, "sources", None):
            config.sources = list(args.sources)
        if getattr(args, "output", None):
            config.scrape_file = args.output
        if getattr(args, "db", None):
            config.db_file = args.db
        if getattr(args, "html", None):
            config.html_file = args.html
        if getattr(args, "output_dir", None):
            config.output_dir = args.output_dir
        config.dry_run = bool(getattr(args, "dry_run", False))
        config.clean = bool(getattr(args, "clean", False))
        if getattr(args, "verbose", False):
            config.verbose = True
        return config


# =============================================================================
# Pipeline Result Data Structures
# =============================================================================

@dataclass
class SourceResult:
    """Result of extracting from a single source."""
    source_name: str
    resources_found: int


@dataclass
class ScrapeResult:
    """Complete result of a scrape run."""
    started_at: datetime
    finished_at: Optional[datetime] = None
    source_results: List[SourceResult] = field(default_factory=list)
    resources: List[Resource] = field(default_factory=list)
    output_file: Optional[str] = None
    dry_run: bool = False

    @property
    def total_resources(self) -> int:
        return len(self.resources)

    @property
    def duration_seconds(self) -> float:
        if self.finished_at:
            return (self.finished_at - self.started_at).total_seconds()
        return 0.0

    def to_summary(self) -> str:
        """Generate a human-readable summary."""
        lines = [
            "=" * 60,
            "SCRAPE SUMMARY",
            "=" * 60,
            f"Started:  {self.started_at.strftime('%Y-%m-%d %H:%M:%S')}",
            f"Duration: {self.duration_seconds:.2f}s",
            f"Mode:     {'DRY RUN' if self.dry_run else 'LIVE'}",
            "",
            "Sources:",
        ]

        for sr in self.source_results:
            lines.append(f"  ✓ {sr.source_name}: {sr.resources_found} resources")

        lines.extend([
            "",
            f"Total resources: {self.total_resources}",
        ])

        if self.output_file:
            lines.append(f"Output: {self.output_file}")
        elif self.dry_run:
            lines.append("Output: SKIPPED (dry-run mode)")

        lines.append("=" * 60)
        return "\n".join(lines)


@dataclass
class RenderPipelineResult:
    """Complete result of a render run."""
    started_at: datetime
    finished_at: Optional[datetime] = None
    plugins: int = 0
    tags: int = 0
    pages: int = 0
    cleaned: int = 0
    render_result: Optional[RenderResult] = None
    dry_run: bool = False

    @property
    def duration_seconds(self) -> float:
        if self.finished_at:
            return (self.finished_at - self.started_at).total_seconds()
        return 0.0

    def to_summary(self) -> str:
        lines = [
            "=" * 60,
            "RENDER SUMMARY",
            "=" * 60,
            f"Started:  {self.started_at.strftime('%Y-%m-%d %H:%M:%S')}",
            f"Duration: {self.duration_seconds:.2f}s",
            f"Mode:     {'DRY RUN' if self.dry_run else 'LIVE'}",
            "",
            f"Plugins: {self.plugins}",
            f"Tags:    {self.tags}",
            f"Pages:   {self.pages}",
        ]

        if self.cleaned:
            lines.append(f"Cleaned: {self.cleaned} stale entries")

        if self.render_result:
            lines.append(f"Output:  {self.render_result.output_dir}")
        elif self.dry_run:
            lines.append("Output:  SKIPPED (dry-run mode)")

        lines.append("=" * 60)
        return "\n".join(lines)


# =============================================================================
# Scrape Pipeline
# =============================================================================

class ScrapePipeline:
    """
    Fetches the curated lists and writes the sorted resource file.

    Usage:
        pipeline = ScrapePipeline(PipelineConfig(dry_run=True))
        result = pipeline.run()
        print(result.to_summary())
    """

    def __init__(self, config: PipelineConfig = None):
        self.config = config or PipelineConfig()

    def run(self) -> ScrapeResult:
        """
        Execute the scrape.

        Raises:
            requests.RequestException, OSError: A source could not be fetched.
            MalformedLinkError: A list item links to github.com without a repo.
        """
        result = ScrapeResult(started_at=datetime.now(), dry_run=self.config.dry_run)

        sources = [source_for(location) for location in self.config.sources]
        if self.config.verbose:
            print(f"[scrape] Fetching {len(sources)} sources: {[s.name for s in sources]}")

        texts = fetch_all(sources, verbose=self.config.verbose)

        resources: List[Resource] = []
        for source, text in zip(sources, texts):
            found = extract_resources(text)
            result.source_results.append(SourceResult(source.name, len(found)))
            resources.extend(found)
            if self.config.verbose:
                print(f"[scrape] {source.name}: {len(found)} resources")

        result.resources = sort_resources(resources)

        if not self.config.dry_run:
            filepath = save_resources(result.resources, self.config.scrape_file)
            result.output_file = str(filepath)
            if self.config.verbose:
                print(f"[scrape] Wrote {result.total_resources} resources to {filepath}")

        result.finished_at = datetime.now()
        return result


# =============================================================================
# Render Pipeline
# =============================================================================

class RenderPipeline:
    """
    Renders the static site from persisted plugin data.

    Usage:
        pipeline = RenderPipeline(PipelineConfig(output_dir="static"))
        result = pipeline.run()
    """

    def __init__(self, config: PipelineConfig = None, repository: PluginRepository = None):
        """
        Args:
            config: Pipeline configuration. Defaults to PipelineConfig().
            repository: Data source. Defaults to the configured JSON files.
        """
        self.config = config or PipelineConfig()
        self.repository = repository or JsonFileRepository(
            self.config.db_file,
            self.config.html_file,
        )

    def run(self) -> RenderPipelineResult:
        result = RenderPipelineResult(started_at=datetime.now(), dry_run=self.config.dry_run)

        if self.config.verbose:
            print(f"[render] Loading plugins from {self.repository.name}")

        renderer = SiteRenderer.from_repository(
            self.repository,
            RenderConfig(output_dir=self.config.output_dir, now=self.config.now),
        )
        result.plugins = len(renderer.data.plugins)
        result.tags = len(renderer.data.tags)

        pages = renderer.build_pages()
        result.pages = len(pages)

        if not self.config.dry_run:
            if self.config.clean:
                result.cleaned = len(clean_site(self.config.output_dir))
                if self.config.verbose:
                    print(f"[render] Removed {result.cleaned} generated entries")

            files = renderer.write_pages(pages)
            result.render_result = RenderResult(
                output_dir=self.config.output_dir,
                files_written=files,
                plugins_rendered=result.plugins,
                tags_rendered=result.tags,
            )
            if self.config.verbose:
                print(f"[render] Wrote {len(files)} pages to {self.config.output_dir}")

        result.finished_at = datetime.now()
        return result


# =============================================================================
# Convenience Functions
# =============================================================================

def run_scrape(
    sources: List[str] = None,
    scrape_file: str = None,
    dry_run: bool = False,
    verbose: bool = False,
) -> ScrapeResult:
    """Run the scrape task with specified options."""
    config = PipelineConfig(dry_run=dry_run, verbose=verbose)
    if sources:
        config.sources = list(sources)
    if scrape_file:
        config.scrape_file = scrape_file
    return ScrapePipeline(config).run()


def run_render(
    db_file: str = None,
    html_file: str = None,
    output_dir: str = None,
    dry_run: bool = False,
    verbose: bool = False,
    clean: bool = False,
) -> RenderPipelineResult:
    """Run the render task with specified options."""
    config = PipelineConfig(
        db_file=db_file or DB_FILE,
        html_file=html_file or HTML_FILE,
        output_dir=output_dir or STATIC_DIR,
        dry_run=dry_run,
        verbose=verbose,
        clean=clean,
    )
    return RenderPipeline(config).run()


def clean_site(output_dir: str = None) -> List[str]:
    """
    Remove generated pages from the output directory.

    Deletes top-level *.html files and the generated page directories.
    Static assets (css, js, images) are kept.

    Returns:
        Paths that were removed.
    """
    root = Path(output_dir or STATIC_DIR)
    removed: List[str] = []

    if not root.exists():
        return removed

    for page in sorted(root.glob("*.html")):
        page.unlink()
        removed.append(str(page))

    for name in GENERATED_DIRS:
        directory = root / name
        if directory.is_dir():
            shutil.rmtree(directory)
            removed.append(str(directory))

    return removed
