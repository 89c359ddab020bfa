#!/usr/bin/env python3
"""
neovimcraft - curated Neovim plugin directory, built as a static site.

Command-line entry point for the site tasks:
  - scrape: fetch the curated markdown lists and write data/scrape.json
  - render: render static pages from data/db.json and data/html.json
  - build:  scrape, then clean and re-render
  - clean:  remove generated pages
  - serve:  preview the static site locally

Usage:
    python main.py scrape                 # Scrape configured sources
    python main.py render                 # Render static/ from data/
    python main.py render --clean         # Drop stale pages, then render
    python main.py scrape --dry-run -v    # Scrape without writing
    python main.py serve --port 8000      # Preview static/

Examples:
    # Scrape a local copy of the list
    python main.py scrape --source ./README.md --output /tmp/scrape.json

    # Render into another directory
    python main.py render --output-dir ./public
"""

import argparse
import sys

from neovimcraft import __version__
from neovimcraft.config import (
    PREVIEW_PORT,
    print_config_summary,
    validate_config,
)
from neovimcraft.pipeline import (
    PipelineConfig,
    RenderPipeline,
    ScrapePipeline,
    clean_site,
)


def _output_options() -> argparse.ArgumentParser:
    """
    -v/-q accepted after the subcommand too.

    Defaults are suppressed so a subcommand never resets a flag given
    before it.
    """
    options = argparse.ArgumentParser(add_help=False)
    options.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Show detailed progress and debug info",
    )
    options.add_argument(
        "--quiet", "-q",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Only show errors and final summary",
    )
    return options


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    common = [_output_options()]
    parser = argparse.ArgumentParser(
        prog="neovimcraft",
        description="Scrape the curated plugin list and render the static site.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s scrape                        Scrape configured sources
  %(prog)s scrape --source README.md     Scrape a local markdown file
  %(prog)s render --output-dir public    Render into ./public
  %(prog)s build -v                      Scrape, clean, render; verbose
  %(prog)s clean                         Remove generated pages
  %(prog)s serve --port 8080             Preview the rendered site
        """,
    )

    # Output options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show detailed progress and debug info",
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only show errors and final summary",
    )

    # Info options
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # scrape
    scrape = subparsers.add_parser(
        "scrape", parents=common, help="Extract plugin links from markdown lists"
    )
    scrape.add_argument(
        "--source", "-s",
        dest="sources",
        action="append",
        metavar="URL_OR_PATH",
        help="Markdown source (repeatable; default: MARKDOWN_SOURCES)",
    )
    scrape.add_argument(
        "--output", "-o",
        metavar="PATH",
        help="Scrape output file (default: SCRAPE_FILE)",
    )
    scrape.add_argument(
        "--dry-run", "-n",
        action="store_true",
        help="Fetch and extract but do not write the output file",
    )

    # render
    render = subparsers.add_parser(
        "render", parents=common, help="Render static pages from plugin data"
    )
    _add_render_arguments(render)

    # build
    build = subparsers.add_parser("build", parents=common, help="Clean, scrape, then render")
    build.add_argument("--source", "-s", dest="sources", action="append", metavar="URL_OR_PATH")
    build.add_argument("--output", "-o", metavar="PATH", help="Scrape output file")
    _add_render_arguments(build)
    build.set_defaults(clean=True)

    # clean
    clean = subparsers.add_parser("clean", parents=common, help="Remove generated pages")
    clean.add_argument("--output-dir", metavar="DIR", help="Static output directory")

    # serve
    serve = subparsers.add_parser("serve", parents=common, help="Preview the static site locally")
    serve.add_argument(
        "--port", "-p",
        type=int,
        default=PREVIEW_PORT,
        help=f"Port to listen on (default: {PREVIEW_PORT})",
    )
    serve.add_argument("--output-dir", metavar="DIR", help="Static directory to serve")

    return parser


def _add_render_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--db", metavar="PATH", help="Plugin database (default: DB_FILE)")
    parser.add_argument("--html", metavar="PATH", help="Detail HTML file (default: HTML_FILE)")
    parser.add_argument("--output-dir", metavar="DIR", help="Output directory (default: STATIC_DIR)")
    parser.add_argument(
        "--dry-run", "-n",
        action="store_true",
        help="Render pages in memory but do not write them",
    )
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Remove previously generated pages before writing",
    )


def show_config() -> None:
    """Display current configuration."""
    print("=" * 60)
    print("neovimcraft Configuration")
    print("=" * 60)
    print_config_summary()

    errors = validate_config()
    if errors:
        print("\nConfiguration warnings:")
        for error in errors:
            print(f"  ⚠️  {error}")
    else:
        print("\n✓ Configuration valid")
    print("=" * 60)


def run_command(args, config: PipelineConfig) -> int:
    """Dispatch a parsed command. Errors propagate to main()."""
    if args.command in ("scrape", "build"):
        result = ScrapePipeline(config).run()
        if not args.quiet:
            print(result.to_summary())

    if args.command in ("render", "build"):
        result = RenderPipeline(config).run()
        if not args.quiet:
            print(result.to_summary())

    if args.command == "clean":
        removed = clean_site(config.output_dir)
        if not args.quiet:
            print(f"Removed {len(removed)} generated entries from {config.output_dir}")

    if args.command == "serve":
        from web.app import create_app

        app = create_app(config.output_dir)
        print(f"Serving {config.output_dir} at http://localhost:{args.port}")
        app.run(port=args.port)

    return 0


def main(argv: list = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 = success, 1 = error, 2 = usage).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Handle --show-config
    if args.show_config:
        show_config()
        return 0

    if not args.command:
        parser.print_help()
        return 2

    config = PipelineConfig.from_args(args)

    if not args.quiet:
        print("=" * 60)
        print(f"neovimcraft {args.command}")
        print("=" * 60)

        if config.dry_run:
            print("Mode: DRY RUN (no writes)")

        if config.verbose:
            print("\nConfiguration:")
            print_config_summary()
            print()

    try:
        return run_command(args, config)

    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130
    except Exception as e:
        print(f"\n❌ {args.command.capitalize()} error: {e}")
        if config.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
