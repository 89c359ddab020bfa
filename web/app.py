"""
neovimcraft - local preview server.

A small Flask app serving the rendered static directory the way the
production host does: "/created" serves "created/index.html".

Run with: python main.py serve
Or: python -m web.app
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from flask import Flask, abort, send_from_directory

from neovimcraft.config import PREVIEW_PORT, STATIC_DIR


def resolve_page(root: Path, path: str):
    """
    Map a request path to a file under root.

    Returns:
        Path relative to root, or None if nothing matches.
    """
    root = root.resolve()
    candidate = (root / path).resolve() if path else root

    # Never serve outside the static directory
    if candidate != root and root not in candidate.parents:
        return None

    if candidate.is_file():
        return candidate.relative_to(root)

    index = candidate / "index.html"
    if index.is_file():
        return index.relative_to(root)

    return None


def create_app(static_dir: str = None) -> Flask:
    """
    Create the preview app.

    Args:
        static_dir: Directory holding the rendered site. Defaults to STATIC_DIR.
    """
    root = Path(static_dir or STATIC_DIR)
    app = Flask(__name__, static_folder=None)
    app.config["SITE_ROOT"] = str(root)

    @app.route("/", defaults={"path": ""})
    @app.route("/<path:path>")
    def page(path):
        """Serve a file, or the index.html of a directory."""
        site_root = Path(app.config["SITE_ROOT"])
        relative = resolve_page(site_root, path.strip("/"))
        if relative is None:
            abort(404)
        return send_from_directory(site_root.resolve(), relative.as_posix())

    return app


app = create_app()


if __name__ == "__main__":
    print(f"Serving {STATIC_DIR} at http://localhost:{PREVIEW_PORT}")
    app.run(port=PREVIEW_PORT, debug=True)
