from __future__ import annotations

import mimetypes
import os
from pathlib import Path

from .logger_config import get_logger, log_operation

logger = get_logger(__name__)

PACKAGE_ASSETS = Path(__file__).resolve().parent.parent / "assets"

CONTENT_TYPES = {
    ".html": "text/html",
    ".js": "application/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
}


class WidgetAssetError(FileNotFoundError):
    """Raised when a widget bundle cannot be located on disk."""

    def __init__(self, message: str, assets_dir: Path, component: str | None = None):
        self.message = message
        self.assets_dir = assets_dir
        self.component = component
        super().__init__(f"{message} (assets_dir={assets_dir}, component={component})")


def assets_dir() -> Path:
    return Path(os.getenv("WIDGET_ASSETS_DIR") or PACKAGE_ASSETS).resolve()


@log_operation("widget_html_load")
def read_widget_html(component: str, directory: Path | None = None) -> str:
    """Load the built HTML for a widget component.

    Looks for ``<component>.html`` first, then the newest hashed build
    (``<component>-<hash>.html``), then the nested ``src/components`` output.
    """

    root = directory or assets_dir()
    if not root.is_dir():
        raise WidgetAssetError("Widget assets directory not found, build the widget first", root, component)

    direct = root / f"{component}.html"
    if direct.is_file():
        return direct.read_text(encoding="utf-8")

    candidates = sorted(path.name for path in root.glob(f"{component}-*.html") if path.is_file())
    if candidates:
        logger.debug("Using versioned widget build", path=candidates[-1])
        return (root / candidates[-1]).read_text(encoding="utf-8")

    nested = root / "src" / "components" / f"{component}.html"
    if nested.is_file():
        return nested.read_text(encoding="utf-8")

    raise WidgetAssetError("Widget HTML not found", root, component)


def content_type_for(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in CONTENT_TYPES:
        return CONTENT_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or "application/octet-stream"
