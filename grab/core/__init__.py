# grab/core/__init__.py
from .config import Settings, load_settings
from .download import download_asset, make_executable
from .errors import (
    ApiError, DownloadError, GrabError, NoAssetsError, NoReleasesError,
    PermissionDeniedError, ProjectNotFound, SelectionError, UnreachableError, UsageError,
)
from .http import SESSION
from .models import Asset, Project, Release, Tag
from .resolve import parse_project, resolve_release
from .utils import default_bin_dir, human_size, output_path, url_leaf_name

__all__ = [
    "Settings", "load_settings",
    "download_asset", "make_executable",
    "ApiError", "DownloadError", "GrabError", "NoAssetsError", "NoReleasesError",
    "PermissionDeniedError", "ProjectNotFound", "SelectionError", "UnreachableError", "UsageError",
    "SESSION",
    "Asset", "Project", "Release", "Tag",
    "parse_project", "resolve_release",
    "default_bin_dir", "human_size", "output_path", "url_leaf_name",
    "setup_logging",
]

# ---- simple logging toggle for the package ----
import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Route log records through the same rich console as spinners and progress bars."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
    )
    # quiet down noisy deps
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
