from __future__ import annotations
import logging, math, os, sys, urllib.parse
from pathlib import Path
from typing import Optional

from .config import load_settings
from .errors import DownloadError

logger = logging.getLogger(__name__)

# Platforms where installs default to /usr/local/bin
UNIX_PLATFORMS = ("darwin", "dragonfly", "linux", "freebsd", "netbsd", "openbsd")
UNIX_BIN_DIR = Path("/usr/local/bin")

def human_size(n: Optional[int]) -> str:
    if not n or n <= 0: return "?"
    units = ["B","KB","MB","GB","TB"]
    i = min(int(math.floor(math.log(n, 1024))), len(units) - 1)
    return f"{n/(1024**i):.2f} {units[i]}"

def url_leaf_name(u: str) -> str:
    """Last path segment of a URL, percent-decoded."""
    try:
        parsed = urllib.parse.urlsplit(u or "")
    except ValueError as e:
        raise DownloadError(f"Could not parse URL: {e}") from e
    if not parsed.scheme or not parsed.netloc:
        raise DownloadError(f"Could not parse URL: {u!r}")
    return urllib.parse.unquote(parsed.path.rsplit("/", 1)[-1])

def current_platform() -> str:
    return sys.platform

def default_bin_dir() -> Path:
    platform = current_platform()
    logger.info("Platform: %s", platform)
    override = load_settings().bin_dir
    if override is not None:
        return override
    if platform.startswith(UNIX_PLATFORMS):
        return UNIX_BIN_DIR
    return Path(os.getcwd())

def output_path(asset_url: str, rename: Optional[str] = None, out_dir: Optional[str] = None) -> Path:
    directory = Path(out_dir).expanduser() if out_dir and out_dir.strip() else default_bin_dir()
    filename = rename if rename else url_leaf_name(asset_url)
    if not filename:
        raise DownloadError(f"Could not derive a file name from URL: {asset_url}")
    return directory / filename
