# grab/core/download.py
from __future__ import annotations
from pathlib import Path
from typing import Callable, Optional
import logging
import os

import requests

from .config import load_settings
from .errors import DownloadError, PermissionDeniedError
from .http import SESSION

logger = logging.getLogger(__name__)

ProgressCB = Callable[[int, int], None]  # (downloaded_bytes, total_bytes)

EXECUTABLE_MODE = 0o755

def download_asset(
    url: str,
    out_path: Path,
    on_progress: Optional[ProgressCB] = None,
    chunk_size: Optional[int] = None,
) -> int:
    """
    Core downloader: no UI dependencies.
    - Streams the response body straight into out_path
    - Calls on_progress(downloaded, total) after every chunk; total is 0 when unknown
    - Returns the number of bytes written
    """
    settings = load_settings()
    chunk_size = chunk_size or settings.chunk_size

    logger.info("Downloading release asset: %s", url)
    logger.info("Copying to: %s", out_path.parent)

    try:
        r = SESSION.get(url, stream=True, timeout=settings.timeout)
    except requests.RequestException as e:
        raise DownloadError(f"Could not get remote file: {e}") from e

    with r:
        if not r.ok:
            raise DownloadError(f"Could not get remote file: HTTP {r.status_code} for {url}")
        sz = (r.headers.get("Content-Length") or "").strip()
        total = int(sz) if sz.isascii() and sz.isdigit() else 0

        try:
            f = open(out_path, "wb")
        except OSError as e:
            raise DownloadError(f"Could not create local file: {e}") from e

        downloaded = 0
        with f:
            try:
                for chunk in r.iter_content(chunk_size=chunk_size):
                    if not chunk:
                        continue
                    f.write(chunk)
                    downloaded += len(chunk)
                    if on_progress:
                        on_progress(downloaded, total)
            except (requests.RequestException, OSError) as e:
                raise DownloadError(f"Could not copy local file: {e}") from e

    logger.debug("Download finished: %s (%d bytes)", out_path, downloaded)
    return downloaded

def make_executable(path: Path) -> None:
    try:
        os.chmod(path, EXECUTABLE_MODE)
    except OSError as e:
        logger.debug("chmod %s failed: %s", path, e)
        raise PermissionDeniedError(f"Could not make {path} executable. Try with (sudo)?") from e
