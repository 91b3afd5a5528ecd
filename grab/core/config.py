# grab/core/config.py
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# ---- defaults ----------------------------------------------------------------
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30
DEFAULT_CHUNK_SIZE = 128 * 1024

# ---- environment -------------------------------------------------------------
# Every setting can be overridden from the environment:
#   GRAB_API_URL=<API base, e.g. a GitHub Enterprise host>
#   GRAB_BIN_DIR=<directory used when -p is not given>
#   GRAB_TIMEOUT=<seconds per request>
#   GRAB_CHUNK_SIZE=<download chunk size in bytes>

@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    bin_dir: Optional[Path] = None
    timeout: int = DEFAULT_TIMEOUT
    chunk_size: int = DEFAULT_CHUNK_SIZE

def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer), using %d", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r (must be positive), using %d", name, raw, default)
        return default
    return value

def load_settings() -> Settings:
    api_url = os.environ.get("GRAB_API_URL", "").strip().rstrip("/") or DEFAULT_API_URL
    bin_dir = os.environ.get("GRAB_BIN_DIR", "").strip()
    return Settings(
        api_url=api_url,
        bin_dir=Path(bin_dir).expanduser() if bin_dir else None,
        timeout=_env_int("GRAB_TIMEOUT", DEFAULT_TIMEOUT),
        chunk_size=_env_int("GRAB_CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
    )
