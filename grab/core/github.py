# grab/core/github.py
from __future__ import annotations
import logging
import time
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from .config import load_settings
from .errors import ApiError, ProjectNotFound, UnreachableError
from .http import SESSION
from .models import Release, Tag

logger = logging.getLogger(__name__)

def project_url(owner: str, repo: str) -> str:
    return f"github.com/{owner}/{repo}"

def _repo_path(owner: str, repo: str) -> str:
    return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"

def _get(path: str, what: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
    settings = load_settings()
    url = f"{settings.api_url}{path}"
    logger.debug("GET %s params=%s", url, params)
    try:
        r = SESSION.get(url, params=params, timeout=settings.timeout)
    except requests.RequestException as e:
        logger.debug("GET %s failed: %s", url, e)
        raise UnreachableError(f"Cannot reach {what}") from e
    logger.debug("GET %s -> %d", url, r.status_code)
    _check_rate_limit(r)
    return r

def _check_rate_limit(r: requests.Response) -> None:
    if r.status_code not in (403, 429):
        return
    if r.headers.get("X-RateLimit-Remaining") != "0":
        return
    reset = r.headers.get("X-RateLimit-Reset", "")
    when = ""
    if reset.isdigit():
        when = " (resets at " + time.strftime("%H:%M:%S", time.localtime(int(reset))) + ")"
    raise ApiError(f"API rate limit exceeded{when}", status=r.status_code)

def _json(r: requests.Response, what: str) -> Any:
    try:
        return r.json()
    except ValueError as e:
        raise ApiError(f"Malformed response from {what}", status=r.status_code) from e

def _unknown(r: requests.Response, what: str) -> ApiError:
    return ApiError(f"Unknown error ({r.status_code}) reaching: {what}", status=r.status_code)

# ────────────────────────── Endpoints ──────────────────────────
def get_repository(owner: str, repo: str) -> Dict[str, Any]:
    what = project_url(owner, repo)
    r = _get(_repo_path(owner, repo), what)
    if r.status_code == 404:
        raise ProjectNotFound(f"Project does not exist: {what}")
    if not r.ok:
        raise _unknown(r, what)
    return _json(r, what)

def get_latest_release(owner: str, repo: str) -> Optional[Release]:
    """Latest published release, or None when the project has none."""
    what = project_url(owner, repo)
    r = _get(f"{_repo_path(owner, repo)}/releases/latest", what)
    if r.status_code == 404:
        return None
    if not r.ok:
        raise _unknown(r, what)
    return Release.from_api(_json(r, what))

def list_tags(owner: str, repo: str) -> List[Tag]:
    what = project_url(owner, repo)
    r = _get(f"{_repo_path(owner, repo)}/tags", what)
    if not r.ok:
        raise _unknown(r, what)
    data = _json(r, what)
    if not isinstance(data, list):
        raise ApiError(f"Malformed tag list from {what}", status=r.status_code)
    return [Tag.from_api(t) for t in data if isinstance(t, dict)]

def get_release_by_tag(owner: str, repo: str, tag: str) -> Optional[Release]:
    what = project_url(owner, repo)
    r = _get(f"{_repo_path(owner, repo)}/releases/tags/{quote(tag, safe='')}", what)
    if r.status_code == 404:
        return None
    if not r.ok:
        raise _unknown(r, what)
    return Release.from_api(_json(r, what))
