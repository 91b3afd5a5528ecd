from __future__ import annotations
import json
from typing import Any, Dict, List, Optional, Tuple

import pytest
import requests

from grab.core import download, github

API = "https://api.github.com"


class FakeResponse:
    def __init__(self, status_code: int = 200, data: Any = None, body: bytes = b"",
                 headers: Optional[Dict[str, str]] = None):
        self.status_code = status_code
        self._data = data
        self._body = body
        self.headers = dict(headers or {})
        self.closed = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if self._data is None:
            return json.loads(self._body.decode("utf-8"))
        return self._data

    def iter_content(self, chunk_size: int = 1):
        for i in range(0, len(self._body), chunk_size):
            yield self._body[i:i + chunk_size]

    def close(self) -> None:
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class FakeSession:
    """Routes GET urls to canned responses (or exceptions to raise)."""

    def __init__(self):
        self.routes: Dict[str, Any] = {}
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def add(self, url: str, response: Any) -> None:
        self.routes[url] = response

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append((url, kwargs))
        route = self.routes.get(url)
        if route is None:
            raise requests.ConnectionError(f"no route for {url}")
        if isinstance(route, Exception):
            raise route
        return route

    def urls(self) -> List[str]:
        return [u for u, _ in self.calls]


def asset_json(name: str, size: int = 3) -> Dict[str, Any]:
    return {
        "name": name,
        "browser_download_url": f"https://github.com/o/r/releases/download/v1/{name}",
        "size": size,
        "content_type": "application/octet-stream",
    }


def release_json(tag: str = "v1.0.0", assets: Optional[List[Dict[str, Any]]] = None,
                 prerelease: bool = False) -> Dict[str, Any]:
    return {
        "tag_name": tag,
        "name": f"Release {tag}",
        "prerelease": prerelease,
        "html_url": f"https://github.com/o/r/releases/tag/{tag}",
        "assets": assets if assets is not None else [asset_json("tool")],
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GRAB_API_URL", "GRAB_BIN_DIR", "GRAB_TIMEOUT", "GRAB_CHUNK_SIZE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def session(monkeypatch) -> FakeSession:
    s = FakeSession()
    monkeypatch.setattr(github, "SESSION", s)
    monkeypatch.setattr(download, "SESSION", s)
    return s


@pytest.fixture
def repo_ok(session) -> FakeSession:
    session.add(f"{API}/repos/o/r", FakeResponse(200, {"full_name": "o/r"}))
    return session
