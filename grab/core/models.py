from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List

@dataclass(frozen=True)
class Project:
    owner: str
    repo: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def url(self) -> str:
        return f"github.com/{self.owner}/{self.repo}"

@dataclass
class Asset:
    name: str = ""
    url: str = ""
    size: int = 0
    content_type: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Asset":
        return cls(
            name=data.get("name") or "",
            url=data.get("browser_download_url") or "",
            size=int(data.get("size") or 0),
            content_type=data.get("content_type") or "",
        )

@dataclass
class Release:
    tag_name: str = ""
    name: str = ""
    assets: List[Asset] = field(default_factory=list)
    prerelease: bool = False
    html_url: str = ""

    @property
    def title(self) -> str:
        return self.name or self.tag_name or "unnamed release"

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Release":
        return cls(
            tag_name=data.get("tag_name") or "",
            name=data.get("name") or "",
            assets=[Asset.from_api(a) for a in data.get("assets") or [] if isinstance(a, dict)],
            prerelease=bool(data.get("prerelease")),
            html_url=data.get("html_url") or "",
        )

@dataclass
class Tag:
    name: str = ""
    sha: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Tag":
        commit = data.get("commit") or {}
        return cls(name=data.get("name") or "", sha=commit.get("sha") or "")
