from __future__ import annotations
import logging
from typing import Callable, Optional

from . import github
from .errors import GrabError, NoReleasesError, UsageError
from .models import Project, Release

logger = logging.getLogger(__name__)

ProgressCB = Callable[[str], None]

ERR_NO_RELEASES = "No tags or releases: {}"

def parse_project(text: str) -> Project:
    """Split ``owner/repo`` into a Project; anything else is a usage error."""
    project = (text or "").strip()
    if not project:
        raise UsageError("missing repository (expected owner/repo)")
    parts = project.split("/")
    if len(parts) != 2:
        raise UsageError(f"invalid repository {project!r} (expected owner/repo)")
    owner, repo = parts[0].strip(), parts[1].strip()
    if not owner or not repo:
        raise UsageError(f"invalid repository {project!r} (expected owner/repo)")
    return Project(owner, repo)

def resolve_release(project: Project, progress: Optional[ProgressCB] = None) -> Release:
    owner, repo = project.owner, project.repo

    if progress: progress(f"looking up {project.url}")
    github.get_repository(owner, repo)

    if progress: progress("checking latest release")
    release = github.get_latest_release(owner, repo)
    if release is not None:
        logger.debug("Latest release: %s", release.tag_name)
        return release

    logger.info("No official releases yet. Checking pre-release tags...")
    if progress: progress("checking tags")
    try:
        tags = github.list_tags(owner, repo)
    except GrabError as e:
        raise NoReleasesError(ERR_NO_RELEASES.format(e)) from e
    if not tags:
        raise NoReleasesError(ERR_NO_RELEASES.format(f"{project.url} has no tags"))

    tag = tags[0]
    logger.info("Latest tag: %s (%s)", tag.name, tag.sha)

    if progress: progress(f"fetching release for {tag.name}")
    try:
        release = github.get_release_by_tag(owner, repo, tag.name)
    except GrabError as e:
        raise NoReleasesError(ERR_NO_RELEASES.format(e)) from e
    if release is None:
        raise NoReleasesError(ERR_NO_RELEASES.format(f"tag {tag.name} has no release"))
    return release
