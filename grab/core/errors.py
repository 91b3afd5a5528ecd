# grab/core/errors.py
from __future__ import annotations


class GrabError(Exception):
    """Base class for every failure the CLI reports as ``Error: <message>``."""


class UsageError(GrabError):
    pass


class UnreachableError(GrabError):
    pass


class ProjectNotFound(GrabError):
    pass


class ApiError(GrabError):
    def __init__(self, message: str, status: int = 0):
        super().__init__(message)
        self.status = status


class NoReleasesError(GrabError):
    pass


class NoAssetsError(GrabError):
    pass


class SelectionError(GrabError):
    pass


class DownloadError(GrabError):
    pass


class PermissionDeniedError(GrabError):
    pass
