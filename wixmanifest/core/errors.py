# wixmanifest/core/errors.py
from __future__ import annotations

__all__ = [
    "ManifestError",
    "ManifestIOError",
    "ManifestNotFoundError",
    "ManifestDecodeError",
    "GuidGenerationError",
    "PathResolutionError",
    "VersionFormatError",
]



class ManifestError(Exception):
    """Base class for every error raised by wixmanifest."""
    pass



class ManifestIOError(ManifestError, OSError):
    """Raised when the manifest document cannot be read or written."""
    pass



class ManifestNotFoundError(ManifestIOError, FileNotFoundError):
    """Raised when the manifest document to restore does not exist."""
    pass



class ManifestDecodeError(ManifestError, ValueError):
    """Raised when the manifest document is not valid JSON or has the wrong shape."""
    pass



class GuidGenerationError(ManifestError, RuntimeError):
    """Raised when the identifier generator fails to produce a GUID."""
    pass



class PathResolutionError(ManifestError, ValueError):
    """Raised when a manifest path cannot be made absolute or relative to the output directory."""
    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path



class VersionFormatError(ManifestError, ValueError):
    """Raised when the manifest version is not a semantic version."""
    def __init__(self, message: str, *, version: str) -> None:
        super().__init__(message)
        self.version = version
