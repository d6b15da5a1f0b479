# wixmanifest/manifest/normalize.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wixmanifest.config import defaultConfig
from wixmanifest.core.errors import VersionFormatError
from wixmanifest.semver.semver import parseSemVerVersion

if TYPE_CHECKING:
    from wixmanifest.config import ConfigStore
    from .model import WixManifest

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_REQUIRED_TAG", "msiVersion", "applyChocoDefaults", "normalize"]

DEFAULT_REQUIRED_TAG = " admin"



def msiVersion(version: str) -> str:
    """
    The Version attribute of a WiX Product accepts x.x.x only, so pre-release
    and build metadata are dropped: "1.2.3-beta+001" -> "1.2.3".
    """
    try:
        parsed = parseSemVerVersion(version)
    except (ValueError, TypeError) as err:
        raise VersionFormatError(f"Invalid version {version!r}: {err}", version=version) from err
    return parsed.core



def applyChocoDefaults(manifest: WixManifest) -> None:
    choco = manifest.choco
    if choco.id == "":
        choco.id = manifest.product
    if choco.title == "":
        choco.title = manifest.product
    if choco.authors == "":
        choco.authors = manifest.company
    if choco.owners == "":
        choco.owners = manifest.company
    if choco.description == "":
        choco.description = manifest.product



def normalize(manifest: WixManifest, *, config: ConfigStore | None = None) -> None:
    """
    Fix up values for WiX/MSI rules and fill Chocolatey defaults.

    versionOk holds the raw version until parsing succeeds, so it keeps the
    raw string when VersionFormatError is raised.

    The required tag is appended on every call; calling twice adds it twice.
    """
    cfg = config if config is not None else defaultConfig()

    manifest.versionOk = manifest.version
    try:
        manifest.versionOk = msiVersion(manifest.version)
    except VersionFormatError:
        logger.warning("Cannot normalize version %r of '%s'", manifest.version, manifest.product)
        raise

    applyChocoDefaults(manifest)

    # Chocolatey validation rejects packages without it.
    manifest.choco.tags += str(cfg.get("choco.requiredTag", DEFAULT_REQUIRED_TAG))
