# wixmanifest/manifest/paths.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from wixmanifest.core.errors import PathResolutionError
from wixmanifest.core.logging.context import logContext

if TYPE_CHECKING:
    from .model import WixManifest

logger = logging.getLogger(__name__)

__all__ = ["absolutePath", "relativeTo", "rewriteFilePaths"]



def absolutePath(path: str | Path) -> str:
    """Resolve `path` against the current working directory (no symlink resolution)."""
    try:
        return os.path.abspath(os.fspath(path))
    except (ValueError, TypeError, OSError) as err:
        raise PathResolutionError(f"Cannot make '{path}' absolute: {err}", path=str(path)) from err



def relativeTo(outDir: str, path: str) -> str:
    """
    Absolute `path` rewritten relative to absolute `outDir`.
    Fails when no relative path exists (e.g. different drives on Windows).
    """
    absPath = absolutePath(path)
    try:
        return os.path.relpath(absPath, outDir)
    except ValueError as err:
        raise PathResolutionError(f"Cannot make '{path}' relative to '{outDir}': {err}", path=str(path)) from err



def rewriteFilePaths(manifest: WixManifest, outDir: str | Path, *, transactional: bool = False) -> None:
    """
    Rewrite manifest paths relative to `outDir` (where the rendered WiX sources live).

    Per field:
      • files.items       - mutated in place
      • directories       - left untouched, relative forms derived into relDirs
                            (relDirs is rebuilt on every call)
      • shortcut icons    - mutated in place, empty icons are skipped

    Relative inputs are resolved against the current working directory at call
    time, so calling again from another directory gives different results.

    Raises PathResolutionError naming the offending path. Rewrites done before
    the failure stay applied unless transactional=True.
    """
    out = absolutePath(outDir)
    with logContext(outDir=out):
        _rewrite(manifest, out, transactional=transactional)



def _rewrite(manifest: WixManifest, out: str, *, transactional: bool) -> None:
    if transactional:
        staged = manifest.model_copy(deep=True)
        _rewrite(staged, out, transactional=False)
        manifest.files.items = staged.files.items
        manifest.relDirs = staged.relDirs
        for item, stagedItem in zip(manifest.shortcuts.items, staged.shortcuts.items):
            item.icon = stagedItem.icon
        return

    for idx, file in enumerate(manifest.files.items):
        manifest.files.items[idx] = relativeTo(out, file)

    manifest.relDirs = []
    for directory in manifest.directories:
        manifest.relDirs.append(relativeTo(out, directory))

    for item in manifest.shortcuts.items:
        if item.icon != "":
            item.icon = relativeTo(out, item.icon)

    logger.debug(
        "Rewrote %d file(s), %d dir(s) relative to '%s'",
        len(manifest.files.items), len(manifest.relDirs), out,
    )
