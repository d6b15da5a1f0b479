# wixmanifest/manifest/__init__.py
from __future__ import annotations

from .model import (
    ChocoSpec,
    WixEnv,
    WixEnvList,
    WixFiles,
    WixManifest,
    WixShortcut,
    WixShortcuts,
)
from .guids import needsGuids, setGuids
from .io import dumpManifest, loadManifest, writeManifest
from .normalize import normalize
from .paths import rewriteFilePaths

__all__ = [
    "ChocoSpec",
    "WixEnv",
    "WixEnvList",
    "WixFiles",
    "WixManifest",
    "WixShortcut",
    "WixShortcuts",
    "dumpManifest",
    "loadManifest",
    "needsGuids",
    "normalize",
    "rewriteFilePaths",
    "setGuids",
    "writeManifest",
]
