# wixmanifest/manifest/model.py
from __future__ import annotations

import re
from pathlib import Path
from typing import Any, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from . import guids as _guids
from . import normalize as _normalize
from . import paths as _paths

if TYPE_CHECKING:
    from wixmanifest.config import ConfigStore
    from wixmanifest.core.ids import GuidGenerator

__all__ = [
    "toKebab",
    "WixManifest",
    "WixFiles",
    "WixEnvList",
    "WixEnv",
    "WixShortcuts",
    "WixShortcut",
    "ChocoSpec",
]

_UPPER_RE = re.compile(r"(?<!^)(?=[A-Z])")
_WHITESPACE_RE = re.compile(r"\s")



def toKebab(name: str) -> str:
    """upgradeCode -> upgrade-code"""
    return _UPPER_RE.sub("-", name).lower()



class _ManifestModel(BaseModel):
    model_config = ConfigDict(alias_generator=toKebab, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _dropNulls(cls, data: Any) -> Any:
        # Older writers emit null for empty lists/sections; treat it as "absent".
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data



class WixFiles(_ManifestModel):
    guid: str = ""
    # Rewritten in place by rewriteFilePaths().
    items: list[str] = Field(default_factory=list)



class WixEnv(_ManifestModel):
    """A single environment variable; permanent/system hold WiX "yes"/"no" strings."""
    name: str = ""
    value: str = ""
    permanent: str = ""
    system: str = ""
    action: str = ""
    part: str = ""



class WixEnvList(_ManifestModel):
    guid: str = ""
    vars: list[WixEnv] = Field(default_factory=list)



class WixShortcut(_ManifestModel):
    name: str = ""
    description: str = ""
    target: str = ""
    wdir: str = ""
    arguments: str = ""
    # Path to an .ico file, rewritten in place by rewriteFilePaths().
    icon: str = ""

    @field_validator("icon")
    @classmethod
    def _iconHasNoWhitespace(cls, value: str) -> str:
        if _WHITESPACE_RE.search(value):
            raise ValueError(f"Shortcut icon path must not contain whitespace: {value!r}")
        return value



class WixShortcuts(_ManifestModel):
    guid: str = ""
    items: list[WixShortcut] = Field(default_factory=list)



class ChocoSpec(_ManifestModel):
    """Chocolatey (nuget) package metadata. Empty fields are filled by normalize()."""
    id: str = ""
    title: str = ""
    authors: str = ""
    owners: str = ""
    description: str = ""
    projectUrl: str = ""
    tags: str = ""
    licenseUrl: str = ""
    iconUrl: str = ""
    # JSON booleans only; "yes" and 1 are decode errors
    requireLicense: bool = Field(default=False, strict=True)
    # Render-time only, set by the caller and never persisted.
    msiFile: str = Field(default="", exclude=True)
    buildDir: str = Field(default="", exclude=True)
    changeLog: str = Field(default="", exclude=True)



class WixManifest(_ManifestModel):
    """
    Package description read from wix.json.

    Derived fields are never persisted:
      • versionOk - numeric x.y.z form of `version`, set by normalize()
      • relDirs   - `directories` relative to the build output, set by rewriteFilePaths()
    """
    product: str = ""
    company: str = ""
    version: str = ""
    versionOk: str = Field(default="", exclude=True)
    license: str = ""
    upgradeCode: str = ""
    files: WixFiles = Field(default_factory=WixFiles)
    directories: list[str] = Field(default_factory=list)
    relDirs: list[str] = Field(default_factory=list, exclude=True)
    env: WixEnvList = Field(default_factory=WixEnvList)
    shortcuts: WixShortcuts = Field(default_factory=WixShortcuts)
    choco: ChocoSpec = Field(default_factory=ChocoSpec)

    # ----- persistence -----

    @classmethod
    def load(cls, path: str | Path = "", *, config: ConfigStore | None = None) -> WixManifest:
        from .io import loadManifest
        return loadManifest(path, config=config)

    def write(self, path: str | Path = "", *, config: ConfigStore | None = None) -> Path:
        from .io import writeManifest
        return writeManifest(self, path, config=config)

    # ----- guids -----

    def needsGuids(self) -> bool:
        return _guids.needsGuids(self)

    def setGuids(
        self,
        generator: GuidGenerator | None = None,
        *,
        transactional: bool = False,
        config: ConfigStore | None = None,
    ) -> bool:
        return _guids.setGuids(self, generator, transactional=transactional, config=config)

    # ----- render preparation -----

    def rewriteFilePaths(self, outDir: str | Path, *, transactional: bool = False) -> None:
        _paths.rewriteFilePaths(self, outDir, transactional=transactional)

    def normalize(self, *, config: ConfigStore | None = None) -> None:
        _normalize.normalize(self, config=config)
