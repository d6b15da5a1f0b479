# wixmanifest/config/__init__.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
from collections.abc import Mapping

from .providers import ConfigProvider, DefaultsProvider, FileProvider, OverrideProvider
from .store import ConfigStore

__all__ = [
    "ConfigProvider",
    "ConfigStore",
    "DefaultsProvider",
    "FileProvider",
    "OverrideProvider",
    "DEFAULTS_PATH",
    "defaultConfig",
    "makeConfig",
]

DEFAULTS_PATH = Path(__file__).with_name("defaults.json5")



@lru_cache(maxsize=1)
def _shippedDefaults() -> DefaultsProvider:
    return DefaultsProvider(path=DEFAULTS_PATH)



def defaultConfig() -> ConfigStore:
    """Store over the shipped defaults only."""
    return ConfigStore([_shippedDefaults()])



def makeConfig(overrides: Mapping[str, Any] | None = None, *, userFile: Path | str | None = None) -> ConfigStore:
    """
    Builds the usual stack: shipped defaults, then an optional user file,
    then in-memory overrides on top.
    """
    layers: list[ConfigProvider] = [_shippedDefaults()]
    if userFile is not None:
        layers.append(FileProvider(userFile, readOnly=True))
    layers.append(OverrideProvider(overrides))
    return ConfigStore(layers)
