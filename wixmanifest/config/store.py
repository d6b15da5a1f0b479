# wixmanifest/config/store.py
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .providers import ConfigProvider

__all__ = ["ConfigStore"]

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}



class ConfigStore:
    """
    Read view over an ordered stack of providers.

    Layers are given bottom-up (defaults first). Lookups go top-down and the
    first provider holding a non-None value wins.
    """
    def __init__(self, layers: Iterable[ConfigProvider]) -> None:
        self._layers: list[ConfigProvider] = list(layers)
        if not self._layers:
            raise ValueError("ConfigStore needs at least one provider")

    def withLayer(self, provider: ConfigProvider) -> ConfigStore:
        """Returns a new store with `provider` on top; this store is left untouched."""
        return ConfigStore([*self._layers, provider])

    def get(self, key: str, default: Any = None) -> Any:
        for provider in reversed(self._layers):
            value = provider.get(key)
            if value is not None:
                return value
        return default

    def getBool(self, key: str, default: bool = False) -> bool:
        value = self.get(key, None)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        raise TypeError(f"Config key '{key}' is not a boolean: {value!r}")
