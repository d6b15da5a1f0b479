# wixmanifest/core/ids.py
from __future__ import annotations

import uuid
from typing import Protocol, runtime_checkable

import uuid6

from wixmanifest.config import ConfigStore, defaultConfig

__all__ = ["GuidGenerator", "UuidGenerator", "uuidv4", "uuidv7", "makeGuidGenerator"]



def uuidv7(*, prefix: str = "") -> str:
    """Returns a UUIDv7 string (time-ordered), optionally prefixed."""
    return prefix + str(uuid6.uuid7())



def uuidv4(*, prefix: str = "") -> str:
    """Returns a pure random UUIDv4 string, optionally prefixed."""
    return prefix + str(uuid.uuid4())



@runtime_checkable
class GuidGenerator(Protocol):
    """Anything able to hand out a globally unique identifier."""
    def generate(self) -> str: ...



class UuidGenerator:
    """
    Default GUID generator.

    kind="uuid4" gives random GUIDs, kind="uuid7" gives time-ordered ones.
    WiX writes GUIDs upper-case, so uppercase=True matches what the toolset emits.
    """
    _FACTORIES = {"uuid4": uuidv4, "uuid7": uuidv7}

    def __init__(self, kind: str = "uuid4", *, uppercase: bool = True) -> None:
        if kind not in self._FACTORIES:
            raise ValueError(f"Unknown GUID generator kind {kind!r}, expected one of {sorted(self._FACTORIES)}")
        self.kind = kind
        self.uppercase = uppercase

    def generate(self) -> str:
        value = self._FACTORIES[self.kind]()
        return value.upper() if self.uppercase else value

    def __repr__(self) -> str:
        return f"UuidGenerator(kind={self.kind!r}, uppercase={self.uppercase})"



def makeGuidGenerator(config: ConfigStore | None = None) -> UuidGenerator:
    """Builds the generator selected by `guids.generator` / `guids.uppercase`."""
    cfg = config if config is not None else defaultConfig()
    return UuidGenerator(
        str(cfg.get("guids.generator", "uuid4")),
        uppercase=cfg.getBool("guids.uppercase", True),
    )
