# wixmanifest/manifest/guids.py
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from wixmanifest.core.errors import GuidGenerationError
from wixmanifest.core.ids import GuidGenerator, makeGuidGenerator

if TYPE_CHECKING:
    from wixmanifest.config import ConfigStore
    from .model import WixManifest

logger = logging.getLogger(__name__)

__all__ = ["needsGuids", "missingGuidSlots", "setGuids"]



def _setUpgradeCode(manifest: WixManifest, value: str) -> None:
    manifest.upgradeCode = value

def _setFilesGuid(manifest: WixManifest, value: str) -> None:
    manifest.files.guid = value

def _setEnvGuid(manifest: WixManifest, value: str) -> None:
    manifest.env.guid = value

def _setShortcutsGuid(manifest: WixManifest, value: str) -> None:
    manifest.shortcuts.guid = value



# (slot name, "is it missing?", setter), in provisioning order
_SLOTS: tuple[tuple[str, Callable[[WixManifest], bool], Callable[[WixManifest, str], None]], ...] = (
    ("upgrade-code", lambda mf: mf.upgradeCode == "", _setUpgradeCode),
    ("files", lambda mf: mf.files.guid == "", _setFilesGuid),
    ("env", lambda mf: mf.env.guid == "" and len(mf.env.vars) > 0, _setEnvGuid),
    ("shortcuts", lambda mf: mf.shortcuts.guid == "" and len(mf.shortcuts.items) > 0, _setShortcutsGuid),
)



def missingGuidSlots(manifest: WixManifest) -> list[str]:
    """Names of the GUID slots setGuids() would fill right now."""
    return [name for name, isMissing, _setter in _SLOTS if isMissing(manifest)]



def needsGuids(manifest: WixManifest) -> bool:
    """
    True when the manifest cannot be rendered yet for lack of GUIDs:
    no upgrade code, no files guid, env vars without env guid,
    or shortcuts without shortcuts guid.
    """
    return any(isMissing(manifest) for _name, isMissing, _setter in _SLOTS)



def _generate(generator: GuidGenerator, slot: str) -> str:
    try:
        value = generator.generate()
    except Exception as err:
        logger.warning("GUID generation failed for '%s': %s", slot, err)
        raise GuidGenerationError(f"Failed to generate GUID for '{slot}': {err}") from err
    if not isinstance(value, str) or not value:
        raise GuidGenerationError(f"GUID generator returned an empty value for '{slot}'")
    return value



def setGuids(
    manifest: WixManifest,
    generator: GuidGenerator | None = None,
    *,
    transactional: bool = False,
    config: ConfigStore | None = None,
) -> bool:
    """
    Fill every missing GUID slot and return True if anything changed.

    Slots already holding a value are never regenerated, so a second call
    is a no-op returning False.

    On GuidGenerationError the slots filled earlier in the same call stay
    filled. With transactional=True every GUID is generated first and
    nothing is assigned unless all of them succeeded.
    """
    if generator is None:
        generator = makeGuidGenerator(config)

    pending = [(name, setter) for name, isMissing, setter in _SLOTS if isMissing(manifest)]
    if not pending:
        return False

    if transactional:
        staged = [(name, setter, _generate(generator, name)) for name, setter in pending]
        for name, setter, value in staged:
            setter(manifest, value)
            logger.debug("Assigned GUID %s to '%s'", value, name)
        return True

    for name, setter in pending:
        value = _generate(generator, name)
        setter(manifest, value)
        logger.debug("Assigned GUID %s to '%s'", value, name)
    return True
