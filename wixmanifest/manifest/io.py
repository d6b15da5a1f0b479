# wixmanifest/manifest/io.py
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, TYPE_CHECKING

import json5
from pydantic import ValidationError

from wixmanifest.config import defaultConfig
from wixmanifest.core.errors import ManifestDecodeError, ManifestIOError, ManifestNotFoundError
from wixmanifest.core.logging.context import logContext
from .model import WixManifest

if TYPE_CHECKING:
    from wixmanifest.config import ConfigStore

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_MANIFEST_NAME",
    "REQUIRED_KEYS",
    "manifestPath",
    "dumpManifest",
    "writeManifest",
    "loadManifest",
]

DEFAULT_MANIFEST_NAME = "wix.json"

# Always written, even when empty.
REQUIRED_KEYS: tuple[str, ...] = ("product", "company", "upgrade-code")



def manifestPath(path: str | Path = "", *, config: ConfigStore | None = None) -> Path:
    """`path`, or the configured default file name when it is empty."""
    if path:
        return Path(path)
    cfg = config if config is not None else defaultConfig()
    return Path(str(cfg.get("manifest.defaultFileName", DEFAULT_MANIFEST_NAME)))



def _isEmpty(value: Any) -> bool:
    return value is None or value is False or value == "" or value == [] or value == {}



def _prune(value: Any) -> Any:
    if isinstance(value, dict):
        pruned = {key: _prune(val) for key, val in value.items()}
        return {key: val for key, val in pruned.items() if not _isEmpty(val)}
    if isinstance(value, list):
        # Keep list entries even when every field is empty; only their keys are dropped.
        return [_prune(item) for item in value]
    return value



def dumpManifest(manifest: WixManifest) -> dict[str, Any]:
    """
    The mapping written to wix.json: kebab-case keys, empty values omitted
    except for product, company and upgrade-code. Derived fields never appear.
    """
    full = manifest.model_dump(by_alias=True, mode="json")
    out: dict[str, Any] = {}
    for key, value in full.items():
        value = _prune(value)
        if key in REQUIRED_KEYS or not _isEmpty(value):
            out[key] = value
    return out



def writeManifest(manifest: WixManifest, path: str | Path = "", *, config: ConfigStore | None = None) -> Path:
    """
    Write the manifest to `path` (default wix.json) and return the path written.
    Raises ManifestIOError when serialization or the write fails.
    """
    target = manifestPath(path, config=config)
    with logContext(manifest=str(target)):
        _writeManifest(manifest, target)
    return target



def _writeManifest(manifest: WixManifest, target: Path) -> None:
    try:
        text = json.dumps(dumpManifest(manifest), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as err:
        raise ManifestIOError(f"Failed to serialize manifest for '{target}': {err}") from err

    # Atomic write
    tmpPath = target.with_name(target.name + ".tmp")
    try:
        with open(tmpPath, "w", encoding="utf-8") as fl:
            fl.write(text)
            fl.write("\n")
        os.replace(tmpPath, target)
    except OSError as err:
        logger.warning("Failed to write manifest '%s': %s", target, err)
        try:
            tmpPath.unlink(missing_ok=True)
        except OSError:
            logger.debug("Could not remove temporary file '%s'", tmpPath)
        raise ManifestIOError(f"Failed to write manifest '{target}': {err}") from err

    logger.info("Wrote manifest '%s'", target)



def loadManifest(path: str | Path = "", *, config: ConfigStore | None = None) -> WixManifest:
    """
    Read the manifest from `path` (default wix.json).

    Raises:
        ManifestNotFoundError: the file does not exist
        ManifestIOError: the file cannot be read
        ManifestDecodeError: invalid JSON/JSON5, non-object root, or wrong field types
    """
    source = manifestPath(path, config=config)
    with logContext(manifest=str(source)):
        return _loadManifest(source)



def _loadManifest(source: Path) -> WixManifest:
    try:
        text = source.read_text(encoding="utf-8")
    except FileNotFoundError as err:
        raise ManifestNotFoundError(f"Manifest file '{source}' not found") from err
    except (OSError, UnicodeDecodeError) as err:
        logger.warning("Failed to read manifest '%s': %s", source, err)
        raise ManifestIOError(f"Failed to read manifest '{source}': {err}") from err

    try:
        rawJson = json5.loads(text)
    except ValueError as err:
        raise ManifestDecodeError(f"Manifest file '{source}' is not valid JSON: {err}") from err

    if not isinstance(rawJson, dict):
        raise ManifestDecodeError(f"Manifest file '{source}' is not a JSON object")

    try:
        manifest = WixManifest.model_validate(rawJson)
    except ValidationError as err:
        raise ManifestDecodeError(f"Manifest file '{source}' has an invalid shape: {err}") from err

    logger.debug("Loaded manifest '%s' (product=%r)", source, manifest.product)
    return manifest
