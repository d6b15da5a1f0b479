# wixmanifest/core/dictpath.py
from __future__ import annotations
from typing import Any
from collections.abc import Mapping, MutableMapping

__all__ = ["getByPath", "setByPath", "hasPath", "deleteByPath"]



def _splitPath(path: str) -> list[str]:
    """
    Splits a dotted config key into segments.

    Examples:
      - guids.generator      -> ["guids", "generator"]
      - manifest.defaultFileName -> ["manifest", "defaultFileName"]

    Raises ValueError for empty keys and for empty segments ("a..b", ".a", "a.").
    """
    if not isinstance(path, str) or not path:
        raise ValueError("Path must be a non-empty string")
    parts = path.split(".")
    if any(part == "" for part in parts):
        raise ValueError(f"Path '{path}' contains empty segment(s)")
    return parts



def getByPath(obj: Any, path: str, default: Any | None = None) -> Any:
    """
    Returns the value at `path` inside nested mappings, or `default`
    when any hop is missing or is not a mapping. Invalid paths count as missing.
    """
    try:
        parts = _splitPath(path)
    except ValueError:
        return default

    current: Any = obj
    for part in parts:
        if isinstance(current, Mapping) and part in current:
            current = current[part]
            continue
        return default
    return current



def hasPath(obj: Any, path: str) -> bool:
    defaultNeedle = object() # Unique marker
    return getByPath(obj, path, defaultNeedle) is not defaultNeedle



def setByPath(obj: MutableMapping[str, Any], path: str, value: Any, *, createIfMissing: bool = False) -> None:
    """
    Sets `value` at `path`. Intermediate dicts are created only when
    createIfMissing=True, otherwise a missing hop raises KeyError.
    Walking into a non-mapping value raises TypeError.
    """
    parts = _splitPath(path)
    current: Any = obj
    for part in parts[:-1]:
        if not isinstance(current, MutableMapping):
            raise TypeError(f"Cannot descend into '{part}': {type(current).__name__} is not a mutable mapping")
        if part not in current:
            if not createIfMissing:
                raise KeyError(f"path segment '{part}' not found in mapping")
            current[part] = {}
        current = current[part]

    if not isinstance(current, MutableMapping):
        raise TypeError(f"Cannot write to '{parts[-1]}': {type(current).__name__} is not a mutable mapping")
    current[parts[-1]] = value



def deleteByPath(obj: MutableMapping[str, Any], path: str, *, pruneEmptyParents: bool = True) -> bool:
    """
    Deletes the value at `path`. Returns True if something was removed.
    With pruneEmptyParents=True, parents left empty by the delete are removed too.
    """
    parts = _splitPath(path)
    stack: list[tuple[MutableMapping[str, Any], str]] = []
    current: Any = obj
    for part in parts[:-1]:
        if not isinstance(current, MutableMapping) or part not in current:
            return False
        stack.append((current, part))
        current = current[part]

    last = parts[-1]
    if not isinstance(current, MutableMapping) or last not in current:
        return False
    del current[last]

    if pruneEmptyParents:
        while stack:
            parent, key = stack.pop()
            child = parent[key]
            if isinstance(child, MutableMapping) and not child:
                del parent[key]
                continue
            break
    return True
