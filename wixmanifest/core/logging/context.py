# wixmanifest/core/logging/context.py
from __future__ import annotations
import contextvars
from collections.abc import Iterator
from contextlib import contextmanager

# Per-call context (manifest path, output dir) attached to every record by the formatters.
_logContextVar: contextvars.ContextVar[dict[str, object] | None] = contextvars.ContextVar("wixmanifest.logctx", default=None)

def setLogContext(**kvs):
    """Set or update per-log context values (manifest, outDir, etc.)."""
    current = dict(_logContextVar.get() or {}) # use copy
    for key, value in kvs.items():
        if value is not None:
            current[key] = value
    _logContextVar.set(current)

def clearLogContext():
    _logContextVar.set(None)

def getLogContext():
    """Return current context dict or None."""
    return _logContextVar.get()

@contextmanager
def logContext(**kvs) -> Iterator[None]:
    """setLogContext() for the duration of the block; the previous context is restored on exit."""
    token = _logContextVar.set(_logContextVar.get())
    setLogContext(**kvs)
    try:
        yield
    finally:
        _logContextVar.reset(token)
