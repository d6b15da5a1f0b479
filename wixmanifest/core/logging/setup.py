# wixmanifest/core/logging/setup.py
from __future__ import annotations
import logging
import logging.handlers

from wixmanifest.config import ConfigStore, defaultConfig
from .formatters import DevFormatter, JsonFormatter

__all__ = ["configureLogging"]



def configureLogging(config: ConfigStore | None = None, *, logger: logging.Logger | None = None) -> logging.Logger:
    """
    Install handlers for the wixmanifest logger tree.

    Dev:
      - Console pretty logs (DEBUG)
    Prod:
      - Console INFO
    Both:
      - JSON file log with rotation when `logging.jsonFile` is set

    Only the "wixmanifest" logger is touched unless another one is passed,
    so a host tool keeps control of the root logger.
    """
    cfg = config if config is not None else defaultConfig()
    devMode = cfg.getBool("logging.devModeEnabled", True)
    level = logging.DEBUG if devMode else logging.INFO

    target = logger if logger is not None else logging.getLogger("wixmanifest")
    target.handlers.clear()
    target.setLevel(level)
    target.propagate = False

    consoleHandler = logging.StreamHandler()
    consoleHandler.setLevel(level)
    consoleHandler.setFormatter(DevFormatter())
    target.addHandler(consoleHandler)

    jsonFile = str(cfg.get("logging.jsonFile", "") or "")
    if jsonFile:
        fileHandler = logging.handlers.RotatingFileHandler(
            jsonFile,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        fileHandler.setLevel(level)
        fileHandler.setFormatter(JsonFormatter())
        target.addHandler(fileHandler)

    return target
