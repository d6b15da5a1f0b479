# wixmanifest/__init__.py
"""wix.json manifest model for MSI / Chocolatey package builds."""
from __future__ import annotations

__version__ = "0.1.0"
