# wixmanifest/semver/semver.py
from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["VERSION_RE", "SemVerVersion", "parseSemVerVersion"]



# Loose grammar used by Go's Masterminds/semver v1: minor/patch optional,
# leading zeroes tolerated, dot-separated pre-release and build identifiers.
VERSION_RE = re.compile(
    r"^v?(?P<major>[0-9]+)"
    r"(?:\.(?P<minor>[0-9]+))?"
    r"(?:\.(?P<patch>[0-9]+))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)



@dataclass(frozen=True)
class SemVerVersion:
    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    @property
    def core(self) -> str:
        """Numeric part only, e.g. "1.2.3" for "1.2.3-rc.1+build.5"."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        prerelease = f"-{'.'.join(self.prerelease)}" if self.prerelease else ""
        build = f"+{'.'.join(self.build)}" if self.build else ""
        return f"{self.core}{prerelease}{build}"



def parseSemVerVersion(raw: str) -> SemVerVersion:
    """
    Parse a version string the way wix.json versions have always been read.

        "7"              -> 7.0.0
        "v1.2"           -> 1.2.0
        "01.02.3"        -> 1.2.3
        "1.2.3-rc.01"    -> 1.2.3, prerelease ("rc", "01")
        "1.2.3-beta+001" -> 1.2.3, prerelease ("beta",), build ("001",)

    Surrounding whitespace, a fourth numeric component, empty components
    and empty pre-release/build parts are rejected with ValueError.
    """
    if not isinstance(raw, str):
        raise TypeError(f"Version string must be a string type, got {type(raw).__name__}")

    mtch = VERSION_RE.fullmatch(raw)
    if not mtch:
        raise ValueError(f"Invalid semantic version {raw!r}")

    prereleaseGroup = mtch.group("prerelease")
    buildGroup = mtch.group("build")

    return SemVerVersion(
        major=int(mtch.group("major")),
        minor=int(mtch.group("minor") or 0),
        patch=int(mtch.group("patch") or 0),
        prerelease=tuple(prereleaseGroup.split(".")) if prereleaseGroup is not None else (),
        build=tuple(buildGroup.split(".")) if buildGroup is not None else (),
    )
