import itertools
import sys
from pathlib import Path

import pytest

from wixmanifest.manifest import WixManifest



def pytest_configure(config: pytest.Config) -> None:
    if sys.flags.optimize:
        raise RuntimeError("Assertions are disabled (optimize > 0)")



class CountingGenerator:
    """Deterministic GUIDs: GUID-0001, GUID-0002, ..."""
    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self.calls = 0

    def generate(self) -> str:
        self.calls += 1
        return f"GUID-{next(self._counter):04d}"



class FailingGenerator:
    """Hands out `okCount` GUIDs, then fails."""
    def __init__(self, okCount: int = 0) -> None:
        self._inner = CountingGenerator()
        self._left = okCount

    def generate(self) -> str:
        if self._left <= 0:
            raise OSError("entropy source exhausted")
        self._left -= 1
        return self._inner.generate()



@pytest.fixture
def guidGenerator() -> CountingGenerator:
    return CountingGenerator()



@pytest.fixture
def inTmpDir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Runs the test with tmp_path as the current working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path



@pytest.fixture
def fullManifest() -> WixManifest:
    return WixManifest.model_validate({
        "product": "hello",
        "company": "mh-cbon",
        "version": "0.0.1-beta+42",
        "license": "LICENSE",
        "upgrade-code": "",
        "files": {"guid": "", "items": ["hello.exe", "README.md"]},
        "directories": ["assets"],
        "env": {
            "guid": "",
            "vars": [
                {
                    "name": "HELLO",
                    "value": "[INSTALLDIR]",
                    "permanent": "no",
                    "system": "no",
                    "action": "set",
                    "part": "last",
                },
            ],
        },
        "shortcuts": {
            "items": [
                {
                    "name": "hello",
                    "description": "Says hello",
                    "target": "[INSTALLDIR]\\hello.exe",
                    "wdir": "INSTALLDIR",
                    "arguments": "--greet",
                    "icon": "hello.ico",
                },
            ],
        },
        "choco": {
            "project-url": "https://github.com/mh-cbon/hello",
            "license-url": "https://github.com/mh-cbon/hello/blob/master/LICENSE",
            "tags": "hello cli",
        },
    })



@pytest.fixture
def failingGenerator():
    """Factory: failingGenerator(okCount) -> generator failing after okCount GUIDs."""
    return FailingGenerator
