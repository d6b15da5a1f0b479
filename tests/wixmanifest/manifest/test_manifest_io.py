# tests/wixmanifest/manifest/test_manifest_io.py
from __future__ import annotations

import json
from pathlib import Path

import pytest

from wixmanifest.config import makeConfig
from wixmanifest.core.errors import (
    ManifestDecodeError,
    ManifestError,
    ManifestIOError,
    ManifestNotFoundError,
)
from wixmanifest.manifest import WixManifest, dumpManifest, loadManifest, writeManifest


# ----------------------------
# dumpManifest
# ----------------------------

def test_dump_emptyManifest_keepsOnlyRequiredKeys() -> None:
    assert dumpManifest(WixManifest()) == {"product": "", "company": "", "upgrade-code": ""}


def test_dump_usesKebabCaseKeys(fullManifest: WixManifest) -> None:
    data = dumpManifest(fullManifest)

    assert data["choco"] == {
        "project-url": "https://github.com/mh-cbon/hello",
        "license-url": "https://github.com/mh-cbon/hello/blob/master/LICENSE",
        "tags": "hello cli",
    }
    assert "upgrade-code" in data
    assert "upgradeCode" not in data


def test_dump_neverWritesDerivedFields(fullManifest: WixManifest) -> None:
    fullManifest.versionOk = "0.0.1"
    fullManifest.relDirs = ["../assets"]
    fullManifest.choco.msiFile = "hello.msi"
    fullManifest.choco.buildDir = "build"
    fullManifest.choco.changeLog = "CHANGELOG.md"

    data = dumpManifest(fullManifest)

    assert "version-ok" not in data
    assert "rel-dirs" not in data
    for key in ("msi-file", "build-dir", "change-log"):
        assert key not in data["choco"]


def test_dump_omitsEmptyOptionalFields() -> None:
    manifest = WixManifest(product="App", version="1.0.0", files={"guid": "G", "items": []})

    data = dumpManifest(manifest)

    assert data == {
        "product": "App",
        "company": "",
        "version": "1.0.0",
        "upgrade-code": "",
        "files": {"guid": "G"},
    }


def test_dump_requireLicenseOnlyWhenTrue() -> None:
    manifest = WixManifest(product="App")
    assert "choco" not in dumpManifest(manifest)

    manifest.choco.requireLicense = True
    assert dumpManifest(manifest)["choco"] == {"require-license": True}


def test_dump_keepsListEntriesWithEmptyFields() -> None:
    manifest = WixManifest(env={"guid": "E", "vars": [{"name": "PATH"}, {}]})

    assert dumpManifest(manifest)["env"] == {"guid": "E", "vars": [{"name": "PATH"}, {}]}


# ----------------------------
# writeManifest / loadManifest
# ----------------------------

def test_roundTrip_restoresPersistedFields(tmp_path: Path, fullManifest: WixManifest) -> None:
    fullManifest.upgradeCode = "UPGRADE"
    fullManifest.choco.requireLicense = True
    target = tmp_path / "wix.json"

    writeManifest(fullManifest, target)
    restored = loadManifest(target)

    assert restored == fullManifest


def test_roundTrip_dropsDerivedFields(tmp_path: Path, fullManifest: WixManifest) -> None:
    fullManifest.versionOk = "0.0.1"
    fullManifest.relDirs = ["x"]
    fullManifest.choco.buildDir = "build"
    target = tmp_path / "wix.json"

    writeManifest(fullManifest, target)
    restored = loadManifest(target)

    assert restored.versionOk == ""
    assert restored.relDirs == []
    assert restored.choco.buildDir == ""
    assert restored.files == fullManifest.files


def test_write_producesIndentedJson(tmp_path: Path) -> None:
    target = tmp_path / "wix.json"
    writeManifest(WixManifest(product="App", company="Acme"), target)

    text = target.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert '\n  "product": "App"' in text
    assert json.loads(text) == {"product": "App", "company": "Acme", "upgrade-code": ""}
    assert not (tmp_path / "wix.json.tmp").exists()


def test_write_defaultsToWixJsonInCwd(inTmpDir: Path) -> None:
    written = writeManifest(WixManifest(product="App"))

    assert written == Path("wix.json")
    assert (inTmpDir / "wix.json").is_file()
    assert loadManifest().product == "App"


def test_defaultFileName_comesFromConfig(inTmpDir: Path) -> None:
    cfg = makeConfig({"manifest": {"defaultFileName": "package.json"}})

    WixManifest(product="App").write(config=cfg)

    assert (inTmpDir / "package.json").is_file()
    assert WixManifest.load(config=cfg).product == "App"


def test_write_intoMissingDirectory_raisesIOError(tmp_path: Path) -> None:
    target = tmp_path / "missing" / "wix.json"

    with pytest.raises(ManifestIOError):
        writeManifest(WixManifest(), target)


def test_load_missingFile_raisesNotFound(tmp_path: Path) -> None:
    with pytest.raises(ManifestNotFoundError) as excInfo:
        loadManifest(tmp_path / "nope.json")

    # Still usable with generic handlers
    assert isinstance(excInfo.value, FileNotFoundError)
    assert isinstance(excInfo.value, ManifestIOError)
    assert isinstance(excInfo.value, ManifestError)


def test_load_directory_raisesIOError(tmp_path: Path) -> None:
    with pytest.raises(ManifestIOError):
        loadManifest(tmp_path)


@pytest.mark.parametrize(
    "text",
    [
        "{ not json",
        "[1, 2, 3]",
        '"just a string"',
        '{"product": 5}',
        '{"files": {"items": "a.txt"}}',
        '{"choco": {"require-license": "maybe"}}',
        '{"shortcuts": {"items": [{"icon": "my icon.ico"}]}}',
    ],
)
def test_load_invalidDocument_raisesDecodeError(tmp_path: Path, text: str) -> None:
    target = tmp_path / "wix.json"
    target.write_text(text, encoding="utf-8")

    with pytest.raises(ManifestDecodeError):
        loadManifest(target)


def test_load_missingFieldsTakeZeroValues(tmp_path: Path) -> None:
    target = tmp_path / "wix.json"
    target.write_text('{"product": "App"}', encoding="utf-8")

    manifest = loadManifest(target)

    assert manifest == WixManifest(product="App")
    assert manifest.files.items == []
    assert manifest.choco.requireLicense is False


def test_load_acceptsNullsCommentsAndUnknownKeys(tmp_path: Path) -> None:
    target = tmp_path / "wix.json"
    target.write_text(
        """
        {
          // written by an older tool
          "product": "App",
          "files": {"guid": "F", "items": null},
          "directories": null,
          "env": {"guid": "", "vars": null},
          "hooks": [{"command": "build.bat"}],
        }
        """,
        encoding="utf-8",
    )

    manifest = loadManifest(target)

    assert manifest.product == "App"
    assert manifest.files.guid == "F"
    assert manifest.files.items == []
    assert manifest.directories == []
    assert manifest.env.vars == []


def test_load_unreadableExistingFile_raisesIOError(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "wix.json"
    target.write_text('{"product": "App"}', encoding="utf-8")
    realReadText = Path.read_text

    def deniedReadText(self: Path, *args, **kwargs) -> str:
        if self == target:
            raise PermissionError(13, "Permission denied", str(self))
        return realReadText(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", deniedReadText)

    with pytest.raises(ManifestIOError) as excInfo:
        loadManifest(target)

    assert not isinstance(excInfo.value, ManifestNotFoundError)
    assert isinstance(excInfo.value.__cause__, PermissionError)


def test_load_notUtf8_raisesIOError(tmp_path: Path) -> None:
    target = tmp_path / "wix.json"
    target.write_bytes(b'{"product": "\xff\xfe"}')

    with pytest.raises(ManifestIOError):
        loadManifest(target)


@pytest.mark.parametrize("value", ['"yes"', '"true"', "1", "0"])
def test_load_requireLicenseAcceptsOnlyJsonBooleans(tmp_path: Path, value: str) -> None:
    target = tmp_path / "wix.json"
    target.write_text('{"choco": {"require-license": %s}}' % value, encoding="utf-8")

    with pytest.raises(ManifestDecodeError):
        loadManifest(target)

    target.write_text('{"choco": {"require-license": true}}', encoding="utf-8")
    assert loadManifest(target).choco.requireLicense is True
