"""Tests for SDK version discovery and ordering."""

from __future__ import annotations

from pathlib import Path

import pytest

from arcgis_ai_context.content import available_versions, latest_version, resolve_version, version_key
from arcgis_ai_context.exceptions import VersionNotFoundError


def _make_versions(root: Path, *names: str) -> None:
    for name in names:
        (root / name).mkdir(parents=True)


def test_versions_sort_numerically_not_lexicographically(tmp_path: Path) -> None:
    _make_versions(tmp_path, "4.34", "4.9", "5.0", "10.1", "4.10")

    assert available_versions(tmp_path) == ["4.9", "4.10", "4.34", "5.0", "10.1"]


def test_non_version_entries_are_ignored(tmp_path: Path) -> None:
    _make_versions(tmp_path, "4.34", "latest", "5", "5.0.1", "v5.0")
    (tmp_path / "6.0").write_text("not a directory", encoding="utf-8")

    assert available_versions(tmp_path) == ["4.34"]


def test_missing_root_yields_no_versions(tmp_path: Path) -> None:
    missing = tmp_path / "nope"

    assert available_versions(missing) == []
    assert latest_version(missing) is None


def test_latest_version_is_highest(tmp_path: Path) -> None:
    _make_versions(tmp_path, "4.34", "5.0")

    assert latest_version(tmp_path) == "5.0"


@pytest.mark.parametrize(
    ("version", "expected"),
    [
        ("4.34", (4, 34)),
        ("5.0", (5, 0)),
        ("10.09", (10, 9)),
    ],
)
def test_version_key(version: str, expected: tuple[int, int]) -> None:
    assert version_key(version) == expected


def test_version_key_rejects_malformed_version() -> None:
    with pytest.raises(ValueError, match="major"):
        version_key("5")


def test_resolve_version_prefers_explicit_version(tmp_path: Path) -> None:
    _make_versions(tmp_path, "4.34", "5.0")

    assert resolve_version(tmp_path, "4.34") == "4.34"
    assert resolve_version(tmp_path) == "5.0"


def test_resolve_version_raises_for_unknown_or_empty(tmp_path: Path) -> None:
    with pytest.raises(VersionNotFoundError, match="No SDK versions available"):
        resolve_version(tmp_path)

    _make_versions(tmp_path, "5.0")
    with pytest.raises(VersionNotFoundError) as excinfo:
        resolve_version(tmp_path, "4.34")
    assert excinfo.value.available == ("5.0",)
