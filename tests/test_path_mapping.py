"""Tests for CLI path mapping."""

from pathlib import Path

import pytest

from jsdoc_render.errors import PathMappingError
from jsdoc_render.path_mapping import app_root, map_path


def test_home_prefix(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    assert map_path("~/docs/api.json") == (tmp_path / "docs" / "api.json").resolve()


def test_app_root_prefix(tmp_path: Path) -> None:
    assert map_path("@/presets/x.json", app_root_abs=tmp_path) == (
        tmp_path / "presets" / "x.json"
    ).resolve()
    assert map_path("@", app_root_abs=tmp_path) == tmp_path.resolve()


def test_default_app_root_is_package_dir() -> None:
    assert (app_root() / "cli.py").exists()


def test_relative_joins_base_dir(tmp_path: Path) -> None:
    assert map_path("out/API.md", base_dir=tmp_path) == (tmp_path / "out" / "API.md").resolve()


def test_relative_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert map_path("doc.json") == (tmp_path / "doc.json").resolve()


def test_absolute_kept(tmp_path: Path) -> None:
    assert map_path(str(tmp_path / "a" / ".." / "b")) == (tmp_path / "b").resolve()


@pytest.mark.parametrize("raw", ["", "a\0b", "\\name", "C:name"])
def test_rejected_forms(raw: str) -> None:
    with pytest.raises(PathMappingError):
        map_path(raw)


def test_relative_app_root_rejected() -> None:
    with pytest.raises(PathMappingError, match="app_root_abs"):
        map_path("x", app_root_abs=Path("relative"))
