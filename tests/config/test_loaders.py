# topmark:header:start
#
#   project      : FormPrint
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for reading ``.formprint.toml`` files with tomlkit."""

from __future__ import annotations

from typing import TYPE_CHECKING

from formprint.config.loaders import load_toml_dict, user_config_path
from formprint.config.store import ConfigStore, load_external_config

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


def test_load_toml_dict_returns_plain_dicts(tmp_path: Path) -> None:
    """Tables become nested dicts with plain Python values."""
    path = tmp_path / "cfg.toml"
    path.write_text(
        '# my settings\nwidth = 100\nstyle = ["justified"]\n\n[list]\nindent = 1\n',
        encoding="utf-8",
    )

    data, errors = load_toml_dict(path)

    assert errors == []
    assert data == {"width": 100, "style": ["justified"], "list": {"indent": 1}}
    assert type(data["list"]) is dict


def test_missing_file_is_not_an_error(tmp_path: Path) -> None:
    """A configuration file that does not exist yields nothing."""
    assert load_toml_dict(tmp_path / "absent.toml") == ({}, [])


def test_invalid_toml_is_reported(tmp_path: Path) -> None:
    """A syntax error becomes an error string naming the file."""
    path = tmp_path / "bad.toml"
    path.write_text("width = = 3\n", encoding="utf-8")

    data, errors = load_toml_dict(path)

    assert data == {}
    assert len(errors) == 1
    assert errors[0].startswith(f"invalid TOML in {path}")


def test_env_var_overrides_user_config_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """``FORMPRINT_CONFIG`` names the user configuration file."""
    path = tmp_path / "elsewhere.toml"
    monkeypatch.setenv("FORMPRINT_CONFIG", str(path))

    assert user_config_path() == path


def test_cwd_config_is_read_only_when_enabled(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The CWD file is consulted only when the user file sets ``cwd_config``."""
    user = tmp_path / "user.toml"
    project = tmp_path / "project"
    project.mkdir()
    (project / ".formprint.toml").write_text("width = 60\n", encoding="utf-8")
    monkeypatch.setenv("FORMPRINT_CONFIG", str(user))
    monkeypatch.chdir(project)

    user.write_text("width = 100\n", encoding="utf-8")
    assert [s.label for s in load_external_config()] == [str(user)]

    user.write_text("width = 100\ncwd_config = true\n", encoding="utf-8")
    sources = load_external_config()
    assert [s.options for s in sources] == [
        {"width": 100, "cwd_config": True},
        {"width": 60},
    ]

    store = ConfigStore()
    assert store.configure_all() == []
    assert store.get_options()["width"] == 60
