"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from resourcefs.config import Settings
from resourcefs.kernel.codec import JsonResourceCodec


def test_defaults(monkeypatch):
    for name in ("RESOURCEFS_SANDBOX_ROOT", "RESOURCEFS_TEMPORARY_ROOT", "RESOURCEFS_JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.sandbox_root.is_absolute()
    assert settings.temporary_root is None
    assert settings.scratch_root == settings.sandbox_root / "tmp"
    assert settings.json_indent == 2
    assert settings.io_fsync is True


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("RESOURCEFS_SANDBOX_ROOT", str(tmp_path))
    monkeypatch.setenv("RESOURCEFS_TEMPORARY_ROOT", str(tmp_path / "scratch"))
    monkeypatch.setenv("RESOURCEFS_JSON_INDENT", "0")
    monkeypatch.setenv("RESOURCEFS_IO_FSYNC", "false")

    settings = Settings(_env_file=None)

    assert settings.sandbox_root == tmp_path.resolve()
    assert settings.scratch_root == tmp_path.resolve() / "scratch"
    assert settings.json_indent == 0
    assert settings.io_fsync is False


def test_temporary_root_must_stay_in_sandbox(tmp_path):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, sandbox_root=tmp_path / "sandbox", temporary_root=tmp_path)


def test_json_indent_bounds():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, json_indent=9)


def test_codec_indent_follows_settings(monkeypatch):
    from resourcefs.kernel import codec as codec_module

    monkeypatch.setattr(codec_module.settings, "json_indent", 0)
    assert JsonResourceCodec().indent is None
    assert JsonResourceCodec(indent=4).indent == 4
