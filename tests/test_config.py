"""Tests for configuration loading."""

import tempfile
from pathlib import Path

import pytest

from wikinorm import NormalizeOptions
from wikinorm.config import load_config
from wikinorm.errors import ConfigError


def test_load_config_defaults(monkeypatch):
    """Test loading config with defaults when no file exists."""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.chdir(tmpdir)
        config = load_config(config_path=Path(tmpdir) / "missing.toml")

    assert config == NormalizeOptions()
    assert config.merge_categories is False
    assert config.strip_leading_slash is False


def test_load_config_from_file():
    """Test loading config from a file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "wikinorm.toml"
        config_path.write_text("""
[normalize]
merge_categories = true
strip_leading_slash = true
""")

        config = load_config(config_path=config_path)

        assert config.merge_categories is True
        assert config.strip_leading_slash is True


def test_load_config_search_cwd(monkeypatch):
    """Test config search in current working directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.chdir(tmpdir)
        (Path(tmpdir) / "wikinorm.toml").write_text("""
[normalize]
merge_categories = true
""")

        config = load_config()
        assert config.merge_categories is True
        assert config.strip_leading_slash is False


def test_load_config_ignores_other_tables():
    """Test a file without a [normalize] table gives defaults."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "wikinorm.toml"
        config_path.write_text("""
[other]
key = 1
""")

        assert load_config(config_path=config_path) == NormalizeOptions()


def test_load_config_unknown_key():
    """Test unknown options are rejected."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "wikinorm.toml"
        config_path.write_text("""
[normalize]
lowercase = true
""")

        with pytest.raises(ConfigError, match="lowercase"):
            load_config(config_path=config_path)


def test_load_config_wrong_type():
    """Test non-boolean options are rejected."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "wikinorm.toml"
        config_path.write_text("""
[normalize]
merge_categories = "yes"
""")

        with pytest.raises(ConfigError, match="boolean"):
            load_config(config_path=config_path)


def test_loaded_config_drives_pipeline():
    """Test loaded options can be passed straight to normalize()."""
    from wikinorm import normalize

    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "wikinorm.toml"
        config_path.write_text("""
[normalize]
merge_categories = true
""")

        options = load_config(config_path=config_path)

    assert normalize("alpha:beta:gamma", options) == "alpha-beta:gamma"
