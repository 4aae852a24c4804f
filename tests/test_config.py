"""
Tests for configuration loading — treesmith.yml discovery and validation.
"""

import textwrap
from pathlib import Path

import pytest

from treesmith.core.config.loader import (
    CONFIG_FILE,
    ConfigError,
    find_config_file,
    load_settings,
)


class TestFindConfigFile:
    def test_found_in_start_dir(self, tmp_path: Path):
        (tmp_path / CONFIG_FILE).write_text("")
        assert find_config_file(tmp_path) == (tmp_path / CONFIG_FILE).resolve()

    def test_found_in_parent(self, tmp_path: Path):
        (tmp_path / CONFIG_FILE).write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == (tmp_path / CONFIG_FILE).resolve()

    def test_directory_named_like_config_ignored(self, tmp_path: Path):
        (tmp_path / CONFIG_FILE).mkdir()
        found = find_config_file(tmp_path)
        assert found != (tmp_path / CONFIG_FILE).resolve()


class TestLoadSettings:
    def test_full_config(self, tmp_path: Path):
        config = tmp_path / CONFIG_FILE
        config.write_text(textwrap.dedent("""\
            base_dir: out
            catalogs:
              - catalogs/extra.yml
            web:
              host: 0.0.0.0
              port: 9000
        """))
        settings = load_settings(config)
        assert settings.base_dir == str((tmp_path / "out").resolve())
        assert settings.catalogs == [str((tmp_path / "catalogs" / "extra.yml").resolve())]
        assert settings.web.host == "0.0.0.0"
        assert settings.web.port == 9000

    def test_empty_file_uses_defaults(self, tmp_path: Path):
        config = tmp_path / CONFIG_FILE
        config.write_text("")
        settings = load_settings(config)
        assert settings.base_dir == str(tmp_path.resolve())
        assert settings.web.port == 8080

    def test_no_config_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(
            "treesmith.core.config.loader.find_config_file", lambda start_dir=None: None
        )
        settings = load_settings()
        assert settings.base_dir == str(tmp_path.resolve())
        assert settings.catalogs == []

    def test_explicit_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        config = tmp_path / CONFIG_FILE
        config.write_text("web: [broken\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(config)

    def test_not_a_mapping(self, tmp_path: Path):
        config = tmp_path / CONFIG_FILE
        config.write_text("- just\n- a list\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_settings(config)

    def test_invalid_values(self, tmp_path: Path):
        config = tmp_path / CONFIG_FILE
        config.write_text("web:\n  port: not-a-port\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_settings(config)
