"""Tests for config discovery and loading."""

from pathlib import Path

import pytest

from cleancore.config.discovery import CONFIG_FILENAME, find_config, read_toml
from cleancore.domain.errors import ConfigFileError


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLEANCORE_CONFIG", raising=False)


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[validation]\nblank_strings_are_empty = true\n")
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        monkeypatch.setenv("CLEANCORE_CONFIG", str(config_file))
        assert find_config(tmp_path / "elsewhere") == config_file

    def test_env_var_pointing_nowhere(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv("CLEANCORE_CONFIG", str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestReadToml:
    def test_reads_sections(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(
            "[validation]\nblank_strings_are_empty = true\n[logging]\nlog_json = true\n"
        )
        assert read_toml(config_file) == {
            "validation": {"blank_strings_are_empty": True},
            "logging": {"log_json": True},
        }

    def test_invalid_toml(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[validation\n")
        with pytest.raises(ConfigFileError) as exc_info:
            read_toml(config_file)
        assert exc_info.value.get_details()["path"] == str(config_file)
        assert exc_info.value.__cause__ is not None
