"""Tests for configuration section models."""

import pytest

from cleancore.config.models import LoggingConfig, ValidationConfig


class TestSectionDefaults:
    def test_validation(self) -> None:
        assert ValidationConfig().blank_strings_are_empty is False

    def test_logging(self) -> None:
        cfg = LoggingConfig()
        assert cfg.verbose is False
        assert cfg.log_json is False

    def test_sparse_section(self) -> None:
        cfg = LoggingConfig.model_validate({"verbose": True})
        assert cfg.verbose is True
        assert cfg.log_json is False

    def test_frozen(self) -> None:
        with pytest.raises(Exception):
            ValidationConfig().blank_strings_are_empty = True  # type: ignore[misc]
