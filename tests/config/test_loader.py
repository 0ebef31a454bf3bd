"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence: kwargs > env > repo yaml > global yaml > defaults
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from inlinetypes.config.loader import REPO_CONFIG_NAME, _deep_merge, _load_yaml, load_config
from inlinetypes.core.errors import ConfigError, ErrorCode


@pytest.fixture(autouse=True)
def _no_global_config(tmp_path: Path) -> Iterator[None]:
    """Point the global config at a file that does not exist."""
    with patch("inlinetypes.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml"):
        yield


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("scan:\n  max_fix_passes: 3\n")

        assert _load_yaml(yaml_file) == {"scan": {"max_fix_passes": 3}}

    def test_returns_empty_for_yaml_null(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "null.yaml"
        yaml_file.write_text("null\n")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("scan:\n  exclude:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)

        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_override_wins(self) -> None:
        assert _deep_merge({"a": 1}, {"a": 2}) == {"a": 2}

    def test_nested_dicts_merge(self) -> None:
        base = {"scan": {"exclude": ["x"], "max_fix_passes": 5}}
        override = {"scan": {"max_fix_passes": 2}}

        assert _deep_merge(base, override) == {"scan": {"exclude": ["x"], "max_fix_passes": 2}}

    def test_does_not_mutate_base(self) -> None:
        base = {"a": {"b": 1}}
        _deep_merge(base, {"a": {"b": 2}})

        assert base == {"a": {"b": 1}}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)

        assert config.logging.level == "WARNING"
        assert config.scan.max_fix_passes == 10
        assert config.scan.extensions == [".ts", ".tsx", ".mts", ".cts"]

    def test_repo_yaml(self, tmp_path: Path) -> None:
        (tmp_path / REPO_CONFIG_NAME).write_text("scan:\n  exclude: ['*.spec.ts']\n")

        config = load_config(tmp_path)

        assert config.scan.exclude == ["*.spec.ts"]

    def test_global_yaml_under_repo_yaml(self, tmp_path: Path) -> None:
        global_file = tmp_path / "global.yaml"
        global_file.write_text("scan:\n  max_fix_passes: 4\n  max_file_size_kb: 8\n")
        (tmp_path / REPO_CONFIG_NAME).write_text("scan:\n  max_fix_passes: 2\n")

        with patch("inlinetypes.config.loader.GLOBAL_CONFIG_PATH", global_file):
            config = load_config(tmp_path)

        assert config.scan.max_fix_passes == 2
        assert config.scan.max_file_size_kb == 8

    def test_env_over_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / REPO_CONFIG_NAME).write_text("logging:\n  level: INFO\n")
        monkeypatch.setenv("INLINETYPES__LOGGING__LEVEL", "DEBUG")

        assert load_config(tmp_path).logging.level == "DEBUG"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("scan:\n  include_declaration_files: true\n")

        config = load_config(tmp_path, config_path=config_file)

        assert config.scan.include_declaration_files is True

    def test_explicit_config_path_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path, config_path=tmp_path / "missing.yaml")

        assert exc_info.value.code == ErrorCode.CONFIG_FILE_NOT_FOUND

    def test_invalid_value(self, tmp_path: Path) -> None:
        (tmp_path / REPO_CONFIG_NAME).write_text("scan:\n  max_fix_passes: 0\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "max_fix_passes" in exc_info.value.details["field"]
