"""Tests for the .booter_config file."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from booter.config import DEFAULT_CONFIG, BooterConfig


class TestBooterConfig:
    def test_defaults_without_path(self):
        config = BooterConfig()
        assert config.config == DEFAULT_CONFIG
        assert config.profile == "usertests"
        assert config.test_list is None
        assert config.directory is None
        assert config.verbose is False

    def test_missing_file_uses_defaults(self, tmp_path):
        config = BooterConfig(tmp_path / ".booter_config")
        assert config.config == DEFAULT_CONFIG

    def test_partial_file_merges_over_defaults(self, tmp_path):
        path = tmp_path / ".booter_config"
        path.write_text(json.dumps({"profile": "shell", "verbose": True}))
        config = BooterConfig(path)
        assert config.profile == "shell"
        assert config.verbose is True
        assert config.test_list is None

    def test_invalid_json_uses_defaults(self, tmp_path):
        path = tmp_path / ".booter_config"
        path.write_text("{not json")
        assert BooterConfig(path).config == DEFAULT_CONFIG

    def test_non_object_uses_defaults(self, tmp_path):
        path = tmp_path / ".booter_config"
        path.write_text("[1, 2]")
        assert BooterConfig(path).config == DEFAULT_CONFIG

    def test_relative_paths_follow_config_file(self, tmp_path):
        path = tmp_path / "conf" / ".booter_config"
        path.parent.mkdir()
        path.write_text(json.dumps({"test_list": "tests.yaml", "directory": "bin"}))
        config = BooterConfig(path)
        assert config.test_list == tmp_path / "conf" / "tests.yaml"
        assert config.directory == tmp_path / "conf" / "bin"

    def test_absolute_paths_kept(self, tmp_path):
        path = tmp_path / ".booter_config"
        path.write_text(json.dumps({"directory": "/opt/tests"}))
        assert BooterConfig(path).directory == Path("/opt/tests")

    def test_save_round_trip(self, tmp_path):
        path = tmp_path / "nested" / ".booter_config"
        config = BooterConfig(path)
        config.set_config(profile="shell", directory="bin", verbose=True)
        config.save()

        reloaded = BooterConfig(path)
        assert reloaded.profile == "shell"
        assert reloaded.directory == path.parent / "bin"
        assert reloaded.verbose is True

    def test_save_without_path(self):
        with pytest.raises(ValueError, match="No config file path"):
            BooterConfig().save()

    def test_verbose_string_is_rejected(self, tmp_path):
        path = tmp_path / ".booter_config"
        path.write_text(json.dumps({"verbose": "false"}))
        with pytest.raises(ValueError, match="'verbose' must be true or false"):
            BooterConfig(path).verbose

    def test_verbose_null_uses_default(self, tmp_path):
        path = tmp_path / ".booter_config"
        path.write_text(json.dumps({"verbose": None}))
        assert BooterConfig(path).verbose is False

    def test_non_string_directory_is_rejected(self, tmp_path):
        path = tmp_path / ".booter_config"
        path.write_text(json.dumps({"directory": 5}))
        with pytest.raises(ValueError, match="'directory' must be a path string"):
            BooterConfig(path).directory

    def test_list_test_list_is_rejected(self, tmp_path):
        path = tmp_path / ".booter_config"
        path.write_text(json.dumps({"test_list": ["a.yaml"]}))
        with pytest.raises(ValueError, match="'test_list' must be a path string"):
            BooterConfig(path).test_list

    def test_non_string_profile_is_rejected(self, tmp_path):
        path = tmp_path / ".booter_config"
        path.write_text(json.dumps({"profile": 3}))
        with pytest.raises(ValueError, match="'profile' must be a string"):
            BooterConfig(path).profile

    def test_set_config_ignores_none(self):
        config = BooterConfig()
        config.set_config(test_list="list.yaml")
        assert config.profile == "usertests"
        assert config.test_list == Path("list.yaml")
