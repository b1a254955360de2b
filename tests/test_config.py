"""Tests for tools configuration and global settings."""

import global_config
from goggles import config_loader
from goggles.config_loader import DEFAULT_TOOLS_CONFIG, get_tools_config


def test_bundled_config_matches_defaults():
    """The shipped config.yaml declares bundle show and cloc --md."""
    config = get_tools_config()

    assert config["locator_command"] == ["bundle", "show"]
    assert config["loc_command"] == ["cloc", "--md"]


def test_missing_file_uses_defaults(tmp_path):
    """A missing YAML file falls back to defaults."""
    assert get_tools_config(tmp_path / "absent.yaml") == DEFAULT_TOOLS_CONFIG


def test_file_overrides_defaults(tmp_path):
    """Values from the YAML file win over defaults."""
    path = tmp_path / "config.yaml"
    path.write_text("loc_command: [cloc, --md, --quiet]\n", encoding="utf-8")

    config = get_tools_config(path)

    assert config["loc_command"] == ["cloc", "--md", "--quiet"]
    assert config["locator_command"] == ["bundle", "show"]


def test_invalid_yaml_uses_defaults(tmp_path):
    """Unparseable YAML falls back to defaults."""
    path = tmp_path / "config.yaml"
    path.write_text("loc_command: [cloc\n", encoding="utf-8")

    assert get_tools_config(path) == DEFAULT_TOOLS_CONFIG


def test_invalid_values_ignored(tmp_path):
    """Non-list commands and unknown keys are ignored."""
    path = tmp_path / "config.yaml"
    path.write_text("locator_command: bundle show\nshell: true\n", encoding="utf-8")

    assert get_tools_config(path) == DEFAULT_TOOLS_CONFIG


def test_non_mapping_uses_defaults(tmp_path):
    """A YAML list at top level falls back to defaults."""
    path = tmp_path / "config.yaml"
    path.write_text("- cloc\n", encoding="utf-8")

    assert get_tools_config(path) == DEFAULT_TOOLS_CONFIG


def test_default_config_is_cached():
    """The default config is loaded once."""
    first = get_tools_config()

    assert get_tools_config() is first
    config_loader.clear_cache()
    assert get_tools_config() is not first


def test_global_paths():
    """Template and tools config live inside the goggles package by default."""
    summary = global_config.describe()

    assert global_config.DEFAULT_TEMPLATES_DIR == global_config.PACKAGE_DIR / "templates"
    assert (global_config.DEFAULT_TEMPLATES_DIR / "CODE.md").is_file()
    assert global_config.DEFAULT_TOOLS_CONFIG_PATH.is_file()
    assert summary["template_name"] == global_config.TEMPLATE_NAME
