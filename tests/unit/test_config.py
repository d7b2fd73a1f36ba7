"""Unit tests for config.py"""

import pytest

from diffview.config import load_config
from diffview.core.segment import context_window


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so no stray config.yaml is read."""
    monkeypatch.chdir(tmp_path)


def test_load_config_defaults(monkeypatch):
    """Settings defaults are used when no config.yaml, env var, or CLI override exists."""
    monkeypatch.delenv("DIFFVIEW_CONTEXT_LINES", raising=False)
    monkeypatch.delenv("DIFFVIEW_COMPACT", raising=False)
    settings = load_config()
    assert settings.context_lines == 3
    assert settings.compact_context_lines == 2
    assert settings.window == 3


def test_load_config_reads_config_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("context_lines: 5\n")
    assert load_config().context_lines == 5


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """DIFFVIEW_CONTEXT_LINES takes precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text("context_lines: 5\n")
    monkeypatch.setenv("DIFFVIEW_CONTEXT_LINES", "4")
    assert load_config().context_lines == 4


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("DIFFVIEW_CONTEXT_LINES", "4")
    settings = load_config(overrides={"context_lines": 1, "output_format": None})
    assert settings.context_lines == 1
    assert settings.output_format == "text"


def test_load_config_env_compact_selects_compact_window(monkeypatch):
    """DIFFVIEW_COMPACT is coerced to bool and switches the effective window."""
    monkeypatch.setenv("DIFFVIEW_COMPACT", "true")
    settings = load_config()
    assert settings.compact is True
    assert settings.window == 2


def test_load_config_invalid_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


@pytest.mark.parametrize("overrides", [
    {"context_lines": 0},
    {"output_format": "html"},
])
def test_load_config_rejects_invalid_values(overrides):
    with pytest.raises(ValueError):
        load_config(overrides=overrides)


def test_settings_defaults_match_segment_windows():
    """Settings defaults come from the segmenter's normal and compact windows."""
    settings = load_config()
    assert settings.context_lines == context_window()
    assert settings.compact_context_lines == context_window(compact=True)


def test_settings_window_uses_configured_compact_width(tmp_path):
    (tmp_path / "config.yaml").write_text("compact: true\ncompact_context_lines: 1\ncontext_lines: 6\n")
    assert load_config().window == 1
