"""Tests for ViewportConfig."""

import logging

from linepager import ViewportConfig
from linepager.config import DEFAULT_KEY_BINDINGS, MOUSE_WHEEL_DELTA


def test_defaults():
    config = ViewportConfig()
    assert config.mouse_wheel_delta == MOUSE_WHEEL_DELTA == 3
    assert config.high_performance is False
    assert config.key_bindings == DEFAULT_KEY_BINDINGS


def test_key_bindings_are_not_shared():
    config = ViewportConfig()
    config.key_bindings["x"] = "goto_top"
    assert "x" not in ViewportConfig().key_bindings
    assert "x" not in DEFAULT_KEY_BINDINGS


def test_from_env_empty():
    assert ViewportConfig.from_env({}) == ViewportConfig()


def test_from_env():
    config = ViewportConfig.from_env(
        {"LINEPAGER_MOUSE_WHEEL_DELTA": "7", "LINEPAGER_HIGH_PERFORMANCE": "Yes"}
    )
    assert config.mouse_wheel_delta == 7
    assert config.high_performance is True


def test_from_env_false():
    config = ViewportConfig.from_env({"LINEPAGER_HIGH_PERFORMANCE": "off"})
    assert config.high_performance is False


def test_from_env_ignores_bad_values(caplog):
    with caplog.at_level(logging.WARNING, logger="linepager.config"):
        config = ViewportConfig.from_env(
            {"LINEPAGER_MOUSE_WHEEL_DELTA": "lots", "LINEPAGER_HIGH_PERFORMANCE": "maybe"}
        )

    assert config.mouse_wheel_delta == 3
    assert config.high_performance is False
    assert "LINEPAGER_MOUSE_WHEEL_DELTA" in caplog.text
    assert "LINEPAGER_HIGH_PERFORMANCE" in caplog.text


def test_from_env_reads_os_environ(monkeypatch):
    monkeypatch.setenv("LINEPAGER_MOUSE_WHEEL_DELTA", "1")
    assert ViewportConfig.from_env().mouse_wheel_delta == 1
