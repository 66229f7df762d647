"""Tests for configuration and initialization."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest

import nullsafe._config as config_module
from nullsafe import NullsafeConfig, get_config, init
from nullsafe._config import _detect_json_output, _detect_log_level


@pytest.fixture(autouse=True)
def reset_config() -> None:
    """Forget any config set by a previous test."""
    config_module._config = None
    yield
    config_module._config = None


class TestNullsafeConfig:
    """Tests for the NullsafeConfig dataclass."""

    def test_default_values(self) -> None:
        config = NullsafeConfig()
        assert config.log_level is None
        assert config.json_output is True

    def test_config_is_frozen(self) -> None:
        config = NullsafeConfig()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestDetectLogLevel:
    """Tests for _detect_log_level()."""

    def test_env_level(self) -> None:
        with patch.dict(os.environ, {'NULLSAFE_LOG_LEVEL': 'debug'}):
            assert _detect_log_level() == 'DEBUG'

    def test_env_unset_is_silent(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_level() is None

    def test_env_blank_is_silent(self) -> None:
        with patch.dict(os.environ, {'NULLSAFE_LOG_LEVEL': '  '}):
            assert _detect_log_level() is None


class TestDetectJsonOutput:
    """Tests for _detect_json_output()."""

    def test_console(self) -> None:
        with patch.dict(os.environ, {'NULLSAFE_LOG_FORMAT': 'Console'}):
            assert _detect_json_output() is False

    def test_json(self) -> None:
        with patch.dict(os.environ, {'NULLSAFE_LOG_FORMAT': 'json'}):
            assert _detect_json_output() is True

    def test_unknown_warns_and_defaults_to_json(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch.dict(os.environ, {'NULLSAFE_LOG_FORMAT': 'xml'}), caplog.at_level(logging.WARNING):
            assert _detect_json_output() is True
        assert 'NULLSAFE_LOG_FORMAT' in caplog.text


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_before_init_raises(self) -> None:
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_init_explicit(self) -> None:
        with patch('nullsafe._config.configure_logging') as configure:
            config = init(log_level='INFO', json_output=False)
        assert config == NullsafeConfig(log_level='INFO', json_output=False)
        assert get_config() is config
        configure.assert_called_once_with('INFO', json_output=False)

    def test_init_from_env(self) -> None:
        env = {'NULLSAFE_LOG_LEVEL': 'warning', 'NULLSAFE_LOG_FORMAT': 'console'}
        with patch.dict(os.environ, env), patch('nullsafe._config.configure_logging') as configure:
            config = init()
        assert config.log_level == 'WARNING'
        assert config.json_output is False
        configure.assert_called_once_with('WARNING', json_output=False)

    def test_init_silent_skips_logging_setup(self) -> None:
        with patch.dict(os.environ, {}, clear=True), patch('nullsafe._config.configure_logging') as configure:
            config = init()
        assert config.log_level is None
        configure.assert_not_called()
