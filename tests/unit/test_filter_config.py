"""Tests for FilterConfig construction."""

from __future__ import annotations

import dataclasses
import math

import pytest

from attach_picker.config import ConfigurationError, runtime
from attach_picker.filter_config import FilterConfig


class TestDefaults:
    def test_defaults_match_editor_defaults(self) -> None:
        config = FilterConfig()

        assert config.filter_by_engine_type is False
        assert config.auto_attach_single_process is True
        assert config.engine_process_name_patterns == ()
        assert config.blacklist_patterns == ()
        assert config.helper_encoding == "cp936"
        assert config.helper_timeout_seconds == 10.0

    def test_is_frozen(self) -> None:
        config = FilterConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.filter_by_engine_type = True  # type: ignore[misc]

    def test_patterns_become_ordered_sets(self) -> None:
        config = FilterConfig(blacklist_patterns=("b", " a ", "b", "", "c"))

        assert config.blacklist_patterns == ("b", "a", "c")

    def test_rejects_bare_string_patterns(self) -> None:
        with pytest.raises(ConfigurationError):
            FilterConfig(blacklist_patterns="crashreporter")  # type: ignore[arg-type]

    @pytest.mark.parametrize("timeout", [0, -1.5, math.inf, math.nan])
    def test_rejects_non_positive_timeout(self, timeout) -> None:
        with pytest.raises(ConfigurationError):
            FilterConfig(helper_timeout_seconds=timeout)

    def test_rejects_unknown_encoding(self) -> None:
        with pytest.raises(ConfigurationError):
            FilterConfig(helper_encoding="no-such-codec")


class TestFromEnv:
    def test_reads_attach_variables(self, monkeypatch) -> None:
        monkeypatch.setenv("ATTACH_FILTER_BY_ENGINE_TYPE", "yes")
        monkeypatch.setenv("ATTACH_AUTO_ATTACH_SINGLE_PROCESS", "0")
        monkeypatch.setenv("ATTACH_ENGINE_PROCESS_NAMES", "UE4Editor, UE5Editor ,UE4Editor")
        monkeypatch.setenv("ATTACH_BLACKLIST", "CrashReporter")
        monkeypatch.setenv("ATTACH_HELPER_ENCODING", "gbk")
        monkeypatch.setenv("ATTACH_HELPER_TIMEOUT_SECONDS", "2.5")

        config = FilterConfig.from_env()

        assert config.filter_by_engine_type is True
        assert config.auto_attach_single_process is False
        assert config.engine_process_name_patterns == ("UE4Editor", "UE5Editor")
        assert config.blacklist_patterns == ("CrashReporter",)
        assert config.helper_encoding == "gbk"
        assert config.helper_timeout_seconds == 2.5

    def test_missing_variables_use_defaults(self) -> None:
        assert FilterConfig.from_env() == FilterConfig()

    def test_dotenv_defaults_apply_when_variable_unset(self, monkeypatch) -> None:
        monkeypatch.setattr(runtime, "_DEFAULT_VALUES", {"ATTACH_BLACKLIST": "ShaderCompileWorker"})

        assert FilterConfig.from_env().blacklist_patterns == ("ShaderCompileWorker",)

    def test_invalid_boolean_raises(self, monkeypatch) -> None:
        monkeypatch.setenv("ATTACH_FILTER_BY_ENGINE_TYPE", "sometimes")

        with pytest.raises(ConfigurationError):
            FilterConfig.from_env()

    @pytest.mark.parametrize("raw", ["inf", "nan", "-inf"])
    def test_non_finite_timeout_raises(self, monkeypatch, raw) -> None:
        monkeypatch.setenv("ATTACH_HELPER_TIMEOUT_SECONDS", raw)

        with pytest.raises(ConfigurationError):
            FilterConfig.from_env()


class TestFromSettings:
    def test_reads_editor_keys(self) -> None:
        settings = {
            "emmylua.debug.filterUEProcesses": True,
            "emmylua.debug.autoAttachSingleProcess": False,
            "emmylua.debug.ueProcessNames": ["UE4Editor"],
            "emmylua.debug.threadFilterBlacklist": ["CrashReporter", "ShaderCompileWorker"],
            "emmylua.debug.helperTimeoutSeconds": 3,
        }

        config = FilterConfig.from_settings(settings)

        assert config.filter_by_engine_type is True
        assert config.auto_attach_single_process is False
        assert config.engine_process_name_patterns == ("UE4Editor",)
        assert config.blacklist_patterns == ("CrashReporter", "ShaderCompileWorker")
        assert config.helper_timeout_seconds == 3.0

    def test_empty_settings_use_defaults(self) -> None:
        assert FilterConfig.from_settings({}) == FilterConfig()

    def test_comma_separated_patterns_are_accepted(self) -> None:
        config = FilterConfig.from_settings({"emmylua.debug.threadFilterBlacklist": "a, b"})

        assert config.blacklist_patterns == ("a", "b")

    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("emmylua.debug.filterUEProcesses", 1),
            ("emmylua.debug.ueProcessNames", [1, 2]),
            ("emmylua.debug.helperTimeoutSeconds", "soon"),
            ("emmylua.debug.helperEncoding", 936),
        ],
    )
    def test_wrong_types_raise(self, key, value) -> None:
        with pytest.raises(ConfigurationError):
            FilterConfig.from_settings({key: value})
