# SPDX-License-Identifier: MIT
"""Tests for satbuild's variable and configuration lookup."""

from __future__ import annotations

import json

import pytest

import satbuild
from satbuild import get_configuration, get_saturn_root, get_var
from satbuild.core.errors import ConfigurationError
from satbuild.core.kinds import BuildConfiguration


class TestGetVar:
    def test_default(self) -> None:
        assert get_var("SATBUILD_TEST_UNSET", "fallback") == "fallback"

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SATBUILD_TEST_VAR", "env")
        assert get_var("SATBUILD_TEST_VAR") == "env"

    def test_cli_vars_take_precedence(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SATBUILD_TEST_VAR", "env")
        monkeypatch.setenv("SATBUILD_VARS", json.dumps({"SATBUILD_TEST_VAR": "cli"}))
        satbuild._reset_vars()
        assert get_var("SATBUILD_TEST_VAR") == "cli"

    def test_malformed_cli_vars_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SATBUILD_VARS", "{not json")
        monkeypatch.setenv("SATBUILD_TEST_VAR", "env")
        satbuild._reset_vars()
        assert get_var("SATBUILD_TEST_VAR") == "env"


class TestGetConfiguration:
    def test_default(self) -> None:
        assert get_configuration() is BuildConfiguration.DEBUG

    def test_satbuild_config_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFIG", "release")
        monkeypatch.setenv("SATBUILD_CONFIG", "dist")
        assert get_configuration() is BuildConfiguration.DIST

    def test_unknown(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFIG", "fast")
        with pytest.raises(ConfigurationError):
            get_configuration()


class TestGetSaturnRoot:
    def test_unset(self) -> None:
        assert get_saturn_root() is None

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SATURN_DIR", "/opt/Saturn")
        assert get_saturn_root() == "/opt/Saturn"
