# SPDX-License-Identifier: MIT
"""Tests for satbuild CLI."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from satbuild.cli import main, parse_variables, setup_logging
from satbuild.core.vendor import VENDOR_CATALOG


class TestParseVariables:
    def test_split(self) -> None:
        variables, remaining = parse_variables(["SATURN_DIR=/opt/s", "extra", "=x"])
        assert variables == {"SATURN_DIR": "/opt/s"}
        assert remaining == ["extra", "=x"]

    def test_flags_are_not_variables(self) -> None:
        variables, remaining = parse_variables(["--opt=1"])
        assert variables == {}
        assert remaining == ["--opt=1"]


class TestSetupLogging:
    def test_setup_logging_normal(self) -> None:
        setup_logging(verbose=False, debug=False)

    def test_setup_logging_debug(self) -> None:
        setup_logging(verbose=False, debug=True)


class TestResolveCommand:
    def test_resolve_json(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        source = tmp_path / "Sandbox"
        root = tmp_path / "Saturn"

        code = main(
            [
                "resolve",
                "-S",
                str(source),
                "-B",
                str(source / "Build"),
                "-c",
                "release",
                f"SATURN_DIR={root}",
            ]
        )

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "Sandbox"
        assert data["configuration"] == "Release"
        assert len(data["library_paths"]) == 2 + len(VENDOR_CATALOG)
        assert data["includes"][0] == str(source)
        assert "flags" not in data

    def test_resolve_with_msvc_flags(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("SATURN_DIR", str(tmp_path / "Saturn"))
        monkeypatch.setenv("SATBUILD_CONFIG", "Dist")

        code = main(
            ["resolve", "-n", "Game", "-S", str(tmp_path), "--flags", "msvc"]
        )

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["configuration"] == "Dist"
        assert data["flags"]["libs"][0] == "Saturn.lib"
        assert data["flags"]["defines"] == ["/DSATURN_SS_IMPORT"]

    def test_resolve_without_root_fails(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR):
            code = main(["resolve", "-S", str(tmp_path)])

        assert code == 1
        assert "SATURN_DIR" in caplog.text

    def test_resolve_unknown_config_fails(self, tmp_path: Path) -> None:
        code = main(
            ["resolve", "-S", str(tmp_path), "-c", "Fast", f"SATURN_DIR={tmp_path}"]
        )
        assert code == 1


class TestScanCommand:
    def test_scan_extension(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "a.cpp").write_text("")
        (tmp_path / "a.h").write_text("")

        code = main(["scan", str(tmp_path), "--ext", ".cpp"])

        assert code == 0
        assert capsys.readouterr().out.splitlines() == [str(tmp_path / "a.cpp")]

    def test_scan_source_only(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "main.cpp").write_text("")
        (tmp_path / "Intermediate").mkdir()
        (tmp_path / "Intermediate" / "gen.cpp").write_text("")

        code = main(["scan", str(tmp_path), "--source-only"])

        assert code == 0
        assert capsys.readouterr().out.splitlines() == [
            str(tmp_path / "src" / "main.cpp")
        ]

    def test_scan_missing_directory(self, tmp_path: Path) -> None:
        assert main(["scan", str(tmp_path / "missing")]) == 1

    def test_no_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 1
