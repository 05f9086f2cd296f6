# SPDX-License-Identifier: MIT
"""Shared fixtures for satbuild tests."""

from __future__ import annotations

from pathlib import Path

import pytest

import satbuild
from satbuild.core.kinds import BuildConfiguration
from satbuild.core.project_info import ProjectInfo
from satbuild.core.target import TargetContext


@pytest.fixture(autouse=True)
def _clean_vars(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from SATBUILD_VARS and the cached CLI variables."""
    monkeypatch.setenv("SATBUILD_VARS", "{}")
    monkeypatch.delenv("SATURN_DIR", raising=False)
    monkeypatch.delenv("SATBUILD_CONFIG", raising=False)
    monkeypatch.delenv("CONFIG", raising=False)
    satbuild._reset_vars()
    yield
    satbuild._reset_vars()


@pytest.fixture
def project(tmp_path: Path) -> ProjectInfo:
    return ProjectInfo(
        name="Sandbox",
        source_dir=tmp_path / "Sandbox",
        build_dir=tmp_path / "Sandbox" / "Build",
    )


@pytest.fixture
def saturn_root(tmp_path: Path) -> Path:
    return tmp_path / "Saturn"


@pytest.fixture
def context(project: ProjectInfo, saturn_root: Path) -> TargetContext:
    return TargetContext.create(project, BuildConfiguration.DEBUG, saturn_root)
