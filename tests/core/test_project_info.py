# SPDX-License-Identifier: MIT
"""Tests for satbuild.core.project_info."""

from pathlib import Path

import pytest

from satbuild.core.errors import ConfigurationError
from satbuild.core.project_info import ProjectInfo


class TestProjectInfo:
    def test_strings_become_paths(self, tmp_path) -> None:
        info = ProjectInfo("Game", str(tmp_path / "src"), str(tmp_path / "build"))
        assert info.source_dir == tmp_path / "src"
        assert isinstance(info.build_dir, Path)

    def test_valid(self, project) -> None:
        project.validate()

    def test_is_immutable(self, project) -> None:
        with pytest.raises(AttributeError):
            project.name = "Other"

    def test_empty_name(self, tmp_path) -> None:
        info = ProjectInfo("", tmp_path, tmp_path)
        with pytest.raises(ConfigurationError, match="name"):
            info.validate()

    def test_empty_source_dir(self, tmp_path) -> None:
        info = ProjectInfo("Game", "", tmp_path)
        with pytest.raises(ConfigurationError, match="source_dir"):
            info.validate()

    def test_relative_build_dir(self, tmp_path) -> None:
        info = ProjectInfo("Game", tmp_path, Path("build"))
        with pytest.raises(ConfigurationError, match="build_dir"):
            info.validate()
