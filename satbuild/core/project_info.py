# SPDX-License-Identifier: MIT
"""Project metadata consumed by target initialization and source discovery."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from satbuild.core.errors import ConfigurationError


@dataclass(frozen=True)
class ProjectInfo:
    """Name and root directories of the project being built.

    Populated once per build invocation by the caller and passed explicitly
    to everything that needs it.

    Attributes:
        name: Project name, also the name of its main source subdirectory.
        source_dir: Root of the project's source tree.
        build_dir: Build output directory (holds generated headers).
    """

    name: str
    source_dir: Path
    build_dir: Path

    def __post_init__(self) -> None:
        # Accept plain strings for convenience; keep empty values detectable.
        for attr in ("source_dir", "build_dir"):
            value = getattr(self, attr)
            if value and not isinstance(value, Path):
                object.__setattr__(self, attr, Path(value))

    def validate(self) -> None:
        """Check that every field is usable for building absolute paths.

        Raises:
            ConfigurationError: Naming the first missing or relative field.
        """
        if not self.name or not self.name.strip():
            raise ConfigurationError("project name is not set")
        for attr in ("source_dir", "build_dir"):
            value = getattr(self, attr)
            if not value or str(value) in ("", "."):
                raise ConfigurationError(
                    f"project {self.name!r}: {attr} is not set"
                )
            if not Path(value).is_absolute():
                raise ConfigurationError(
                    f"project {self.name!r}: {attr} must be absolute, got {value}"
                )
