# SPDX-License-Identifier: MIT
"""Target model and initialization pipeline.

A target is the set of compiler/linker inputs for building one project
under one build configuration. It is produced by running a build plan, an
ordered tuple of steps, over a TargetInputs accumulator:

    context = TargetContext.create(project, BuildConfiguration.DEBUG, root)
    spec = run_pipeline("user", (base_defaults,), context)

Steps append to the accumulator in the order they run, and that order is
the compiler/linker search order. The frozen TargetSpec only exists once
every step has succeeded.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from satbuild.core.errors import ConfigurationError
from satbuild.core.kinds import Architecture, BuildConfiguration
from satbuild.core.project_info import ProjectInfo
from satbuild.core.vendor import VENDOR_CATALOG, VendorDependency, VendorResolver

logger = logging.getLogger(__name__)

DEFAULT_ARCHITECTURES: frozenset[Architecture] = frozenset([Architecture.X64])


@dataclass(frozen=True)
class TargetContext:
    """Everything a build plan reads while initializing a target.

    Attributes:
        project: The project being built.
        configuration: The selected build configuration.
        saturn_root: Root of the engine installation.
        catalog: Vendor dependencies to link, in link order.
    """

    project: ProjectInfo
    configuration: BuildConfiguration
    saturn_root: Path
    catalog: tuple[VendorDependency, ...] = VENDOR_CATALOG

    @classmethod
    def create(
        cls,
        project: ProjectInfo,
        configuration: BuildConfiguration,
        saturn_root: Path | str | None,
        catalog: Sequence[VendorDependency] = VENDOR_CATALOG,
    ) -> TargetContext:
        """Create a validated context.

        Raises:
            ConfigurationError: If the project info is incomplete, the
                configuration is not a BuildConfiguration, or the engine
                root is unset, empty or relative.
        """
        project.validate()
        if not isinstance(configuration, BuildConfiguration):
            raise ConfigurationError(
                f"unrecognized build configuration {configuration!r}"
            )
        if saturn_root is None or not str(saturn_root).strip():
            raise ConfigurationError(
                "engine root is not set (set SATURN_DIR to the engine checkout)"
            )
        root = Path(saturn_root)
        if not root.is_absolute():
            raise ConfigurationError(f"engine root must be absolute, got {root}")
        return cls(project, configuration, root, tuple(catalog))

    @classmethod
    def from_environment(
        cls,
        project: ProjectInfo,
        configuration: BuildConfiguration,
    ) -> TargetContext:
        """Create a context taking the engine root from SATURN_DIR."""
        from satbuild import get_saturn_root

        return cls.create(project, configuration, get_saturn_root())

    @property
    def engine_source_dir(self) -> Path:
        return self.saturn_root / "Saturn" / "src"

    @property
    def vendor_root(self) -> Path:
        return self.saturn_root / "Saturn" / "vendor"

    @property
    def shared_storage_dir(self) -> Path:
        return self.saturn_root / "SharedStorage"

    @property
    def bin_dir(self) -> Path:
        return self.saturn_root / "bin"

    def vendor_resolver(self) -> VendorResolver:
        return VendorResolver(self.vendor_root)


@dataclass
class TargetInputs:
    """Build inputs accumulated while a plan runs.

    Paths are normalized on the way in and must be absolute. Duplicates
    are kept, since search order is positional, but reported.
    """

    configuration: BuildConfiguration
    architectures: set[Architecture] = field(default_factory=set)
    includes: list[Path] = field(default_factory=list)
    library_paths: list[Path] = field(default_factory=list)
    links: list[str] = field(default_factory=list)
    defines: set[str] = field(default_factory=set)

    def add_include(self, path: Path | str) -> None:
        self._append_path(self.includes, path, "include path")

    def add_library_path(self, path: Path | str) -> None:
        self._append_path(self.library_paths, path, "library path")

    def add_link(self, library: str) -> None:
        if not library:
            raise ConfigurationError("empty link library name")
        self.links.append(library)

    def add_define(self, define: str) -> None:
        self.defines.add(define)

    @staticmethod
    def _append_path(paths: list[Path], path: Path | str, what: str) -> None:
        if path is None or not str(path).strip():
            raise ConfigurationError(f"empty {what}")
        if not Path(path).is_absolute():
            raise ConfigurationError(f"{what} must be absolute, got {path}")
        normalized = Path(os.path.normpath(path))
        if normalized in paths:
            logger.warning("Duplicate %s: %s", what, normalized)
        paths.append(normalized)


@dataclass(frozen=True)
class TargetSpec:
    """The fully initialized, read-only inputs for one project build.

    Attributes:
        name: Project name.
        kind: Name of the build plan that produced this target.
        architectures: Architectures built for; never empty.
        configuration: The build configuration.
        includes: Include directories in search order.
        library_paths: Library search directories in search order.
        links: Link library tokens in link order.
        defines: Preprocessor definitions.
    """

    name: str
    kind: str
    architectures: frozenset[Architecture]
    configuration: BuildConfiguration
    includes: tuple[Path, ...]
    library_paths: tuple[Path, ...]
    links: tuple[str, ...]
    defines: frozenset[str]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "name": self.name,
            "kind": self.kind,
            "architectures": sorted(a.value for a in self.architectures),
            "configuration": self.configuration.value,
            "includes": [str(p) for p in self.includes],
            "library_paths": [str(p) for p in self.library_paths],
            "links": list(self.links),
            "defines": sorted(self.defines),
        }


Step = Callable[[TargetInputs, TargetContext], None]


def base_defaults(inputs: TargetInputs, context: TargetContext) -> None:
    """Base target step: default architectures and the project's own headers.

    Adds the source root, the project-named source subdirectory and the
    build directory (for generated headers), in that order.
    """
    project = context.project
    inputs.architectures = set(DEFAULT_ARCHITECTURES)
    inputs.add_include(project.source_dir)
    inputs.add_include(project.source_dir / project.name)
    inputs.add_include(project.build_dir)


def run_pipeline(kind: str, steps: Sequence[Step], context: TargetContext) -> TargetSpec:
    """Run a build plan and freeze the result.

    Args:
        kind: Plan name recorded on the produced target.
        steps: Steps to run, in order.
        context: The validated target context.

    Returns:
        The initialized target.

    Raises:
        ConfigurationError: From any step, or if no architecture is selected
            once all steps have run.
        ResolutionError: From any step resolving vendor dependencies.
    """
    inputs = TargetInputs(configuration=context.configuration)
    for step in steps:
        logger.debug(
            "%s: running %s", context.project.name, getattr(step, "__name__", step)
        )
        step(inputs, context)

    if not inputs.architectures:
        raise ConfigurationError(
            f"target {context.project.name!r} selects no architecture"
        )
    if inputs.configuration is not context.configuration:
        raise ConfigurationError(
            f"target {context.project.name!r} changed its build configuration"
        )

    spec = TargetSpec(
        name=context.project.name,
        kind=kind,
        architectures=frozenset(inputs.architectures),
        configuration=inputs.configuration,
        includes=tuple(inputs.includes),
        library_paths=tuple(inputs.library_paths),
        links=tuple(inputs.links),
        defines=frozenset(inputs.defines),
    )
    logger.info(
        "Initialized %s target %s (%s): %d includes, %d library paths, %d links",
        kind,
        spec.name,
        spec.configuration.value,
        len(spec.includes),
        len(spec.library_paths),
        len(spec.links),
    )
    return spec
