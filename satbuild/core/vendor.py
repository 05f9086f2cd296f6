# SPDX-License-Identifier: MIT
"""Vendor dependency catalog and binary path resolution.

Each engine vendor library is built by the engine's own build into
``<vendor_root>/<directory>/bin/<Config>-<platform>-<arch>/<project>``.
The resolver computes that directory for a target; it never touches
the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from satbuild.core.errors import ResolutionError
from satbuild.core.kinds import Architecture, BuildConfiguration, output_suffix

if TYPE_CHECKING:
    from collections.abc import Iterable

ALL_CONFIGURATIONS: frozenset[BuildConfiguration] = frozenset(BuildConfiguration)


@dataclass(frozen=True)
class VendorDependency:
    """A third-party library shipped with the engine.

    Attributes:
        name: Stable catalog name.
        directory: Directory under the vendor root holding the library.
        project: Name of the library's output folder inside a bin directory.
        link: Linker token for the library (e.g. "ImGui.lib").
        configurations: Configurations the library has binaries for.
    """

    name: str
    directory: str
    project: str
    link: str
    configurations: frozenset[BuildConfiguration] = field(
        default=ALL_CONFIGURATIONS
    )


# Order matters: library paths and links are emitted in this order.
VENDOR_CATALOG: tuple[VendorDependency, ...] = (
    VendorDependency("Ruby", "Ruby", "Ruby", "Ruby.lib"),
    VendorDependency("ImGui", "imgui", "ImGui", "ImGui.lib"),
    VendorDependency("shaderc", "shaderc", "shaderc", "shaderc.lib"),
    VendorDependency("SPIRV-Cross", "SPIRV-Cross", "SPIRV-Cross", "SPIRV-Cross.lib"),
    VendorDependency("yaml-cpp", "yaml-cpp", "yaml-cpp", "yaml-cpp.lib"),
    VendorDependency("Tracy", "tracy", "Tracy", "Tracy.lib"),
    VendorDependency("zlib", "zlib", "zlib", "zlib.lib"),
)


class BuildSelection(Protocol):
    """Anything carrying a selected configuration and architecture set."""

    @property
    def configuration(self) -> BuildConfiguration: ...

    @property
    def architectures(self) -> Iterable[Architecture]: ...


class VendorResolver:
    """Maps a vendor dependency and a target to its binary directory.

    Attributes:
        vendor_root: Directory containing every vendor library.
    """

    def __init__(self, vendor_root: Path) -> None:
        self.vendor_root = Path(vendor_root)

    def resolve(self, dependency: VendorDependency, target: BuildSelection) -> Path:
        """Return the directory holding ``dependency``'s binaries for ``target``.

        Args:
            dependency: Catalog entry to resolve.
            target: Target with a fixed configuration and one architecture.

        Returns:
            Absolute path of the binary directory.

        Raises:
            ResolutionError: If the dependency has no binaries for the
                target's configuration, or the target's architecture set
                does not name exactly one architecture.
        """
        configuration = target.configuration
        if configuration not in dependency.configurations:
            raise ResolutionError(
                dependency.name,
                configuration,
                "no binaries are built for this configuration",
            )

        architectures = list(target.architectures)
        if len(architectures) != 1:
            raise ResolutionError(
                dependency.name,
                configuration,
                f"expected exactly one architecture, got {len(architectures)}",
            )

        suffix = output_suffix(configuration, architectures[0])
        return self.vendor_root / dependency.directory / "bin" / suffix / dependency.project
