# SPDX-License-Identifier: MIT
"""Steps for a game project built against the Saturn engine.

Runs after the base defaults. Adds the engine and its vendor headers,
the engine and SharedStorage binaries, and every cataloged vendor library.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from satbuild.core.kinds import Architecture, output_suffix

if TYPE_CHECKING:
    from satbuild.core.target import TargetContext, TargetInputs

logger = logging.getLogger(__name__)

GAME_ARCHITECTURE = Architecture.X64

# Vendor include directories, relative to the vendor root, in search order.
VENDOR_INCLUDE_DIRS: tuple[tuple[str, ...], ...] = (
    ("spdlog", "include"),
    ("vulkan", "include"),
    ("glm",),
    ("Ruby", "src"),  # "Ruby" on disk, case matters off Windows
    ("imgui",),
    ("entt", "include"),
    ("assimp", "include"),
    ("shaderc", "libshaderc", "include"),
    ("SPRIV-Cross", "src"),
    ("vma", "src"),
    ("ImGuizmo", "src"),
    ("yaml-cpp", "include"),
    ("imgui_node_editor",),
    ("physx", "include"),
    ("physx", "include", "pxshared"),
    ("physx", "include", "physx"),
    ("tracy", "src"),
)

ENGINE_LINKS = ("Saturn.lib", "SharedStorage.lib")
SHARED_STORAGE_IMPORT_DEFINE = "SATURN_SS_IMPORT"


def fix_architectures(inputs: TargetInputs, context: TargetContext) -> None:
    """Games always build for x64."""
    inputs.architectures = {GAME_ARCHITECTURE}


def add_engine_includes(inputs: TargetInputs, context: TargetContext) -> None:
    inputs.add_include(context.engine_source_dir)
    for parts in VENDOR_INCLUDE_DIRS:
        inputs.add_include(context.vendor_root.joinpath(*parts))
    inputs.add_include(context.shared_storage_dir / "src")


def add_engine_libraries(inputs: TargetInputs, context: TargetContext) -> None:
    """Link the engine and SharedStorage from their per-configuration bin dirs."""
    bin_dir = context.bin_dir / output_suffix(context.configuration, GAME_ARCHITECTURE)

    for link in ENGINE_LINKS:
        inputs.add_link(link)
    inputs.add_define(SHARED_STORAGE_IMPORT_DEFINE)

    inputs.add_library_path(bin_dir / "Saturn")
    inputs.add_library_path(bin_dir / "SharedStorage")


def add_vendor_libraries(inputs: TargetInputs, context: TargetContext) -> None:
    """One library path and one link per catalog entry, in catalog order."""
    resolver = context.vendor_resolver()
    for dependency in context.catalog:
        path = resolver.resolve(dependency, inputs)
        logger.debug("Vendor %s -> %s", dependency.name, path)
        inputs.add_library_path(path)

    for dependency in context.catalog:
        inputs.add_link(dependency.link)


GAME_STEPS = (
    fix_architectures,
    add_engine_includes,
    add_engine_libraries,
    add_vendor_libraries,
)
