# SPDX-License-Identifier: MIT
"""Compiler/linker token formatting for an initialized target.

The target model keeps raw paths, defines and library names. This module
formats them for a compiler/linker command line. The formatting (prefixes
like -I, -D, -L, -l) lives here rather than in the target so that MSVC
and GCC-style tools can share one TargetSpec.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from satbuild.core.target import TargetSpec


@dataclass
class CompileLinkContext:
    """Context for C/C++ compilation and linking.

    Attributes:
        includes: Include directories (without -I prefix).
        defines: Preprocessor definitions (without -D prefix).
        libs: Libraries to link (without -l prefix).
        libdirs: Library search directories (without -L prefix).
        include_prefix: Prefix for include directories (default: "-I").
        define_prefix: Prefix for preprocessor definitions (default: "-D").
        libdir_prefix: Prefix for library directories (default: "-L").
        lib_prefix: Prefix for libraries (default: "-l").
    """

    includes: list[str] = field(default_factory=list)
    defines: list[str] = field(default_factory=list)
    libs: list[str] = field(default_factory=list)
    libdirs: list[str] = field(default_factory=list)

    include_prefix: str = "-I"
    define_prefix: str = "-D"
    libdir_prefix: str = "-L"
    lib_prefix: str = "-l"

    def format_lib(self, lib: str) -> str:
        # Link tokens are MSVC-style file names; -l wants the bare name.
        name = lib[: -len(".lib")] if lib.endswith(".lib") else lib
        return f"{self.lib_prefix}{name}"

    def get_variables(self) -> dict[str, list[str]]:
        """Return token lists keyed by variable name.

        Keys: includes, defines, libs, libdirs. Empty lists are omitted.
        Each path or define stays a single token, so paths containing
        spaces survive intact; quoting is the consumer's job.
        """
        result: dict[str, list[str]] = {}

        if self.includes:
            result["includes"] = [
                f"{self.include_prefix}{inc}" for inc in self.includes
            ]

        if self.defines:
            result["defines"] = [f"{self.define_prefix}{d}" for d in self.defines]

        if self.libs:
            result["libs"] = [self.format_lib(lib) for lib in self.libs]

        if self.libdirs:
            result["libdirs"] = [f"{self.libdir_prefix}{d}" for d in self.libdirs]

        return result

    @classmethod
    def from_target(cls, spec: TargetSpec) -> CompileLinkContext:
        """Create a context from an initialized target.

        Defines are sorted so the output is stable between runs.
        """
        return cls(
            includes=[str(p) for p in spec.includes],
            defines=sorted(spec.defines),
            libs=list(spec.links),
            libdirs=[str(p) for p in spec.library_paths],
        )


@dataclass
class MsvcCompileLinkContext(CompileLinkContext):
    """Context for MSVC compilation and linking."""

    include_prefix: str = "/I"
    define_prefix: str = "/D"
    libdir_prefix: str = "/LIBPATH:"
    lib_prefix: str = ""  # MSVC uses full library names (foo.lib)

    def format_lib(self, lib: str) -> str:
        if lib.endswith(".lib"):
            return lib
        return f"{lib}.lib"
