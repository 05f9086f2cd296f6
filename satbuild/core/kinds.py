# SPDX-License-Identifier: MIT
"""Architectures and build configurations.

Both are closed sets. The output-directory naming used for engine and
vendor binaries is derived from them here and nowhere else.
"""

from __future__ import annotations

from enum import Enum

from satbuild.core.errors import ConfigurationError

# Platform component of binary output directories.
TARGET_PLATFORM = "windows"


class Architecture(Enum):
    X64 = "x64"

    @property
    def bin_token(self) -> str:
        """Architecture name as it appears in binary output directories."""
        return _ARCH_BIN_TOKENS[self]


_ARCH_BIN_TOKENS: dict[Architecture, str] = {
    Architecture.X64: "x86_64",
}


class BuildConfiguration(Enum):
    DEBUG = "Debug"
    RELEASE = "Release"
    DIST = "Dist"

    @classmethod
    def parse(cls, text: str) -> BuildConfiguration:
        """Parse a configuration name, case-insensitively.

        Args:
            text: Name such as "debug" or "Release".

        Returns:
            The matching BuildConfiguration.

        Raises:
            ConfigurationError: If the name is not a known configuration.
        """
        wanted = text.strip().lower()
        for config in cls:
            if config.value.lower() == wanted:
                return config
        known = ", ".join(c.value for c in cls)
        raise ConfigurationError(
            f"unknown build configuration {text!r} (expected one of: {known})"
        )


_CONFIG_DIR_LABELS: dict[BuildConfiguration, str] = {
    BuildConfiguration.DEBUG: "Debug",
    BuildConfiguration.RELEASE: "Release",
    BuildConfiguration.DIST: "Dist",
}


def output_suffix(configuration: BuildConfiguration, architecture: Architecture) -> str:
    """Return the binary output directory name for a configuration/arch pair.

    Example:
        >>> output_suffix(BuildConfiguration.DEBUG, Architecture.X64)
        'Debug-windows-x86_64'

    Raises:
        ConfigurationError: If either value is outside its enumeration.
    """
    try:
        label = _CONFIG_DIR_LABELS[configuration]
    except (KeyError, TypeError):
        raise ConfigurationError(
            f"no output directory for build configuration {configuration!r}"
        ) from None
    if not isinstance(architecture, Architecture):
        raise ConfigurationError(f"unsupported architecture {architecture!r}")
    return f"{label}-{TARGET_PLATFORM}-{architecture.bin_token}"
