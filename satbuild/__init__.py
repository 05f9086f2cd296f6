# SPDX-License-Identifier: MIT
"""
satbuild: target configuration and dependency resolution for Saturn projects.

Given a project and a build configuration, satbuild computes the include
paths, library paths, link libraries and defines needed to build it
against the Saturn engine, and discovers the project's source files.
"""

from __future__ import annotations

import json
import os

from satbuild.core.errors import (
    ConfigurationError,
    ResolutionError,
    SatbuildError,
)
from satbuild.core.kinds import Architecture, BuildConfiguration
from satbuild.core.project_info import ProjectInfo
from satbuild.core.scanner import FilterMode, ScanResult, find_sources, scan
from satbuild.core.target import TargetContext, TargetSpec
from satbuild.core.vendor import VENDOR_CATALOG, VendorDependency, VendorResolver
from satbuild.targets import build_target

__version__ = "0.1.0"

# Internal storage for CLI variables
_cli_vars: dict[str, str] | None = None


def get_var(name: str, default: str | None = None) -> str | None:
    """Get a build variable set on the command line or from environment.

    Variables can be set when invoking satbuild:
        satbuild resolve SATURN_DIR=/opt/saturn

    Precedence (highest to lowest):
        1. Command line: satbuild ... VAR=value (passed as SATBUILD_VARS)
        2. Environment variable: VAR=value satbuild ...

    Args:
        name: Variable name.
        default: Default value if not set.

    Returns:
        The variable value, or default if not set.
    """
    global _cli_vars

    # Lazy-load CLI vars from environment on first access
    if _cli_vars is None:
        satbuild_vars = os.environ.get("SATBUILD_VARS")
        if satbuild_vars:
            try:
                _cli_vars = json.loads(satbuild_vars)
            except json.JSONDecodeError:
                _cli_vars = {}
        else:
            _cli_vars = {}

    if name in _cli_vars:
        return _cli_vars[name]

    return os.environ.get(name, default)


def _reset_vars() -> None:
    """Forget cached CLI variables (used by the CLI and tests)."""
    global _cli_vars
    _cli_vars = None


def get_configuration(default: str = "Debug") -> BuildConfiguration:
    """Get the selected build configuration.

    Precedence (highest to lowest):
        1. SATBUILD_CONFIG (set by the satbuild CLI)
        2. CONFIG environment variable
        3. default parameter

    Raises:
        ConfigurationError: If the selected name is not a known configuration.
    """
    name = os.environ.get("SATBUILD_CONFIG") or os.environ.get("CONFIG") or default
    return BuildConfiguration.parse(name)


def get_saturn_root() -> str | None:
    """Get the engine root from the SATURN_DIR variable, or None if unset."""
    return get_var("SATURN_DIR")


__all__ = [
    "__version__",
    # Settings
    "get_var",
    "get_configuration",
    "get_saturn_root",
    # Errors
    "SatbuildError",
    "ConfigurationError",
    "ResolutionError",
    # Model
    "Architecture",
    "BuildConfiguration",
    "ProjectInfo",
    "TargetContext",
    "TargetSpec",
    "build_target",
    # Vendors
    "VENDOR_CATALOG",
    "VendorDependency",
    "VendorResolver",
    # Scanning
    "FilterMode",
    "ScanResult",
    "scan",
    "find_sources",
]
