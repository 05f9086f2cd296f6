# SPDX-License-Identifier: MIT
"""Custom exceptions for satbuild.

All satbuild exceptions inherit from SatbuildError. Errors raised while a
target is being initialized abort the whole pipeline, so a caller never
sees a partially-initialized target.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from satbuild.core.kinds import BuildConfiguration


class SatbuildError(Exception):
    """Base class for all satbuild exceptions.

    Attributes:
        message: The error message.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(SatbuildError):
    """Required project or root metadata is missing or malformed.

    Also raised for an unknown build configuration or target kind.
    """


class ResolutionError(SatbuildError):
    """A vendor dependency cannot be resolved for a target.

    Attributes:
        dependency: Name of the dependency that failed to resolve.
        configuration: The configuration it was resolved for.
    """

    def __init__(
        self,
        dependency: str,
        configuration: BuildConfiguration | None,
        reason: str,
    ) -> None:
        self.dependency = dependency
        self.configuration = configuration
        config_name = configuration.value if configuration is not None else "?"
        super().__init__(
            f"cannot resolve vendor dependency {dependency} ({config_name}): {reason}"
        )
