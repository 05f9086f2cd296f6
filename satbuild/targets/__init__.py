# SPDX-License-Identifier: MIT
"""Build plans by target kind.

A plan is the ordered tuple of steps that initializes a target. Every plan
starts with the base defaults.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from satbuild.core.errors import ConfigurationError
from satbuild.core.target import base_defaults, run_pipeline
from satbuild.targets.game import GAME_STEPS

if TYPE_CHECKING:
    from satbuild.core.target import Step, TargetContext, TargetSpec

PLANS: dict[str, tuple[Step, ...]] = {
    "user": (base_defaults,),
    "game": (base_defaults, *GAME_STEPS),
}


def get_plan(kind: str) -> tuple[Step, ...]:
    """Return the steps for a target kind.

    Raises:
        ConfigurationError: If the kind is unknown.
    """
    try:
        return PLANS[kind]
    except KeyError:
        known = ", ".join(sorted(PLANS))
        raise ConfigurationError(
            f"unknown target kind {kind!r} (expected one of: {known})"
        ) from None


def build_target(context: TargetContext, kind: str = "game") -> TargetSpec:
    """Initialize a target of the given kind."""
    return run_pipeline(kind, get_plan(kind), context)


__all__ = ["PLANS", "build_target", "get_plan"]
