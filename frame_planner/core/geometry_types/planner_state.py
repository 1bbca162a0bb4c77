from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from frame_planner.core.geometry_types.plan_result import PlanResult


@dataclass(frozen=True, slots=True)
class Unconfigured:
    """No plan computed yet; every post-configure accessor is rejected."""


@dataclass(frozen=True, slots=True)
class Configured:
    """A plan has been computed and cached for the lifetime of the stage."""

    plan: PlanResult


PlannerState = Union[Unconfigured, Configured]

UNCONFIGURED = Unconfigured()
