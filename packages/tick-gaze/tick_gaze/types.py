"""Shared data types for gaze selection: poses, hits, phases, events, errors."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Union

from tick_gaze.vec import Vec3

TargetId = Hashable


@dataclass(frozen=True, slots=True)
class Pose:
    position: Vec3
    scale: Vec3

    @classmethod
    def identity(cls) -> Pose:
        return cls(position=(0.0, 0.0, 0.0), scale=(1.0, 1.0, 1.0))


@dataclass(frozen=True, slots=True)
class HitResult:
    """What the gaze ray intersected this tick. point/normal are optional."""

    target_id: TargetId
    point: Vec3 | None = None
    normal: Vec3 | None = None


class Phase(Enum):
    IDLE = "idle"
    GAZING = "gazing"
    COMMITTED = "committed"


@dataclass(frozen=True, slots=True)
class GazeStart:
    target_id: TargetId


@dataclass(frozen=True, slots=True)
class GazeEnd:
    target_id: TargetId


@dataclass(frozen=True, slots=True)
class Committed:
    target_id: TargetId
    destination: str


class GazeError(Exception):
    """Base class for gaze selection errors."""


class ConfigurationError(GazeError, ValueError):
    """Raised when a target is configured with degenerate values."""


class MissingDestinationError(GazeError):
    """Reported in place of Committed when a target commits with no destination.

    Returned as a value from tick/manual_commit, never raised there.
    """

    def __init__(self, target_id: TargetId) -> None:
        self.target_id = target_id
        super().__init__(f"Target {target_id!r} committed with no destination")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MissingDestinationError):
            return NotImplemented
        return self.target_id == other.target_id

    def __hash__(self) -> int:
        return hash((MissingDestinationError, self.target_id))


class UnknownTargetError(GazeError, KeyError):
    """Raised when looking up a target id the board does not manage."""

    def __init__(self, target_id: TargetId) -> None:
        self.target_id = target_id
        super().__init__(f"Unknown gaze target {target_id!r}")


GazeEvent = Union[GazeStart, GazeEnd, Committed, MissingDestinationError]
