"""tick-gaze - Dwell-select gaze interaction for tick-driven hosts."""
from __future__ import annotations

from tick_gaze.animator import TweenAnimator, TweenState
from tick_gaze.board import GazeBoard
from tick_gaze.bus import EventBus
from tick_gaze.clock import FrameClock, FrameContext
from tick_gaze.config import GazeTargetConfig
from tick_gaze.curves import CURVES, evaluate, keyframes, resolve_curve
from tick_gaze.cursor import CursorState, GazeCursor
from tick_gaze.selector import DwellSelector
from tick_gaze.systems import make_gaze_system
from tick_gaze.types import (
    Committed,
    ConfigurationError,
    GazeEnd,
    GazeError,
    GazeEvent,
    GazeStart,
    HitResult,
    MissingDestinationError,
    Phase,
    Pose,
    UnknownTargetError,
)

__all__ = [
    "GazeBoard",
    "DwellSelector",
    "make_gaze_system",
    "TweenAnimator",
    "TweenState",
    "EventBus",
    "FrameClock",
    "FrameContext",
    "GazeTargetConfig",
    "CURVES",
    "evaluate",
    "keyframes",
    "resolve_curve",
    "GazeCursor",
    "CursorState",
    "Pose",
    "HitResult",
    "Phase",
    "GazeStart",
    "GazeEnd",
    "Committed",
    "GazeEvent",
    "GazeError",
    "ConfigurationError",
    "MissingDestinationError",
    "UnknownTargetError",
]
