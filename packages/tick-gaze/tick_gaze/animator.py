"""Single-slot interruptible hover tween."""
from __future__ import annotations

from dataclasses import dataclass

from tick_gaze import vec
from tick_gaze.curves import Curve, evaluate, smoothstep
from tick_gaze.types import ConfigurationError, Pose
from tick_gaze.vec import Vec3


@dataclass
class TweenState:
    start: Pose
    target: Pose
    duration: float
    elapsed: float = 0.0
    hovering: bool = False
    curve: Curve = smoothstep


class TweenAnimator:
    """Drives a pose between rest and hovered, retriggerable at any time.

    A new trigger always supersedes the running tween and starts from the
    current interpolated pose.
    """

    def __init__(
        self,
        rest_pose: Pose,
        hover_offset: Vec3,
        hover_scale_factor: float,
        duration: float,
        curve: Curve = smoothstep,
    ) -> None:
        if not duration > 0:
            raise ConfigurationError(f"duration must be positive, got {duration}")
        self._rest = rest_pose
        self._hovered_pose = Pose(
            position=vec.add(rest_pose.position, hover_offset),
            scale=vec.scale(rest_pose.scale, hover_scale_factor),
        )
        self._duration = duration
        self._curve = curve
        self._pose = rest_pose
        self._tween: TweenState | None = None
        self._hovered = False

    @property
    def rest_pose(self) -> Pose:
        return self._rest

    @property
    def hovered_pose(self) -> Pose:
        return self._hovered_pose

    @property
    def pose(self) -> Pose:
        return self._pose

    @property
    def running(self) -> bool:
        return self._tween is not None

    @property
    def hovered(self) -> bool:
        """True once a hover tween has settled, False once a rest tween has."""
        return self._hovered

    @property
    def state(self) -> TweenState | None:
        return self._tween

    def trigger(self, hovering: bool, now_pose: Pose | None = None) -> None:
        """Start (or redirect) the tween toward the hovered or rest pose.

        ``now_pose`` is only used when nothing is running; an in-flight
        tween always restarts from its own interpolated pose.
        """
        if self._tween is None and now_pose is not None:
            self._pose = now_pose
        self._tween = TweenState(
            start=self._pose,
            target=self._hovered_pose if hovering else self._rest,
            duration=self._duration,
            hovering=hovering,
            curve=self._curve,
        )

    def advance(self, dt: float) -> Pose:
        tween = self._tween
        if tween is None:
            return self._pose

        tween.elapsed = min(tween.elapsed + max(dt, 0.0), tween.duration)
        if tween.elapsed >= tween.duration:
            self._pose = tween.target
            self._hovered = tween.hovering
            self._tween = None
            return self._pose

        t = evaluate(tween.curve, tween.elapsed / tween.duration)
        self._pose = Pose(
            position=vec.lerp(tween.start.position, tween.target.position, t),
            scale=vec.lerp(tween.start.scale, tween.target.scale, t),
        )
        return self._pose

    def cancel(self) -> None:
        """Drop the running tween, leaving the pose where it is."""
        self._tween = None
        self._hovered = self._pose == self._hovered_pose

    def snap_to_rest(self) -> Pose:
        self._tween = None
        self._pose = self._rest
        self._hovered = False
        return self._pose
