"""DwellSelector - gaze enter/exit detection, dwell timer and one-shot commit."""
from __future__ import annotations

import logging

from tick_gaze.animator import TweenAnimator
from tick_gaze.config import GazeTargetConfig
from tick_gaze.curves import evaluate
from tick_gaze.types import (
    Committed,
    GazeEnd,
    GazeEvent,
    GazeStart,
    HitResult,
    MissingDestinationError,
    Phase,
    Pose,
    TargetId,
)

logger = logging.getLogger(__name__)


class DwellSelector:
    """State machine for one gaze target: IDLE -> GAZING -> COMMITTED.

    COMMITTED is terminal until ``reset()``. Each ``tick`` performs at most
    one phase transition and returns the events it raised, in order.
    """

    def __init__(self, config: GazeTargetConfig) -> None:
        self._config = config
        self._destination = config.destination
        self._phase = Phase.IDLE
        self._elapsed = 0.0
        self._progress = 0.0
        self._animator: TweenAnimator | None = None

    @property
    def config(self) -> GazeTargetConfig:
        return self._config

    @property
    def target_id(self) -> TargetId:
        return self._config.target_id

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def destination(self) -> str | None:
        return self._destination

    @property
    def animator(self) -> TweenAnimator | None:
        return self._animator

    def set_destination(self, destination: str | None) -> None:
        self._destination = destination

    def progress(self) -> float:
        return self._progress

    def pose(self) -> Pose:
        if self._animator is None:
            return self._config.rest_pose
        return self._animator.pose

    # --- Stepping ---

    def tick(self, hit: HitResult | None, dt: float) -> list[GazeEvent]:
        dt = max(dt, 0.0)
        on_target = hit is not None and hit.target_id == self._config.target_id
        events: list[GazeEvent] = []

        if self._phase is Phase.IDLE:
            if on_target:
                self._enter(events)
                # Commit is checked from the next tick on, even if dt already
                # covers the threshold.
                self._accumulate(dt)
        elif self._phase is Phase.GAZING:
            if on_target:
                self._accumulate(dt)
                if self._elapsed >= self._config.dwell_threshold:
                    self._commit(events)
            else:
                self._exit(events)

        if self._animator is not None:
            self._animator.advance(dt)
        return events

    def manual_commit(self) -> list[GazeEvent]:
        """Commit now, bypassing the timer. No-op once committed."""
        events: list[GazeEvent] = []
        if self._phase is not Phase.COMMITTED:
            self._commit(events)
        return events

    def reset(self, snap_to_rest: bool = False) -> None:
        """Return to IDLE from any phase.

        The hover tween is redirected back to rest from the current pose, or
        jumps straight there with ``snap_to_rest``.
        """
        if self._phase is not Phase.IDLE:
            logger.debug("Gaze target %r reset from %s", self.target_id, self._phase.value)
        self._phase = Phase.IDLE
        self._elapsed = 0.0
        self._progress = 0.0
        if self._animator is not None:
            if snap_to_rest:
                self._animator.snap_to_rest()
            else:
                self._animator.trigger(False)

    def teardown(self) -> None:
        if self._animator is not None:
            self._animator.cancel()

    # --- Transitions ---

    def _hover(self, hovering: bool) -> None:
        if self._animator is None:
            cfg = self._config
            self._animator = TweenAnimator(
                rest_pose=cfg.rest_pose,
                hover_offset=cfg.hover_offset,
                hover_scale_factor=cfg.hover_scale_factor,
                duration=cfg.hover_duration,
                curve=cfg.hover,
            )
        self._animator.trigger(hovering)

    def _accumulate(self, dt: float) -> None:
        self._elapsed += dt
        ratio = self._elapsed / self._config.dwell_threshold
        self._progress = evaluate(self._config.fill, ratio)

    def _enter(self, events: list[GazeEvent]) -> None:
        logger.debug("Gaze entered %r", self.target_id)
        self._phase = Phase.GAZING
        self._elapsed = 0.0
        self._progress = 0.0
        events.append(GazeStart(self.target_id))
        self._hover(True)

    def _exit(self, events: list[GazeEvent]) -> None:
        logger.debug("Gaze exited %r after %.3fs", self.target_id, self._elapsed)
        self._phase = Phase.IDLE
        self._elapsed = 0.0
        self._progress = 0.0
        events.append(GazeEnd(self.target_id))
        self._hover(False)

    def _commit(self, events: list[GazeEvent]) -> None:
        self._phase = Phase.COMMITTED
        self._elapsed = 0.0
        self._progress = 1.0
        if not self._destination:
            logger.warning("Gaze target %r committed with no destination", self.target_id)
            events.append(MissingDestinationError(self.target_id))
            return
        logger.debug("Gaze target %r committed to %r", self.target_id, self._destination)
        events.append(Committed(self.target_id, self._destination))
