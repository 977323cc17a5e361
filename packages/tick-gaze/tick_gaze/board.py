"""GazeBoard - host-facing facade ticking every managed gaze target."""
from __future__ import annotations

import logging
from typing import Callable, Iterable

from tick_gaze.bus import EventBus
from tick_gaze.clock import FrameClock, FrameContext
from tick_gaze.config import GazeTargetConfig
from tick_gaze.selector import DwellSelector
from tick_gaze.types import (
    Committed,
    ConfigurationError,
    GazeEvent,
    HitResult,
    Phase,
    Pose,
    TargetId,
    UnknownTargetError,
)

logger = logging.getLogger(__name__)


class GazeBoard:
    """Owns a set of DwellSelectors and feeds them one hit result per frame.

    Targets are independent; they are ticked in insertion order and their
    events are concatenated in that order. Events are published to ``bus``
    (flushed once per tick) and every ``Committed`` invokes ``on_commit``
    with the destination.
    """

    def __init__(
        self,
        bus: EventBus | None = None,
        on_commit: Callable[[str], None] | None = None,
    ) -> None:
        self._selectors: dict[TargetId, DwellSelector] = {}
        self._clock = FrameClock()
        self._bus = bus
        self._on_commit = on_commit
        self._last_context: FrameContext | None = None

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def bus(self) -> EventBus | None:
        return self._bus

    @property
    def last_context(self) -> FrameContext | None:
        return self._last_context

    # --- Registration ---

    def add(self, config: GazeTargetConfig) -> DwellSelector:
        if config.target_id in self._selectors:
            raise ConfigurationError(f"Duplicate gaze target {config.target_id!r}")
        selector = DwellSelector(config)
        self._selectors[config.target_id] = selector
        return selector

    def remove(self, target_id: TargetId) -> None:
        selector = self._selectors.pop(target_id, None)
        if selector is None:
            raise UnknownTargetError(target_id)
        selector.teardown()

    def targets(self) -> list[TargetId]:
        return list(self._selectors)

    def selector(self, target_id: TargetId) -> DwellSelector:
        try:
            return self._selectors[target_id]
        except KeyError:
            raise UnknownTargetError(target_id) from None

    # --- Stepping ---

    def tick(self, hit: HitResult | None, dt: float) -> list[GazeEvent]:
        self._last_context = self._clock.advance(dt)
        events: list[GazeEvent] = []
        for selector in list(self._selectors.values()):
            events.extend(selector.tick(hit, self._last_context.dt))
        self._dispatch(events)
        return events

    def run(self, frames: Iterable[tuple[HitResult | None, float]]) -> list[GazeEvent]:
        events: list[GazeEvent] = []
        for hit, dt in frames:
            events.extend(self.tick(hit, dt))
        return events

    def manual_commit(self, target_id: TargetId) -> list[GazeEvent]:
        events = self.selector(target_id).manual_commit()
        self._dispatch(events)
        return events

    def reset(self, target_id: TargetId | None = None, snap_to_rest: bool = False) -> None:
        """Reset one target, or every target when ``target_id`` is None."""
        if target_id is None:
            for selector in self._selectors.values():
                selector.reset(snap_to_rest=snap_to_rest)
            return
        self.selector(target_id).reset(snap_to_rest=snap_to_rest)

    # --- Read API ---

    def progress(self, target_id: TargetId) -> float:
        return self.selector(target_id).progress()

    def pose(self, target_id: TargetId) -> Pose:
        return self.selector(target_id).pose()

    def phase(self, target_id: TargetId) -> Phase:
        return self.selector(target_id).phase

    # --- Internal helpers ---

    def _dispatch(self, events: list[GazeEvent]) -> None:
        for event in events:
            if self._bus is not None:
                self._bus.publish(event)
            if isinstance(event, Committed) and self._on_commit is not None:
                logger.info("Loading %r (selected via %r)", event.destination, event.target_id)
                self._on_commit(event.destination)
        if self._bus is not None:
            self._bus.flush()
