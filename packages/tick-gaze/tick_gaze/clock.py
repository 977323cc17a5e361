"""FrameClock and FrameContext for variable-timestep hosts."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    elapsed: float


class FrameClock:
    def __init__(self) -> None:
        self._frame_number = 0
        self._elapsed = 0.0

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, dt: float) -> FrameContext:
        dt = max(dt, 0.0)
        self._frame_number += 1
        self._elapsed += dt
        return FrameContext(
            frame_number=self._frame_number,
            dt=dt,
            elapsed=self._elapsed,
        )

    def reset(self, frame_number: int = 0) -> None:
        self._frame_number = frame_number
        self._elapsed = 0.0
