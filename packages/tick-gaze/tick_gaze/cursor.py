"""Gaze cursor placement along the gaze ray."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Container

from tick_gaze import vec
from tick_gaze.types import HitResult, TargetId
from tick_gaze.vec import Vec3


@dataclass(frozen=True, slots=True)
class CursorState:
    position: Vec3
    hovering: bool


class GazeCursor:
    """Places a cursor just off the surface the gaze ray hits.

    With no hit (or a hit without a point) the cursor floats at
    ``max_distance`` along the ray.
    """

    def __init__(self, surface_offset: float = 0.3, max_distance: float = 10.0) -> None:
        if max_distance <= 0:
            raise ValueError("max_distance must be positive")
        self.surface_offset = surface_offset
        self.max_distance = max_distance

    def place(
        self,
        origin: Vec3,
        direction: Vec3,
        hit: HitResult | None,
        interactive: Container[TargetId] = (),
    ) -> CursorState:
        if hit is not None and hit.point is not None:
            normal = vec.normalize(hit.normal) if hit.normal is not None else (0.0, 0.0, 0.0)
            position = vec.add(hit.point, vec.scale(normal, self.surface_offset))
            return CursorState(position=position, hovering=hit.target_id in interactive)

        position = vec.add(origin, vec.scale(vec.normalize(direction), self.max_distance))
        return CursorState(position=position, hovering=False)
