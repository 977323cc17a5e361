"""System factory plugging a GazeBoard into a tick engine."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tick_gaze.board import GazeBoard
from tick_gaze.types import GazeEvent, HitResult

if TYPE_CHECKING:
    from tick import TickContext, World


def make_gaze_system(
    board: GazeBoard,
    ray_cast: Callable[[World, TickContext], HitResult | None],
    on_events: Callable[[World, TickContext, list[GazeEvent]], None] | None = None,
) -> Callable[[World, TickContext], None]:
    """Return a system that ticks ``board`` once per engine tick.

    ``ray_cast`` supplies the current hit result; the board advances by
    ``ctx.dt``. ``on_events`` sees each non-empty batch of events.
    """

    def gaze_system(world: World, ctx: TickContext) -> None:
        events = board.tick(ray_cast(world, ctx), ctx.dt)
        if events and on_events is not None:
            on_events(world, ctx, events)

    return gaze_system
