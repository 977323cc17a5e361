"""Menu layout: one gaze target per scene tile."""
from __future__ import annotations

from typing import Callable

from tick_gaze import EventBus, GazeBoard, GazeTargetConfig, Pose

SCENES = [
    ("forest", "Forest", -1.6),
    ("harbor", "Harbor", 0.0),
    ("summit", "Summit", 1.6),
]


def build_board(
    bus: EventBus,
    on_commit: Callable[[str], None],
    dwell: float,
    fill_curve: str,
) -> tuple[GazeBoard, dict[str, str]]:
    board = GazeBoard(bus=bus, on_commit=on_commit)
    labels: dict[str, str] = {}
    for tid, destination, x in SCENES:
        board.add(GazeTargetConfig(
            target_id=tid,
            destination=destination,
            dwell_threshold=dwell,
            fill_curve=fill_curve,
            rest_pose=Pose(position=(x, 0.0, 0.0), scale=(1.0, 1.0, 1.0)),
        ))
        labels[tid] = destination
    return board, labels
