"""Scripted scenario runner for gaze boards.

A scenario is a JSON object::

    {
      "targets": [{"id": "scene1", "destination": "Scene1", "dwell_threshold": 2.0}],
      "steps": [
        {"hit": "scene1", "dt": 0.25, "repeat": 10},
        {"reset": "scene1"},
        {"manual_commit": "scene1"}
      ]
    }

Each tick step produces one record per frame; reset and manual_commit steps
produce one record each.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from tick_gaze.board import GazeBoard
from tick_gaze.config import GazeTargetConfig
from tick_gaze.types import (
    Committed,
    ConfigurationError,
    GazeEnd,
    GazeError,
    GazeEvent,
    GazeStart,
    HitResult,
    MissingDestinationError,
)

logger = logging.getLogger(__name__)


def event_to_dict(event: GazeEvent) -> dict[str, Any]:
    if isinstance(event, GazeStart):
        return {"type": "gaze_start", "target": event.target_id}
    if isinstance(event, GazeEnd):
        return {"type": "gaze_end", "target": event.target_id}
    if isinstance(event, Committed):
        return {"type": "committed", "target": event.target_id, "destination": event.destination}
    if isinstance(event, MissingDestinationError):
        return {"type": "missing_destination", "target": event.target_id}
    raise TypeError(f"Not a gaze event: {event!r}")


def _record(board: GazeBoard, step: str, events: list[GazeEvent]) -> dict[str, Any]:
    return {
        "frame": board.clock.frame_number,
        "step": step,
        "events": [event_to_dict(e) for e in events],
        "progress": {str(tid): round(board.progress(tid), 6) for tid in board.targets()},
        "phase": {str(tid): board.phase(tid).value for tid in board.targets()},
    }


def build_board(data: dict[str, Any]) -> GazeBoard:
    board = GazeBoard()
    for raw in data.get("targets", []):
        board.add(GazeTargetConfig.from_dict(raw))
    return board


def run_scenario(data: dict[str, Any]) -> list[dict[str, Any]]:
    """Run a scenario and return one record per frame or command step."""
    board = build_board(data)
    records: list[dict[str, Any]] = []
    for step in data.get("steps", []):
        if "manual_commit" in step:
            events = board.manual_commit(step["manual_commit"])
            records.append(_record(board, "manual_commit", events))
        elif "reset" in step:
            board.reset(step["reset"], snap_to_rest=step.get("snap_to_rest", False))
            records.append(_record(board, "reset", []))
        elif "dt" in step:
            target = step.get("hit")
            hit = HitResult(target) if target is not None else None
            for _ in range(int(step.get("repeat", 1))):
                events = board.tick(hit, float(step["dt"]))
                records.append(_record(board, "tick", events))
        else:
            raise ConfigurationError(f"Unrecognized scenario step: {step!r}")
    return records


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="tick-gaze",
        description="Run a scripted dwell-select scenario and print one JSON line per step",
    )
    p.add_argument("scenario", help="Path to a scenario JSON file ('-' for stdin)")
    p.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: WARNING)")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.scenario == "-":
            data = json.load(sys.stdin)
        else:
            with open(args.scenario, encoding="utf-8") as fh:
                data = json.load(fh)
    except OSError as exc:
        logger.error("Cannot read scenario: %s", exc)
        return 2
    except json.JSONDecodeError as exc:
        logger.error("Scenario is not valid JSON: %s", exc)
        return 2

    try:
        records = run_scenario(data)
    except GazeError as exc:
        logger.error("Invalid scenario: %s", exc)
        return 2

    indent = 2 if args.pretty else None
    for record in records:
        print(json.dumps(record, indent=indent))
    return 0
