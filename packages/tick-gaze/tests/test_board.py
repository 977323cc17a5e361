"""Tests for GazeBoard multi-target hosting."""

import pytest
from tick_gaze import (
    Committed,
    ConfigurationError,
    EventBus,
    GazeBoard,
    GazeEnd,
    GazeStart,
    HitResult,
    MissingDestinationError,
    Phase,
    UnknownTargetError,
)


@pytest.fixture
def board(make_config):
    b = GazeBoard()
    b.add(make_config("scene1", "Scene1", dwell_threshold=1.0))
    b.add(make_config("scene2", "Scene2", dwell_threshold=1.0))
    return b


# --- Registration ---

def test_targets_in_insertion_order(board):
    assert board.targets() == ["scene1", "scene2"]


def test_duplicate_target_rejected(board, make_config):
    with pytest.raises(ConfigurationError, match="Duplicate"):
        board.add(make_config("scene1", "Other"))


def test_remove_target(board):
    board.remove("scene2")
    assert board.targets() == ["scene1"]
    with pytest.raises(UnknownTargetError):
        board.remove("scene2")


def test_unknown_target_lookup(board):
    with pytest.raises(UnknownTargetError):
        board.progress("nope")
    with pytest.raises(KeyError):
        board.pose("nope")


# --- Ticking ---

def test_moving_gaze_between_targets(board):
    """Moving from one target to the next ends one gaze and starts the other."""
    assert board.tick(HitResult("scene1"), 0.25) == [GazeStart("scene1")]
    assert board.tick(HitResult("scene2"), 0.25) == [GazeEnd("scene1"), GazeStart("scene2")]
    assert board.phase("scene1") is Phase.IDLE
    assert board.phase("scene2") is Phase.GAZING


def test_unknown_hit_is_a_miss_for_all(board):
    board.tick(HitResult("scene1"), 0.25)
    assert board.tick(HitResult("wall"), 0.25) == [GazeEnd("scene1")]
    assert board.tick(HitResult("wall"), 0.25) == []


def test_progress_and_pose_read_api(board):
    board.tick(HitResult("scene1"), 0.5)
    assert board.progress("scene1") == pytest.approx(0.5)
    assert board.progress("scene2") == 0.0
    assert board.pose("scene1").position[1] > 0.0
    assert board.pose("scene2") == board.selector("scene2").config.rest_pose


def test_clock_tracks_frames(board):
    board.tick(None, 0.25)
    board.tick(None, 0.5)
    assert board.clock.frame_number == 2
    assert board.clock.elapsed == pytest.approx(0.75)
    assert board.last_context.dt == 0.5


def test_run_frames(board):
    frames = [(HitResult("scene1"), 0.25)] * 6
    events = board.run(frames)
    assert events == [GazeStart("scene1"), Committed("scene1", "Scene1")]


# --- Commit wiring ---

def test_on_commit_invoked_with_destination(make_config):
    loaded = []
    board = GazeBoard(on_commit=loaded.append)
    board.add(make_config("scene1", "Scene1", dwell_threshold=0.5))
    for _ in range(5):
        board.tick(HitResult("scene1"), 0.25)
    assert loaded == ["Scene1"]


def test_manual_commit_dispatches(make_config):
    loaded = []
    board = GazeBoard(on_commit=loaded.append)
    board.add(make_config())
    assert board.manual_commit("scene1") == [Committed("scene1", "Scene1")]
    assert board.manual_commit("scene1") == []
    assert loaded == ["Scene1"]


def test_missing_destination_not_loaded(make_config):
    loaded = []
    board = GazeBoard(on_commit=loaded.append)
    board.add(make_config()).set_destination(None)
    assert board.manual_commit("scene1") == [MissingDestinationError("scene1")]
    assert loaded == []


def test_bus_receives_events_in_order(make_config):
    bus = EventBus()
    seen = []
    bus.subscribe(GazeStart, lambda e: seen.append(("start", e.target_id)))
    bus.subscribe(GazeEnd, lambda e: seen.append(("end", e.target_id)))
    bus.subscribe(Committed, lambda e: seen.append(("commit", e.destination)))

    board = GazeBoard(bus=bus)
    board.add(make_config(dwell_threshold=0.5))
    board.tick(HitResult("scene1"), 0.25)
    board.tick(None, 0.25)
    board.tick(HitResult("scene1"), 0.25)
    board.tick(HitResult("scene1"), 0.25)

    assert seen == [
        ("start", "scene1"),
        ("end", "scene1"),
        ("start", "scene1"),
        ("commit", "Scene1"),
    ]
    assert bus.pending == 0


# --- Reset ---

def test_reset_all(board):
    board.manual_commit("scene1")
    board.manual_commit("scene2")
    board.reset()
    assert board.phase("scene1") is Phase.IDLE
    assert board.phase("scene2") is Phase.IDLE


def test_reset_single(board):
    board.manual_commit("scene1")
    board.manual_commit("scene2")
    board.reset("scene1")
    assert board.phase("scene1") is Phase.IDLE
    assert board.phase("scene2") is Phase.COMMITTED


def test_reset_unknown(board):
    with pytest.raises(UnknownTargetError):
        board.reset("nope")
