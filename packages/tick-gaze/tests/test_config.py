"""Tests for GazeTargetConfig validation and loading."""

import pytest
from tick_gaze import (
    CURVES,
    ConfigurationError,
    DwellSelector,
    GazeStart,
    GazeTargetConfig,
    HitResult,
    Pose,
)


def test_defaults():
    cfg = GazeTargetConfig(target_id="scene1", destination="Scene1")
    assert cfg.dwell_threshold == 2.0
    assert cfg.hover_duration == 0.3
    assert cfg.hover_scale_factor == 1.05
    assert cfg.hover_offset == (0.0, 0.1, 0.0)
    assert cfg.rest_pose == Pose.identity()
    assert cfg.fill is CURVES["smoothstep"]
    assert cfg.hover is CURVES["smoothstep"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"dwell_threshold": 0.0},
        {"dwell_threshold": -1.0},
        {"dwell_threshold": float("nan")},
        {"hover_duration": 0.0},
        {"hover_scale_factor": 0.0},
        {"hover_offset": (0.0, 1.0)},
        {"fill_curve": "wobble"},
        {"hover_curve": [(0, 0), (0.5, 1.2), (1, 1)]},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ConfigurationError):
        GazeTargetConfig(target_id="scene1", destination="Scene1", **overrides)


@pytest.mark.parametrize("destination", ["", None])
def test_empty_destination_rejected(destination):
    with pytest.raises(ConfigurationError, match="destination"):
        GazeTargetConfig(target_id="scene1", destination=destination)


def test_missing_id_rejected():
    with pytest.raises(ConfigurationError):
        GazeTargetConfig(target_id=None, destination="Scene1")


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        GazeTargetConfig(target_id="scene1", destination="Scene1", dwell_threshold=0)


class TestFromDict:

    def test_minimal(self):
        cfg = GazeTargetConfig.from_dict({"id": "menu", "destination": "MainMenu"})
        assert cfg.target_id == "menu"
        assert cfg.destination == "MainMenu"

    def test_full(self):
        cfg = GazeTargetConfig.from_dict({
            "id": "scene1",
            "destination": "Scene1",
            "dwell_threshold": 1.5,
            "fill_curve": [[0, 0], [0.5, 0.25], [1, 1]],
            "hover_curve": "ease_out",
            "hover_offset": [0, 0.2, 0],
            "hover_scale_factor": 1.1,
            "hover_duration": 0.5,
            "rest_pose": {"position": [1, 2, 3], "scale": [2, 2, 2]},
        })
        assert cfg.dwell_threshold == 1.5
        assert cfg.fill(0.5) == pytest.approx(0.25)
        assert cfg.hover is CURVES["ease_out"]
        assert cfg.hover_offset == (0.0, 0.2, 0.0)
        assert cfg.rest_pose == Pose(position=(1, 2, 3), scale=(2, 2, 2))

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="Unknown config keys"):
            GazeTargetConfig.from_dict({"id": "a", "destination": "A", "colour": "red"})

    def test_missing_required(self):
        with pytest.raises(ConfigurationError):
            GazeTargetConfig.from_dict({"id": "a"})


class TestRestPoseValidation:
    """Malformed rest poses are rejected before any tick runs."""

    def test_short_position_from_dict(self):
        with pytest.raises(ConfigurationError, match="rest_pose.position"):
            GazeTargetConfig.from_dict(
                {"id": "a", "destination": "A", "rest_pose": {"position": [0.0, 0.0]}}
            )

    def test_list_rest_pose_from_dict(self):
        with pytest.raises(ConfigurationError, match="rest_pose"):
            GazeTargetConfig.from_dict(
                {"id": "a", "destination": "A", "rest_pose": [[0, 0, 0], [1, 1, 1]]}
            )

    def test_non_pose_rest_pose(self):
        with pytest.raises(ConfigurationError, match="must be a Pose"):
            GazeTargetConfig(target_id="a", destination="A", rest_pose=((0, 0, 0), (1, 1, 1)))

    def test_non_numeric_scale(self):
        with pytest.raises(ConfigurationError, match="rest_pose.scale"):
            GazeTargetConfig(
                target_id="a",
                destination="A",
                rest_pose=Pose(position=(0, 0, 0), scale=("big", 1, 1)),
            )

    def test_rest_pose_components_become_floats(self):
        cfg = GazeTargetConfig(
            target_id="a", destination="A", rest_pose=Pose(position=[1, 2, 3], scale=[2, 2, 2])
        )
        assert cfg.rest_pose.position == (1.0, 2.0, 3.0)
        assert isinstance(cfg.rest_pose.position, tuple)
        assert all(isinstance(c, float) for c in cfg.rest_pose.scale)

    def test_valid_rest_pose_ticks_cleanly(self):
        cfg = GazeTargetConfig.from_dict(
            {"id": "a", "destination": "A", "rest_pose": {"position": [0, 1, 0]}}
        )
        sel = DwellSelector(cfg)
        assert sel.tick(HitResult("a"), 0.1) == [GazeStart("a")]


@pytest.mark.parametrize("offset", [("x", 0, 0), "abc", 5])
def test_non_numeric_hover_offset(offset):
    with pytest.raises(ConfigurationError, match="hover_offset"):
        GazeTargetConfig(target_id="a", destination="A", hover_offset=offset)
