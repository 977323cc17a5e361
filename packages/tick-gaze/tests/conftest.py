from __future__ import annotations

import pytest
from tick_gaze import GazeTargetConfig, HitResult


@pytest.fixture
def make_config():
    def _make(target_id="scene1", destination="Scene1", **overrides):
        overrides.setdefault("fill_curve", "linear")
        return GazeTargetConfig(target_id=target_id, destination=destination, **overrides)

    return _make


@pytest.fixture
def hit():
    def _hit(target_id="scene1"):
        return HitResult(target_id)

    return _hit
