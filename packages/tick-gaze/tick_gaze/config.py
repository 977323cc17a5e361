"""Per-target configuration, validated on construction."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from tick_gaze.curves import DEFAULT_CURVE, Curve, CurveSpec, resolve_curve
from tick_gaze.types import ConfigurationError, Pose, TargetId
from tick_gaze.vec import Vec3


@dataclass
class GazeTargetConfig:
    """Immutable-by-convention settings for one dwell-select target.

    Curves may be given as names, callables or keyframe lists; they are
    resolved to callables in ``fill`` and ``hover`` on construction.
    """

    target_id: TargetId
    destination: str | None
    dwell_threshold: float = 2.0
    fill_curve: CurveSpec = DEFAULT_CURVE
    hover_curve: CurveSpec = DEFAULT_CURVE
    hover_offset: Vec3 = (0.0, 0.1, 0.0)
    hover_scale_factor: float = 1.05
    hover_duration: float = 0.3
    rest_pose: Pose = field(default_factory=Pose.identity)
    fill: Curve = field(init=False, repr=False, compare=False)
    hover: Curve = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.target_id is None:
            raise ConfigurationError("target_id is required")
        if not self.destination:
            raise ConfigurationError(f"Target {self.target_id!r}: destination must not be empty")
        if not self.dwell_threshold > 0:
            raise ConfigurationError(
                f"Target {self.target_id!r}: dwell_threshold must be positive, "
                f"got {self.dwell_threshold}"
            )
        if not self.hover_duration > 0:
            raise ConfigurationError(
                f"Target {self.target_id!r}: hover_duration must be positive, "
                f"got {self.hover_duration}"
            )
        if not self.hover_scale_factor > 0:
            raise ConfigurationError(
                f"Target {self.target_id!r}: hover_scale_factor must be positive, "
                f"got {self.hover_scale_factor}"
            )
        self.hover_offset = _vec3(self.target_id, "hover_offset", self.hover_offset)
        if not isinstance(self.rest_pose, Pose):
            raise ConfigurationError(
                f"Target {self.target_id!r}: rest_pose must be a Pose, "
                f"got {type(self.rest_pose).__name__}"
            )
        self.rest_pose = Pose(
            position=_vec3(self.target_id, "rest_pose.position", self.rest_pose.position),
            scale=_vec3(self.target_id, "rest_pose.scale", self.rest_pose.scale),
        )
        self.fill = resolve_curve(self.fill_curve)
        self.hover = resolve_curve(self.hover_curve)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GazeTargetConfig:
        """Build a config from JSON-like data (``id`` is accepted for target_id)."""
        data = dict(data)
        if "id" in data:
            data["target_id"] = data.pop("id")
        allowed = {f.name for f in dataclasses.fields(cls) if f.init}
        unknown = set(data) - allowed
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {sorted(unknown)}")
        if "target_id" not in data or "destination" not in data:
            raise ConfigurationError("Config needs 'id' and 'destination'")
        rest = data.get("rest_pose")
        if isinstance(rest, dict):
            data["rest_pose"] = Pose(
                position=rest.get("position", (0.0, 0.0, 0.0)),
                scale=rest.get("scale", (1.0, 1.0, 1.0)),
            )
        elif rest is not None and not isinstance(rest, Pose):
            raise ConfigurationError(
                f"rest_pose must be a mapping with position/scale, got {rest!r}"
            )
        return cls(**data)


def _vec3(target_id: Any, name: str, value: Any) -> Vec3:
    try:
        if isinstance(value, str):
            raise TypeError(name)
        components = tuple(float(c) for c in value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"Target {target_id!r}: {name} must be 3 numbers, got {value!r}"
        ) from exc
    if len(components) != 3:
        raise ConfigurationError(
            f"Target {target_id!r}: {name} must have 3 components, got {len(components)}"
        )
    return components
