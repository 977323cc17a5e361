"""Shaping curves mapping normalized time to normalized progress."""
from __future__ import annotations

from bisect import bisect_right
from typing import Callable, Sequence, Union

from tick_gaze.types import ConfigurationError

Curve = Callable[[float], float]
CurveSpec = Union[str, Curve, Sequence[Sequence[float]]]


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def smoothstep(t: float) -> float:
    return t * t * (3 - 2 * t)


CURVES: dict[str, Curve] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "smoothstep": smoothstep,
}

DEFAULT_CURVE = "smoothstep"


def _clamp01(x: float) -> float:
    if x < 0.0:
        return 0.0
    if x > 1.0:
        return 1.0
    return x


def evaluate(curve: Curve, t: float) -> float:
    """Evaluate ``curve`` at ``t``, clamping both input and output to [0, 1]."""
    return _clamp01(curve(_clamp01(t)))


def keyframes(points: Sequence[Sequence[float]]) -> Curve:
    """Build a piecewise-linear curve through ``(t, value)`` points.

    Points must run from (0, 0) to (1, 1) with strictly increasing t and
    non-decreasing values.
    """
    pts = [(float(p[0]), float(p[1])) for p in points]
    if len(pts) < 2:
        raise ConfigurationError("keyframe curve needs at least two points")
    if pts[0] != (0.0, 0.0) or pts[-1] != (1.0, 1.0):
        raise ConfigurationError("keyframe curve must start at (0, 0) and end at (1, 1)")
    for (t0, v0), (t1, v1) in zip(pts, pts[1:]):
        if t1 <= t0:
            raise ConfigurationError(f"keyframe times must increase, got {t0} then {t1}")
        if v1 < v0:
            raise ConfigurationError(f"keyframe values must not decrease, got {v0} then {v1}")

    times = [t for t, _ in pts]

    def keyframe_curve(t: float) -> float:
        i = bisect_right(times, t)
        if i <= 0:
            return pts[0][1]
        if i >= len(pts):
            return pts[-1][1]
        t0, v0 = pts[i - 1]
        t1, v1 = pts[i]
        return v0 + (v1 - v0) * (t - t0) / (t1 - t0)

    return keyframe_curve


def resolve_curve(value: CurveSpec) -> Curve:
    """Turn a curve name, callable, or keyframe list into a callable."""
    if isinstance(value, str):
        fn = CURVES.get(value)
        if fn is None:
            raise ConfigurationError(
                f"Unknown curve {value!r}, expected one of {sorted(CURVES)}"
            )
        return fn
    if callable(value):
        _check_endpoints(value)
        return value
    try:
        return keyframes(value)
    except ConfigurationError:
        raise
    except (TypeError, ValueError, IndexError) as exc:
        raise ConfigurationError(f"Cannot build a curve from {value!r}") from exc


def _check_endpoints(curve: Curve) -> None:
    try:
        start, end = curve(0.0), curve(1.0)
    except Exception as exc:
        raise ConfigurationError(f"Curve {curve!r} cannot be evaluated") from exc
    if abs(start) > 1e-9 or abs(end - 1.0) > 1e-9:
        raise ConfigurationError(
            f"Curve {curve!r} must map 0 to 0 and 1 to 1, got {start} and {end}"
        )
