"""3-component vector math helpers operating on tuple[float, float, float]."""
from __future__ import annotations

import math

Vec3 = tuple[float, float, float]


def add(a: Vec3, b: Vec3) -> Vec3:
    return tuple(ai + bi for ai, bi in zip(a, b, strict=True))


def sub(a: Vec3, b: Vec3) -> Vec3:
    return tuple(ai - bi for ai, bi in zip(a, b, strict=True))


def mul(a: Vec3, b: Vec3) -> Vec3:
    """Componentwise product."""
    return tuple(ai * bi for ai, bi in zip(a, b, strict=True))


def scale(v: Vec3, s: float) -> Vec3:
    return tuple(vi * s for vi in v)


def lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    return tuple(ai + (bi - ai) * t for ai, bi in zip(a, b, strict=True))


def magnitude(v: Vec3) -> float:
    return math.sqrt(sum(vi * vi for vi in v))


def normalize(v: Vec3) -> Vec3:
    mag = magnitude(v)
    if mag == 0.0:
        return v
    return scale(v, 1.0 / mag)


def distance(a: Vec3, b: Vec3) -> float:
    return magnitude(sub(a, b))
