"""Electric field and potential from a set of point charges."""

from __future__ import annotations

from typing import Iterable

from emfield.charge import Charge, ChargeType
from emfield.vector import Vector2D

K = 8.99e5
"""Coulomb constant scaled to screen units."""

MIN_DISTANCE = 1.0
"""Charges closer than this to the sample point are ignored."""


def field_at(point: Vector2D, charges: Iterable[Charge]) -> Vector2D:
    """Total field vector at a point.

    Positive charges push outward; every other charge pulls inward.
    """
    total = Vector2D()
    for charge in charges:
        r = point - charge.pos
        dist = r.magnitude()
        if dist < MIN_DISTANCE:
            continue
        e_vec = r.normalized() * (K * charge.magnitude / (dist * dist))
        total += e_vec if charge.kind is ChargeType.POSITIVE else -e_vec
    return total


def voltage_at(point: Vector2D, charges: Iterable[Charge]) -> float:
    """Total potential at a point; non-positive charges contribute negatively."""
    total = 0.0
    for charge in charges:
        dist = (point - charge.pos).magnitude()
        if dist < MIN_DISTANCE:
            continue
        v = K * charge.magnitude / dist
        total += v if charge.kind is ChargeType.POSITIVE else -v
    return total