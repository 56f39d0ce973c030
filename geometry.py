import math
from typing import Optional, Tuple

Point2D = Tuple[float, float]

# Image coordinates grow downwards, so "up" is negative y.
UP = (0.0, -1.0)


def _round2(value: float) -> float:
    return round(value, 2)


def joint_angle(a: Optional[Point2D], b: Optional[Point2D], c: Optional[Point2D]) -> Optional[float]:
    # Flexion angle at b for the chain a -> b -> c. Reported as 180 minus the
    # angle between the two segment directions, so a straight limb reads 180.
    if a is None or b is None or c is None:
        return None
    abx = b[0] - a[0]
    aby = b[1] - a[1]
    bcx = c[0] - b[0]
    bcy = c[1] - b[1]

    mag_ab = math.hypot(abx, aby)
    mag_bc = math.hypot(bcx, bcy)
    if mag_ab == 0.0 or mag_bc == 0.0:
        return None
    cos_theta = max(-1.0, min(1.0, (abx * bcx + aby * bcy) / (mag_ab * mag_bc)))
    return _round2(180.0 - math.degrees(math.acos(cos_theta)))


def angle_from_vertical(tip: Optional[Point2D], base: Optional[Point2D]) -> Optional[float]:
    # Lean of the base -> tip segment away from image "up". Upright reads 0.
    if tip is None or base is None:
        return None
    vx = tip[0] - base[0]
    vy = tip[1] - base[1]
    mag = math.hypot(vx, vy)
    if mag == 0.0:
        return None
    cos_theta = max(-1.0, min(1.0, (vx * UP[0] + vy * UP[1]) / mag))
    return _round2(math.degrees(math.acos(cos_theta)))


def midpoint(p: Optional[Point2D], q: Optional[Point2D]) -> Optional[Point2D]:
    if p is None or q is None:
        return None
    return (p[0] + q[0]) / 2.0, (p[1] + q[1]) / 2.0
