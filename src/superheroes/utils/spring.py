from __future__ import annotations

import math


def _clamp_damping(damping_ratio: float) -> float:
    # Overdamped springs are treated as critically damped.
    return min(max(float(damping_ratio), 1e-6), 1.0)


def spring_progress(t: float, damping_ratio: float, stiffness: float) -> float:
    """Normalized travel of a unit-mass spring released at rest from 0 toward 1.

    Returns 0.0 for ``t <= 0``. Underdamped springs overshoot 1.0 before
    settling; critically damped ones approach it monotonically.
    """
    if t <= 0.0:
        return 0.0
    zeta = _clamp_damping(damping_ratio)
    omega = math.sqrt(stiffness)
    if zeta >= 1.0:
        return 1.0 - (1.0 + omega * t) * math.exp(-omega * t)
    damped = omega * math.sqrt(1.0 - zeta * zeta)
    envelope = math.exp(-zeta * omega * t)
    return 1.0 - envelope * (math.cos(damped * t) + (zeta * omega / damped) * math.sin(damped * t))


def spring_settle_time(damping_ratio: float, stiffness: float, threshold: float) -> float:
    """Time after which the remaining distance stays below ``threshold``."""
    zeta = _clamp_damping(damping_ratio)
    omega = math.sqrt(stiffness)
    if zeta >= 1.0:
        # Solve (1 + w t) e^(-w t) = threshold by fixed-point iteration.
        t = math.log(1.0 / threshold) / omega
        for _ in range(32):
            t = math.log((1.0 + omega * t) / threshold) / omega
        return t
    # Envelope bound of the underdamped response.
    return math.log(1.0 / (threshold * math.sqrt(1.0 - zeta * zeta))) / (zeta * omega)
