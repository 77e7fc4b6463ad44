"""
Per-ingredient quantity scaling.

scale_quantity(base, policy, factor) applies one ScalingPolicy variant:

    linear        base * factor               (also when no policy is given)
    proportional  base * factor ** exponent   (exponent 0.7 by default)
    sublinear     base * factor ** exponent   (exponent 0.8 by default)
    fixed         base
    discrete      nearest integer, then the nearest permitted value when a set is given

followed by the min clamp and then the max clamp.
"""

import math
from typing import Optional, Sequence

from models.scaling import (
    DiscreteScaling,
    FixedScaling,
    LinearScaling,
    ProportionalScaling,
    ScalingPolicy,
    SublinearScaling,
)


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def snap_to_values(target: float, values: Sequence[float]) -> float:
    """
    Closest permitted value by absolute distance.
    Ties go to the larger value so the result never depends on list order.
    """
    best = None
    for value in values:
        if best is None:
            best = value
            continue
        distance, best_distance = abs(target - value), abs(target - best)
        if distance < best_distance or (distance == best_distance and value > best):
            best = value
    return float(best)


def _clamp(value: float, policy: ScalingPolicy) -> float:
    if policy.min is not None and value < policy.min:
        value = policy.min
    if policy.max is not None and value > policy.max:
        value = policy.max
    return value


def is_identity_factor(factor: float) -> bool:
    """Factor 1, and factors that cannot scale anything (<= 0, NaN, inf)"""
    return not math.isfinite(factor) or factor <= 0 or factor == 1


def scale_quantity(base: float, policy: Optional[ScalingPolicy], factor: float) -> float:
    """
    Scale one base amount by the recipe factor under the given policy.

    Factor 1 is the identity for every policy. Non-positive or non-finite
    factors are treated as 1; this function never raises.
    """
    if is_identity_factor(factor):
        return base

    if policy is None:
        policy = LinearScaling()

    if isinstance(policy, FixedScaling):
        scaled = base
    elif isinstance(policy, (ProportionalScaling, SublinearScaling)):
        scaled = base * factor ** policy.factor
    elif isinstance(policy, DiscreteScaling):
        scaled = _round_half_up(base * factor)
        if policy.values:
            scaled = snap_to_values(scaled, policy.values)
    else:
        scaled = base * factor

    return _clamp(scaled, policy)
