"""Affine maps between numeric intervals."""


def lerp(a: float, b: float, t: float) -> float:
    """Return the point at fraction ``t`` of the way from ``a`` to ``b``.

    ``t`` is not clamped, so values outside [0, 1] extrapolate. Weighting the
    endpoints never forms ``b - a``, which overflows for intervals wider than
    the float range.
    """
    return (1.0 - t) * a + t * b


def inverse_lerp(a: float, b: float, v: float) -> float:
    """Return the fraction of the way ``v`` lies from ``a`` to ``b``.

    Raises:
        ValueError: If ``a == b`` (the interval has no length).
    """
    if a == b:
        raise ValueError(f"Cannot inverse-lerp over an empty interval [{a}, {b}]")
    return (v - a) / (b - a)


def rescale(v: float, min_a: float, max_a: float, min_b: float, max_b: float) -> float:
    """Map ``v`` from the interval (min_a, max_a) onto (min_b, max_b).

    The map is affine: ``min_a`` goes to ``min_b`` and the midpoint of the
    source interval goes to the midpoint of the destination. No clamping is
    applied.

    Args:
        v: Value to rescale.
        min_a: Lower bound of the source interval.
        max_a: Upper bound of the source interval.
        min_b: Lower bound of the destination interval.
        max_b: Upper bound of the destination interval.

    Returns:
        The rescaled value.
    """
    return lerp(min_b, max_b, inverse_lerp(min_a, max_a, v))
