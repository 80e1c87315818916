"""Numerical helpers used by the samplers and the histogram driver.

- Linear interpolation and interval rescaling
- Numerical integration (composite Simpson's rule)
"""

from randgraph.numerics.integration import integrate_simpson
from randgraph.numerics.interpolation import inverse_lerp, lerp, rescale

__all__ = [
    "integrate_simpson",
    "inverse_lerp",
    "lerp",
    "rescale",
]
