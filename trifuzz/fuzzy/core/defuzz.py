import math
from typing import Callable, Iterator, Optional, Tuple
from .types import Float

COG_STEP: Float = 0.02


def _scan(xmin: Float, xmax: Float, step: Float) -> Iterator[Float]:
    """Points xmin, xmin+step, ... up to and including xmax, one at a time."""
    if step <= 0.0:
        raise ValueError(f"integration step must be > 0 (got {step})")
    n = int(math.floor((xmax - xmin) / step + 1e-9))
    x = xmin
    for i in range(n + 1):
        x = xmin + i * step
        yield x
    if xmax - x > 1e-9 * max(1.0, abs(xmax)):
        yield xmax


def moments_on_step(xmin: Float, xmax: Float, step: Float,
                    mu: Callable[[Float], Float]) -> Tuple[Float, Float]:
    """(sum x*mu(x), sum mu(x)) over the sampled range."""
    num = 0.0
    den = 0.0
    for x in _scan(xmin, xmax, step):
        w = mu(x)
        num += x * w
        den += w
    return num, den


def centroid_on_step(xmin: Float, xmax: Float, step: Float,
                     mu: Callable[[Float], Float]) -> Optional[Float]:
    """Center of gravity of mu on [xmin, xmax]; None when the sampled area is zero."""
    num, den = moments_on_step(xmin, xmax, step, mu)
    return num / den if den > 0.0 else None
