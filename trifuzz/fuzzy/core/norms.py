from typing import Iterable
from .types import Float

# Mamdani operators: min for AND/implication, max for aggregation.

def t_min(vals: Iterable[Float]) -> Float:
    it = iter(vals)
    try:
        m = float(next(it))
    except StopIteration:
        return 1.0
    for v in it:
        if v < m: m = float(v)
    return m

def s_max(vals: Iterable[Float]) -> Float:
    it = iter(vals)
    try:
        m = float(next(it))
    except StopIteration:
        return 0.0
    for v in it:
        if v > m: m = float(v)
    return m

def clip(mu: Float, alpha: Float) -> Float:
    """Implication: cut a consequent degree at the rule's firing strength."""
    return mu if mu < alpha else alpha
