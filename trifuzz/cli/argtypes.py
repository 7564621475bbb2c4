import argparse
from typing import Dict, Iterable, Mapping, Tuple, Union

from ..fuzzy.model.presets import PRESETS

SYSTEM_CHOICES = sorted(PRESETS)
SWEEP_DEFAULTS = (-1.0, 1.0, 0.25)  # start, stop, by


def parse_kv(s: str) -> Tuple[str, float]:
    """'distance=0.2' -> ('distance', 0.2)"""
    if "=" not in s:
        raise argparse.ArgumentTypeError(f"Invalid item: '{s}' (expected 'name=value').")
    k, v = (t.strip() for t in s.split("=", 1))
    if not k:
        raise argparse.ArgumentTypeError(f"Empty name in: '{s}'.")
    try:
        return k, float(v)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a number: '{v}' (in '{s}').") from None


def parse_keyvals(kvs: Union[None, Mapping[str, float], Iterable[Union[str, Tuple[str, float]]]]) -> Dict[str, float]:
    """
    Accepts:
      - None
      - {"x": 1, "y": 2}          (run files)
      - ["x=1", "y=2"]            (run files)
      - [("x", 1.0), ("y", 2.0)]  (already parsed by argparse)
    """
    if not kvs:
        return {}
    if isinstance(kvs, Mapping):
        return {str(k): float(v) for k, v in kvs.items()}
    out: Dict[str, float] = {}
    for item in kvs:
        k, v = parse_kv(item) if isinstance(item, str) else item
        out[k] = float(v)
    return out


def positive_float(s: str) -> float:
    v = float(s)
    if v <= 0.0:
        raise argparse.ArgumentTypeError(f"must be > 0 (got {s})")
    return v
