import math
from typing import Dict, List

from ...fuzzy.model.predictor import Predictor
from ..argtypes import SWEEP_DEFAULTS, parse_keyvals
from .common import system_from_args


def _points(start: float, stop: float, by: float) -> List[float]:
    if by <= 0.0:
        raise SystemExit(f"--by must be > 0 (got {by})")
    if stop < start:
        raise SystemExit(f"--stop must be >= --start (got {start} > {stop})")
    n = int(math.floor((stop - start) / by + 1e-9))
    return [start + i * by for i in range(n + 1)]


def _fmt(y: float, pattern: str = "+f") -> str:
    return "n/a" if math.isnan(y) else format(y, pattern)


def cmd_sweep(args):
    """
    Tabulate the outputs while one input (or two, with --cross) runs over
    [start, stop] in steps of --by. Other inputs are taken from --at.
    """
    pred = Predictor(system_from_args(args))
    fixed: Dict[str, float] = parse_keyvals(getattr(args, "at", None))
    d_start, d_stop, d_by = SWEEP_DEFAULTS
    start = float(getattr(args, "start", None) if getattr(args, "start", None) is not None else d_start)
    stop = float(getattr(args, "stop", None) if getattr(args, "stop", None) is not None else d_stop)
    by = float(getattr(args, "by", None) if getattr(args, "by", None) is not None else d_by)
    xs = _points(start, stop, by)

    name = getattr(args, "input", None) or pred.system.inputs[0].name
    cross = getattr(args, "cross", None)

    if not cross:
        outs = " ".join(v.name for v in pred.system.outputs)
        print(f"{name} => {outs}")
        for x in xs:
            ev = pred.evaluate({**fixed, name: x}, strict=False)
            print(f"{x:+f} => " + " ".join(_fmt(y) for y in ev.outputs))
        return

    # two-input grid, first output only
    oname = pred.system.outputs[0].name
    head = f" {name}\\{cross} |" + "".join(f" {y:+1.2f} |" for y in xs)
    rule = "-" * len(head)
    print(f"{oname}:")
    print(head)
    print(rule)
    for x in xs:
        row = f" {x:+1.2f} |"
        for y in xs:
            ev = pred.evaluate({**fixed, name: x, cross: y}, strict=False)
            row += f" {_fmt(ev.outputs[0], '+1.2f'):>5} |"
        print(row)
    print(rule)
