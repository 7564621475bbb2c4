# Built-in example systems

from __future__ import annotations
from typing import Callable, Dict, Iterable, Optional, Tuple

from ..core.types import UnknownName
from .settings import DEFAULT_SETTINGS, EngineSettings
from .system import FuzzySystem

Term = Tuple[float, float, float, str]

# negative / zero / positive on [-2, 2], shared by the small examples
_SIGN_TERMS: Tuple[Term, ...] = (
    (-2.0, -1.0, 0.0, "negative"),
    (-1.0, 0.0, 1.0, "zero"),
    (0.0, 1.0, 2.0, "positive"),
)


def _inputs(fs: FuzzySystem, index: int, name: str, terms: Iterable[Term]) -> None:
    terms = tuple(terms)
    fs.init_input_variable(index, len(terms), name)
    for j, (l, t, r, label) in enumerate(terms):
        fs.set_input_term(j, index, l, t, r, label)


def _outputs(fs: FuzzySystem, index: int, name: str, terms: Iterable[Term]) -> None:
    terms = tuple(terms)
    fs.init_output_variable(index, len(terms), name)
    for j, (l, t, r, label) in enumerate(terms):
        fs.set_output_term(j, index, l, t, r, label)


def cruise(settings: EngineSettings = DEFAULT_SETTINGS) -> FuzzySystem:
    """Throttle control when following a moving object (distance, speed -> throttle)."""
    fs = FuzzySystem(2, 1, settings=settings)
    _inputs(fs, 0, "distance", [
        (-0.5, 0.0, 0.5, "small"),
        (0.0, 0.5, 1.0, "medium"),
        (0.5, 1.0, 1.5, "big"),
    ])
    _inputs(fs, 1, "speed", [
        (-1.0, 0.0, 1.0, "slow"),
        (0.0, 1.0, 2.0, "medium"),
        (1.0, 2.0, 3.0, "fast"),
    ])
    _outputs(fs, 0, "throttle", [
        (-1.5, -1.0, -0.5, "negativeBig"),
        (-1.0, -0.5, 0.0, "negative"),
        (-0.5, 0.0, 0.5, "zero"),
        (0.0, 0.5, 1.0, "positive"),
        (0.5, 1.0, 1.5, "positiveBig"),
    ])
    table = {
        ("small", "slow"): "zero",
        ("small", "medium"): "negative",
        ("small", "fast"): "negativeBig",
        ("medium", "slow"): "positive",
        ("medium", "medium"): "zero",
        ("medium", "fast"): "negative",
        ("big", "slow"): "positiveBig",
        ("big", "medium"): "positive",
        ("big", "fast"): "zero",
    }
    for (d, s), t in table.items():
        fs.add_rule(f"if distance is {d} and speed is {s} then throttle is {t}")
    return fs


def inverter(settings: EngineSettings = DEFAULT_SETTINGS) -> FuzzySystem:
    """Single input, single output: y follows -x."""
    fs = FuzzySystem(1, 1, settings=settings)
    _inputs(fs, 0, "x", _SIGN_TERMS)
    _outputs(fs, 0, "y", _SIGN_TERMS)
    fs.add_rule("if x is negative then y is positive")
    fs.add_rule("if x is zero then y is zero")
    fs.add_rule("if x is positive then y is negative")
    return fs


def dual(settings: EngineSettings = DEFAULT_SETTINGS) -> FuzzySystem:
    """One input driving two outputs of different width."""
    fs = FuzzySystem(1, 2, settings=settings)
    _inputs(fs, 0, "input", _SIGN_TERMS)
    _outputs(fs, 0, "output1", _SIGN_TERMS)
    _outputs(fs, 1, "output2", [(2 * l, 2 * t, 2 * r, n) for l, t, r, n in _SIGN_TERMS])
    fs.add_rule("if input is negative then output1 is positive")
    fs.add_rule("if input is zero then output1 is zero")
    fs.add_rule("if input is positive then output1 is negative")
    fs.add_rule("if input is negative then output2 is negative")
    fs.add_rule("if input is zero then output2 is negative")
    fs.add_rule("if input is positive then output2 is positive")
    return fs


def grid(settings: EngineSettings = DEFAULT_SETTINGS) -> FuzzySystem:
    """Two inputs, one output, full 3x3 rule table."""
    fs = FuzzySystem(2, 1, settings=settings)
    _inputs(fs, 0, "input1", _SIGN_TERMS)
    _inputs(fs, 1, "input2", _SIGN_TERMS)
    _outputs(fs, 0, "output", _SIGN_TERMS)
    table = {
        ("negative", "negative"): "negative",
        ("negative", "zero"): "negative",
        ("negative", "positive"): "zero",
        ("zero", "negative"): "negative",
        ("zero", "zero"): "zero",
        ("zero", "positive"): "positive",
        ("positive", "negative"): "zero",
        ("positive", "zero"): "positive",
        ("positive", "positive"): "positive",
    }
    for (a, b), out in table.items():
        fs.add_rule(f"if input1 is {a} and input2 is {b} then output is {out}")
    return fs


PRESETS: Dict[str, Callable[[EngineSettings], FuzzySystem]] = {
    "cruise": cruise,
    "inverter": inverter,
    "dual": dual,
    "grid": grid,
}


def build_preset(name: str, settings: Optional[EngineSettings] = None) -> FuzzySystem:
    try:
        builder = PRESETS[name]
    except KeyError:
        raise UnknownName(name, "example system") from None
    return builder(settings or DEFAULT_SETTINGS)
