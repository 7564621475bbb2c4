# Plain-text description of a fuzzy system (variables, terms, rules)

from __future__ import annotations
from typing import TYPE_CHECKING, List

from ..core.types import InvalidIndex
from ..model.variable import LinguisticVariable

if TYPE_CHECKING:
    from ..model.system import FuzzySystem


def _describe_variable(var: LinguisticVariable, index: int, header: str) -> str:
    lines: List[str] = [f'{header} set for {header.lower()} {index} named "{var.name}":']
    for j, mf in enumerate(var.slots):
        if mf is None:
            lines.append(f"Fuzzy set {j}: <unset>")
            continue
        lines.append(f'Fuzzy set {j} named "{mf.name}": '
                     f"[{mf.left:f},0],[{mf.top:f},1],[{mf.right:f},0]")
    return "\n".join(lines)


def describe_input(system: "FuzzySystem", index: int) -> str:
    if not 0 <= index < len(system.inputs):
        raise InvalidIndex("input", index, len(system.inputs))
    return _describe_variable(system.inputs[index], index, "Input")


def describe_output(system: "FuzzySystem", index: int) -> str:
    if not 0 <= index < len(system.outputs):
        raise InvalidIndex("output", index, len(system.outputs))
    return _describe_variable(system.outputs[index], index, "Output")


def describe_rules(system: "FuzzySystem") -> str:
    rules = system.rules
    lines = [f"System contains {len(rules)} rules of inferential mechanism:"]
    lines += [f"{i:3d}: {text}" for i, text in enumerate(rules)]
    return "\n".join(lines)


def describe_system(system: "FuzzySystem") -> str:
    bar = "+" + "-" * 40 + "+"
    parts = [bar, "|" + "Fuzzy system".center(40) + "|", bar, ""]
    for i in range(len(system.inputs)):
        parts += [describe_input(system, i), ""]
    for i in range(len(system.outputs)):
        parts += [describe_output(system, i), ""]
    parts.append(describe_rules(system))
    return "\n".join(parts)
