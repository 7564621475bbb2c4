from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence
from ..core import norms
from ..core.defuzz import COG_STEP, centroid_on_step
from ..core.mfs import membership
from ..core.rule import Degree, Firing, ParsedRule
from ..core.types import Float, Index, NoActiveRules
from .variable import LinguisticVariable

if TYPE_CHECKING:
    from .system import FuzzySystem

logger = logging.getLogger(__name__)

FuzzificationResult = List[Degree]
InferenceResult = List[Firing]


# ---------- stages ----------

def fuzzify(variable: LinguisticVariable, x: Float) -> FuzzificationResult:
    """Degrees of every term whose open support contains x, in term order."""
    out: FuzzificationResult = []
    for i, mf in variable.terms():
        if not mf.contains(x):
            continue
        out.append(Degree(i, membership(mf, x)))
    return out


def infer(rule: ParsedRule, fuzzified: Sequence[FuzzificationResult],
          rule_index: Index = -1) -> Optional[Firing]:
    """
    Fires only when every antecedent term is present in the fuzzification of its
    input; strength = min of the antecedent degrees.
    """
    degrees: List[Float] = []
    for inp, term in rule.antecedent:
        found = next((d.value for d in fuzzified[inp] if d.term == term), None)
        if found is None:
            return None
        degrees.append(found)
    return Firing(rule.output_index, rule.term_index, norms.t_min(degrees), rule_index)


def surface(variable: LinguisticVariable, firings: Sequence[Firing]) -> Callable[[Float], Float]:
    """Aggregated output: max over firings of the consequent clipped at its strength."""
    clipped = [(variable[f.term], f.strength) for f in firings]

    def mu(x: Float) -> Float:
        return norms.s_max(norms.clip(membership(mf, x), alpha) for mf, alpha in clipped)

    return mu


def defuzzify(variable: LinguisticVariable, firings: Sequence[Firing],
              step: Float = COG_STEP, output_index: Index = 0) -> Float:
    if not firings:
        raise NoActiveRules(output_index, variable.name)

    xmin = min(variable[f.term].left for f in firings)
    xmax = max(variable[f.term].right for f in firings)
    logger.debug("%s: range(%f to %f)", variable.name, xmin, xmax)

    value = centroid_on_step(xmin, xmax, step, surface(variable, firings))
    if value is None:
        raise NoActiveRules(output_index, variable.name, NoActiveRules.ZERO_AREA)
    return value


# ---------- pipeline ----------

@dataclass
class Evaluation:
    """Transient results of one evaluation cycle."""
    inputs: List[Float] = field(default_factory=list)
    fuzzified: List[FuzzificationResult] = field(default_factory=list)
    inferred: List[InferenceResult] = field(default_factory=list)
    outputs: List[Float] = field(default_factory=list)


class MamdaniEngine:
    """
    Mamdani inference: min conjunction, min implication, max aggregation,
    centroid defuzzification over a fixed-step scan.
    """
    def __init__(self, step: Float = COG_STEP) -> None:
        self.step = float(step)

    def evaluate(self, system: "FuzzySystem", strict: bool = True) -> Evaluation:
        """
        Run fuzzification -> inference -> defuzzification; `system` is not modified.
        With strict=False an output without active rules is reported as NaN instead
        of raising NoActiveRules.
        """
        ev = Evaluation(inputs=list(system.input_values))

        # --- 1) fuzzification ---
        for var, x in zip(system.inputs, ev.inputs):
            res = fuzzify(var, x)
            for d in res:
                logger.debug("%s - %s: x=%f, A(x)=%f", var.name, var[d.term].name, x, d.value)
            ev.fuzzified.append(res)

        # --- 2) inference ---
        ev.inferred = [[] for _ in system.outputs]
        for ri, rule in enumerate(system.parsed_rules()):
            firing = infer(rule, ev.fuzzified, ri)
            if firing is None:
                continue
            logger.debug("%s -> passed (%s - %s: %f)", rule.text,
                         system.outputs[firing.output].name,
                         system.outputs[firing.output][firing.term].name,
                         firing.strength)
            ev.inferred[firing.output].append(firing)

        # --- 3) defuzzification ---
        for oi, var in enumerate(system.outputs):
            try:
                value = defuzzify(var, ev.inferred[oi], self.step, oi)
            except NoActiveRules:
                if strict:
                    raise
                value = math.nan
            logger.debug("%s = %f", var.name, value)
            ev.outputs.append(value)

        return ev
