# Name-keyed front end over FuzzySystem
import math
from typing import Any, Dict, List, Mapping

from ..core.types import Float
from .engine import Evaluation, MamdaniEngine
from .system import FuzzySystem


class Predictor:
    def __init__(self, system: FuzzySystem):
        self.system = system

    def _load(self, inputs: Mapping[str, Float]) -> None:
        # resolve every name first so a bad key leaves the inputs untouched
        resolved = [(self.system.input_index(name), float(v)) for name, v in inputs.items()]
        for idx, value in resolved:
            self.system.set_input(idx, value)

    def predict(self, inputs: Mapping[str, Float]) -> Dict[str, Float]:
        """Set inputs by name, run the pipeline, return outputs by name."""
        self._load(inputs)
        self.system.calculate_output()
        return {var.name: self.system.get_output(i) for i, var in enumerate(self.system.outputs)}

    def evaluate(self, inputs: Mapping[str, Float], strict: bool = True) -> Evaluation:
        """Like predict, but returns the full trace and leaves the outputs alone."""
        self._load(inputs)
        return MamdaniEngine(self.system.settings.step).evaluate(self.system, strict=strict)

    def explain(self, inputs: Mapping[str, Float]) -> Dict[str, Any]:
        """
        JSON-friendly trace:
          {'inputs': {name: {'value': x, 'degrees': {term: mu}}},
           'outputs': {name: {'value': y | None, 'fired': [{rule, text, term, strength}]}}}
        """
        ev = self.evaluate(inputs, strict=False)
        fs = self.system
        rules = fs.rules

        res_in: Dict[str, Any] = {}
        for var, x, degrees in zip(fs.inputs, ev.inputs, ev.fuzzified):
            res_in[var.name] = {
                "value": x,
                "degrees": {var[d.term].name: d.value for d in degrees},
            }

        res_out: Dict[str, Any] = {}
        for var, y, firings in zip(fs.outputs, ev.outputs, ev.inferred):
            fired: List[Dict[str, Any]] = [
                {"rule": f.rule, "text": rules[f.rule], "term": var[f.term].name,
                 "strength": f.strength}
                for f in firings
            ]
            res_out[var.name] = {"value": None if math.isnan(y) else y, "fired": fired}

        return {"inputs": res_in, "outputs": res_out}
