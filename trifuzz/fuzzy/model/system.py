from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from ..core.mfs import MembershipFunction
from ..core.rule import ParsedRule
from ..core.types import (
    Float, Index,
    ConfigurationError, CapacityExceeded, DuplicateName, InvalidIndex, UnknownName,
)
from ..io.rule_parser import parse_rule
from .engine import Evaluation, MamdaniEngine
from .settings import DEFAULT_SETTINGS, EngineSettings
from .variable import LinguisticVariable

logger = logging.getLogger(__name__)


class FuzzySystem:
    """
    Mamdani fuzzy system with a fixed number of inputs and outputs.

    Typical life cycle:
        fs = FuzzySystem(2, 1)
        fs.init_input_variable(0, 3, "distance")
        fs.set_input_term(0, 0, -0.5, 0.0, 0.5, "small")
        ...
        fs.add_rule("if distance is small and speed is slow then throttle is zero")
        fs.set_input(0, 0.2)
        fs.calculate_output()
        fs.get_output(0)

    The rule texts are the source of truth. Parsed rules are cached by text and the
    cache is dropped on every configuration change.
    """

    def __init__(self, inputs: int, outputs: int, *,
                 settings: EngineSettings = DEFAULT_SETTINGS) -> None:
        self.settings = settings
        self._inputs: List[LinguisticVariable] = []
        self._outputs: List[LinguisticVariable] = []
        self._input_values: List[Float] = []
        self._output_values: List[Float] = []
        self._rules: List[str] = []
        self._parsed: Dict[str, ParsedRule] = {}
        self.init(inputs, outputs)

    # ---------- read-only views ----------

    @property
    def inputs(self) -> Tuple[LinguisticVariable, ...]:
        return tuple(self._inputs)

    @property
    def outputs(self) -> Tuple[LinguisticVariable, ...]:
        return tuple(self._outputs)

    @property
    def rules(self) -> Tuple[str, ...]:
        return tuple(self._rules)

    @property
    def input_values(self) -> Tuple[Float, ...]:
        return tuple(self._input_values)

    @property
    def output_values(self) -> Tuple[Float, ...]:
        return tuple(self._output_values)

    # ---------- set-up ----------

    def init(self, inputs: int, outputs: int) -> None:
        """Reset to an empty configuration with the given number of inputs/outputs."""
        limits = self.settings.limits
        if inputs < 0 or outputs < 0:
            raise ConfigurationError(f"input/output counts must be >= 0 (got {inputs}, {outputs})")
        if inputs > limits.max_inputs:
            raise CapacityExceeded("inputs", inputs, limits.max_inputs)
        if outputs > limits.max_outputs:
            raise CapacityExceeded("outputs", outputs, limits.max_outputs)

        self._inputs = [LinguisticVariable.allocate("", 0, "input") for _ in range(inputs)]
        self._outputs = [LinguisticVariable.allocate("", 0, "output") for _ in range(outputs)]
        self._input_values = [0.0] * inputs
        self._output_values = [0.0] * outputs
        self._rules = []
        self._parsed.clear()
        logger.debug("init: inputs=%d, outputs=%d", inputs, outputs)

    def _init_variable(self, table: List[LinguisticVariable], kind: str,
                       index: Index, term_count: int, name: str) -> None:
        self._check_index(kind, index, len(table))
        if not name:
            raise ConfigurationError(f"{kind} name must not be empty")
        if term_count < 0:
            raise ConfigurationError(f"{kind} '{name}': term count must be >= 0 (got {term_count})")
        if term_count > self.settings.limits.max_terms:
            raise CapacityExceeded(f"terms of {kind} '{name}'", term_count, self.settings.limits.max_terms)
        if any(v.name == name for i, v in enumerate(table) if i != index):
            raise DuplicateName(name, f"{kind} variable")

        table[index] = LinguisticVariable.allocate(name, term_count, kind)
        self._parsed.clear()
        logger.debug("%s %d: '%s' with %d terms", kind, index, name, term_count)

    def init_input_variable(self, index: Index, term_count: int, name: str) -> None:
        self._init_variable(self._inputs, "input", index, term_count, name)

    def init_output_variable(self, index: Index, term_count: int, name: str) -> None:
        self._init_variable(self._outputs, "output", index, term_count, name)

    def _set_term(self, table: List[LinguisticVariable], kind: str, term_index: Index,
                  var_index: Index, left: Float, top: Float, right: Float, name: str) -> None:
        self._check_index(kind, var_index, len(table))
        if not name:
            raise ConfigurationError(f"term name of {kind} '{table[var_index].name}' must not be empty")
        mf = MembershipFunction(float(left), float(top), float(right), name)
        table[var_index] = table[var_index].with_term(term_index, mf)
        self._parsed.clear()
        logger.debug("%s '%s' term %d: %s [%g, %g, %g]",
                     kind, table[var_index].name, term_index, name, left, top, right)

    def set_input_term(self, term_index: Index, var_index: Index,
                       left: Float, top: Float, right: Float, name: str) -> None:
        self._set_term(self._inputs, "input", term_index, var_index, left, top, right, name)

    def set_output_term(self, term_index: Index, var_index: Index,
                        left: Float, top: Float, right: Float, name: str) -> None:
        self._set_term(self._outputs, "output", term_index, var_index, left, top, right, name)

    def add_rule(self, text: str) -> None:
        """Validate the rule against the current variables and append it."""
        limit = self.settings.limits.max_rules
        if len(self._rules) >= limit:
            raise CapacityExceeded("rules", len(self._rules) + 1, limit)
        parsed = parse_rule(text, self._inputs, self._outputs)
        self._rules.append(text)
        self._parsed[text] = parsed
        logger.debug("rule %d: %s", len(self._rules) - 1, text)

    # ---------- evaluation ----------

    def set_input(self, index: Index, value: Float) -> None:
        self._check_index("input", index, len(self._input_values))
        self._input_values[index] = float(value)

    def get_output(self, index: Index) -> Float:
        self._check_index("output", index, len(self._output_values))
        return self._output_values[index]

    def parsed_rules(self) -> List[ParsedRule]:
        """Rules parsed against the current variables (cached by text)."""
        out: List[ParsedRule] = []
        for text in self._rules:
            parsed = self._parsed.get(text)
            if parsed is None:
                parsed = parse_rule(text, self._inputs, self._outputs)
                self._parsed[text] = parsed
            out.append(parsed)
        return out

    def calculate_output(self) -> Evaluation:
        """
        Run the whole pipeline for the current inputs. Outputs are replaced only
        when every output could be defuzzified; on error the previous values stay.
        """
        ev = MamdaniEngine(self.settings.step).evaluate(self)
        self._output_values = list(ev.outputs)
        return ev

    # ---------- name lookup ----------

    def input_index(self, name: str) -> Index:
        return self._lookup(self._inputs, "input", name)

    def output_index(self, name: str) -> Index:
        return self._lookup(self._outputs, "output", name)

    @staticmethod
    def _lookup(table: List[LinguisticVariable], kind: str, name: str) -> Index:
        for i, var in enumerate(table):
            if name and var.name == name:
                return i
        raise UnknownName(name, f"{kind} variable")

    @staticmethod
    def _check_index(kind: str, index: Index, length: int) -> None:
        if not 0 <= index < length:
            raise InvalidIndex(kind, index, length)

    def __repr__(self) -> str:
        ins = ", ".join(v.name or "?" for v in self._inputs)
        outs = ", ".join(v.name or "?" for v in self._outputs)
        return f"FuzzySystem(inputs=[{ins}], outputs=[{outs}], rules={len(self._rules)})"
