"""
Rule grammar:
  if <input> is <term> (and <input> is <term>)* then <output> is <term>

Notes:
- Keywords are case-sensitive; variable and term names are matched exactly.
- Tokens are separated by exactly one space. The output term is everything after
  the last 'is ', up to the end of the text.
- Names are resolved while scanning, so the first bad token stops the parse.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..core.rule import ParsedRule
from ..core.types import Index, RuleSyntaxError, UnknownName
from ..model.variable import LinguisticVariable


class State(IntEnum):
    EXPECT_IF = 0
    EXPECT_INPUT_NAME = 1
    EXPECT_INPUT_IS = 2
    EXPECT_INPUT_TERM = 3
    EXPECT_AND_OR_THEN = 4
    EXPECT_OUTPUT_NAME = 5
    EXPECT_OUTPUT_IS = 6
    EXPECT_OUTPUT_TERM = 7
    ACCEPT = 8


# None stands for "any name" (resolved by the state's action)
_NAME = None

TRANSITIONS: Dict[State, Dict[Optional[str], State]] = {
    State.EXPECT_IF:          {"if": State.EXPECT_INPUT_NAME},
    State.EXPECT_INPUT_NAME:  {_NAME: State.EXPECT_INPUT_IS},
    State.EXPECT_INPUT_IS:    {"is": State.EXPECT_INPUT_TERM},
    State.EXPECT_INPUT_TERM:  {_NAME: State.EXPECT_AND_OR_THEN},
    State.EXPECT_AND_OR_THEN: {"and": State.EXPECT_INPUT_NAME, "then": State.EXPECT_OUTPUT_NAME},
    State.EXPECT_OUTPUT_NAME: {_NAME: State.EXPECT_OUTPUT_IS},
    State.EXPECT_OUTPUT_IS:   {"is": State.EXPECT_OUTPUT_TERM},
    State.EXPECT_OUTPUT_TERM: {_NAME: State.ACCEPT},
}

_EXPECTED = {
    State.EXPECT_INPUT_NAME: "input name",
    State.EXPECT_INPUT_TERM: "input term",
    State.EXPECT_OUTPUT_NAME: "output name",
    State.EXPECT_OUTPUT_TERM: "output term",
}


def _find_variable(variables: Sequence[LinguisticVariable], name: str) -> Index:
    for i, var in enumerate(variables):
        if var.name == name:
            return i
    return -1


class _RuleBuilder:
    """Collects resolved indices while the state machine runs."""

    def __init__(self, text: str,
                 inputs: Sequence[LinguisticVariable],
                 outputs: Sequence[LinguisticVariable]) -> None:
        self.text = text
        self.inputs = inputs
        self.outputs = outputs
        self.antecedent: List[Tuple[Index, Index]] = []
        self.current_input: Index = -1
        self.output: Index = -1
        self.term: Index = -1

    def _var(self, variables, token: str, kind: str) -> Index:
        idx = _find_variable(variables, token) if token else -1
        if idx < 0:
            raise UnknownName(token, f"{kind} variable", rule=self.text)
        return idx

    def _term(self, var: LinguisticVariable, token: str) -> Index:
        idx = var.find(token) if token else -1
        if idx < 0:
            raise UnknownName(token, f"term of {var.kind} '{var.name}'", rule=self.text)
        return idx

    def input_name(self, token: str) -> None:
        self.current_input = self._var(self.inputs, token, "input")

    def input_term(self, token: str) -> None:
        term = self._term(self.inputs[self.current_input], token)
        self.antecedent.append((self.current_input, term))

    def output_name(self, token: str) -> None:
        self.output = self._var(self.outputs, token, "output")

    def output_term(self, token: str) -> None:
        self.term = self._term(self.outputs[self.output], token)

    def build(self) -> ParsedRule:
        return ParsedRule(text=self.text, antecedent=tuple(self.antecedent),
                          consequent=(self.output, self.term))


_ACTIONS: Dict[State, Callable[[_RuleBuilder, str], None]] = {
    State.EXPECT_INPUT_NAME: _RuleBuilder.input_name,
    State.EXPECT_INPUT_TERM: _RuleBuilder.input_term,
    State.EXPECT_OUTPUT_NAME: _RuleBuilder.output_name,
    State.EXPECT_OUTPUT_TERM: _RuleBuilder.output_term,
}


def parse_rule(text: str,
               inputs: Sequence[LinguisticVariable],
               outputs: Sequence[LinguisticVariable]) -> ParsedRule:
    """Parse one rule against the given input/output variables."""
    builder = _RuleBuilder(text, inputs, outputs)
    state = State.EXPECT_IF
    pos = 0

    while state is not State.ACCEPT:
        # --- next token ---
        if state is State.EXPECT_OUTPUT_TERM:
            end = len(text)
            token = text[pos:]
            if not token:
                raise RuleSyntaxError("missing output term", text, token, pos)
        else:
            end = text.find(" ", pos)
            if end < 0:
                expected = _EXPECTED.get(state) or " or ".join(repr(k) for k in TRANSITIONS[state])
                raise RuleSyntaxError(f"unexpected end of rule, expecting {expected}",
                                      text, text[pos:], pos)
            token = text[pos:end]

        # --- transition ---
        table = TRANSITIONS[state]
        if _NAME in table:
            _ACTIONS[state](builder, token)
            state = table[_NAME]
        else:
            nxt = table.get(token)
            if nxt is None:
                expected = " or ".join(repr(k) for k in table)
                raise RuleSyntaxError(f"expecting {expected}", text, token, pos)
            state = nxt
        pos = end + 1

    return builder.build()
