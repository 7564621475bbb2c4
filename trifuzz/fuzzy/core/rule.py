from dataclasses import dataclass
from typing import NamedTuple, Tuple
from ..core.types import Float, Index

# (input index, term index)
Antecedent = Tuple[Tuple[Index, Index], ...]


@dataclass(frozen=True)
class ParsedRule:
    text: str
    antecedent: Antecedent
    consequent: Tuple[Index, Index]  # (output index, term index)

    @property
    def output_index(self) -> Index:
        return self.consequent[0]

    @property
    def term_index(self) -> Index:
        return self.consequent[1]


class Degree(NamedTuple):
    """One entry of a fuzzification result."""
    term: Index
    value: Float


class Firing(NamedTuple):
    """One entry of an inference result: a fired rule's consequent and strength."""
    output: Index
    term: Index
    strength: Float
    rule: Index
