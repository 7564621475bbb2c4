# LinguisticVariable: named group of triangular terms addressed by index

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Iterator, Optional, Tuple
from ..core.mfs import MembershipFunction
from ..core.types import Index, InvalidIndex, DuplicateName


@dataclass(frozen=True)
class LinguisticVariable:
    """Immutable; `with_term` returns the updated copy and the system swaps it in."""
    name: str
    kind: str = "input"  # 'input' | 'output'
    slots: Tuple[Optional[MembershipFunction], ...] = ()

    @classmethod
    def allocate(cls, name: str, term_count: int, kind: str = "input") -> "LinguisticVariable":
        return cls(name=name, kind=kind, slots=(None,) * term_count)

    def __len__(self) -> int:
        return len(self.slots)

    def __getitem__(self, index: Index) -> Optional[MembershipFunction]:
        return self.slots[index]

    def with_term(self, index: Index, mf: MembershipFunction) -> "LinguisticVariable":
        if not 0 <= index < len(self.slots):
            raise InvalidIndex(f"{self.kind} '{self.name}' term", index, len(self.slots))
        for j, other in enumerate(self.slots):
            if j != index and other is not None and other.name == mf.name:
                raise DuplicateName(mf.name, f"term of {self.kind} '{self.name}'")
        return replace(self, slots=self.slots[:index] + (mf,) + self.slots[index + 1:])

    def terms(self) -> Iterator[Tuple[Index, MembershipFunction]]:
        """Defined terms in index order (empty slots skipped)."""
        for i, mf in enumerate(self.slots):
            if mf is not None:
                yield i, mf

    def find(self, label: str) -> Index:
        """Index of the term called `label`, or -1."""
        for i, mf in self.terms():
            if mf.name == label:
                return i
        return -1
