from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
from .types import Float, DegenerateMembershipFunction


@dataclass(frozen=True)
class MembershipFunction:
    """Triangular membership function: 0 at `left`, 1 at `top`, 0 at `right`."""
    left: Float
    top: Float
    right: Float
    name: str

    def __post_init__(self) -> None:
        if not (self.left <= self.top <= self.right) or self.left == self.right:
            raise DegenerateMembershipFunction(self.name, self.left, self.top, self.right)

    def mu(self, x: Float) -> Float:
        return membership(self, x)

    def support(self) -> Tuple[Float, Float]:
        return (self.left, self.right)

    def contains(self, x: Float) -> bool:
        """Open-interval test; the end points themselves have degree 0."""
        return self.left < x < self.right


def membership(f: MembershipFunction, x: Float) -> Float:
    if x <= f.left or x >= f.right:
        return 0.0
    # a zero-width side has no interior point, so neither ramp divides by zero
    if x <= f.top:
        return (x - f.left) / (f.top - f.left)
    return (x - f.top) / (f.top - f.right) + 1.0
