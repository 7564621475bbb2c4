from __future__ import annotations

from dataclasses import dataclass, field, replace, asdict
from typing import Any, Dict

from ..core.defuzz import COG_STEP
from ..core.types import SettingsError


@dataclass(frozen=True)
class Limits:
    """Upper bounds of the system tables; exceeding one raises CapacityExceeded."""
    max_inputs: int = 4
    max_outputs: int = 2
    max_terms: int = 16
    max_rules: int = 256


@dataclass(frozen=True)
class EngineSettings:
    # integration step of the centroid scan
    step: float = COG_STEP
    limits: Limits = field(default_factory=Limits)

    def __post_init__(self) -> None:
        if self.step <= 0.0:
            raise SettingsError(f"step must be > 0 (got {self.step})")

    def with_changes(self, **kw: Any) -> "EngineSettings":
        limit_keys = {k: kw.pop(k) for k in list(kw) if k in Limits.__dataclass_fields__}
        limits = replace(self.limits, **limit_keys) if limit_keys else self.limits
        return replace(self, limits=limits, **kw)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "EngineSettings":
        """
        Accepts the flat form used in run files, e.g.
          {'step': 0.01, 'max_rules': 512}
        or a nested {'limits': {...}}.
        """
        d = dict(d or {})
        nested = d.pop("limits", None) or {}
        unknown = set(d) - set(cls.__dataclass_fields__) - set(Limits.__dataclass_fields__)
        unknown |= set(nested) - set(Limits.__dataclass_fields__)
        if unknown:
            raise SettingsError(f"unknown settings: {', '.join(sorted(unknown))}")
        d.update(nested)
        try:
            if "step" in d:
                d["step"] = float(d["step"])
            for k in Limits.__dataclass_fields__:
                if k in d:
                    d[k] = int(d[k])
        except (TypeError, ValueError) as e:
            raise SettingsError(f"bad settings value: {e}") from e
        return cls().with_changes(**d)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_SETTINGS = EngineSettings()
