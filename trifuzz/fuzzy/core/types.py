from typing import Optional

Float = float
Index = int


class FuzzyError(Exception):
    """Domain error for fuzzy framework."""


# ---------- configuration ----------

class ConfigurationError(FuzzyError):
    """Structural problem with the system set-up (fail fast, nothing is changed)."""


class InvalidIndex(ConfigurationError, IndexError):
    def __init__(self, what: str, index: int, length: int):
        super().__init__(f"{what} index {index} out of range (0..{length - 1})"
                         if length > 0 else f"{what} index {index} out of range (no {what}s)")
        self.what = what
        self.index = index
        self.length = length


class CapacityExceeded(ConfigurationError):
    def __init__(self, what: str, requested: int, limit: int):
        super().__init__(f"{what}: {requested} requested, limit is {limit}")
        self.what = what
        self.requested = requested
        self.limit = limit


class UnknownName(ConfigurationError):
    """A rule (or a caller) referenced a variable or term that does not exist."""

    def __init__(self, name: str, kind: str, rule: Optional[str] = None):
        msg = f"unknown {kind} '{name}'"
        if rule is not None:
            msg += f" in rule: {rule}"
        super().__init__(msg)
        self.name = name
        self.kind = kind
        self.rule = rule


class DuplicateName(ConfigurationError):
    def __init__(self, name: str, kind: str):
        super().__init__(f"duplicate {kind} name '{name}'")
        self.name = name
        self.kind = kind


class DegenerateMembershipFunction(ConfigurationError, ValueError):
    def __init__(self, name: str, left: Float, top: Float, right: Float):
        super().__init__(
            f"membership function '{name}' needs left <= top <= right and left < right "
            f"(got {left}, {top}, {right})"
        )
        self.name = name
        self.points = (left, top, right)


class SettingsError(ConfigurationError, ValueError):
    """Bad engine settings (step, limits or an unknown key)."""


# ---------- rule text ----------

class RuleSyntaxError(FuzzyError):
    def __init__(self, msg: str, rule: str, token: str, position: int):
        super().__init__(f"{msg} at offset {position} (token '{token}')\n  >> {rule}")
        self.rule = rule
        self.token = token
        self.position = position


# ---------- evaluation ----------

class EvaluationError(FuzzyError):
    """Raised while running the pipeline; previous outputs are kept."""


class NoActiveRules(EvaluationError):
    NO_FIRINGS = "no-firings"
    ZERO_AREA = "zero-area"

    _MESSAGES = {
        NO_FIRINGS: "no rule fired",
        ZERO_AREA: "rules fired but no sample point fell inside their terms (zero area)",
    }

    def __init__(self, output_index: int, name: str = "", reason: str = NO_FIRINGS):
        label = f" '{name}'" if name else ""
        super().__init__(f"output {output_index}{label}: {self._MESSAGES[reason]}, "
                         "centroid is undefined")
        self.output_index = output_index
        self.name = name
        self.reason = reason
