from ...fuzzy.model.presets import build_preset
from ...fuzzy.model.settings import DEFAULT_SETTINGS, EngineSettings
from ...fuzzy.model.system import FuzzySystem


def settings_from_args(args) -> EngineSettings:
    settings = getattr(args, "settings", None) or DEFAULT_SETTINGS
    step = getattr(args, "cog_step", None)
    if step is not None:
        settings = settings.with_changes(step=float(step))
    return settings


def system_from_args(args) -> FuzzySystem:
    return build_preset(getattr(args, "system", "cruise"), settings_from_args(args))
