import json
from argparse import Namespace

import yaml

from ...fuzzy.model.settings import EngineSettings
from .common import settings_from_args
from .explain import cmd_explain
from .predict import cmd_predict
from .show import cmd_show
from .sweep import cmd_sweep

COMMANDS = {
    "show": cmd_show,
    "predict": cmd_predict,
    "explain": cmd_explain,
    "sweep": cmd_sweep,
}


def _ns(d: dict, settings: EngineSettings) -> Namespace:
    return Namespace(settings=settings, **d)


def _load_cfg(path: str):
    with open(path, encoding="utf-8") as f:
        if path.lower().endswith((".yml", ".yaml")):
            return yaml.safe_load(f)
        return json.load(f)


def cmd_run(args):
    """
    Run file layout (JSON or YAML), sections executed in file order:
      settings: {step: 0.01, max_rules: 512}    # optional, applies to all sections
      show:    {system: cruise}
      predict: {system: cruise, kv: {distance: 0.2, speed: 1.25}}
      sweep:   [{system: inverter, input: x}, {system: grid, input: input1, cross: input2}]
    A section may be a mapping or a list of mappings.
    """
    cfg = _load_cfg(args.config) or {}
    if not isinstance(cfg, dict):
        raise SystemExit(f"{args.config}: expected a mapping of sections")

    settings = settings_from_args(args)
    if "settings" in cfg:
        settings = EngineSettings.from_dict({**settings.to_dict()["limits"],
                                             "step": settings.step,
                                             **(cfg["settings"] or {})})

    for name, section in cfg.items():
        if name == "settings":
            continue
        fn = COMMANDS.get(name)
        if fn is None:
            raise SystemExit(f"{args.config}: unknown section '{name}' "
                             f"(allowed: settings, {', '.join(COMMANDS)})")
        for entry in section if isinstance(section, list) else [section or {}]:
            print(f"[run] {name}")
            fn(_ns(entry, settings))
