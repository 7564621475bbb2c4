import json
from ...fuzzy.model.predictor import Predictor
from ..argtypes import parse_keyvals
from .common import system_from_args


def cmd_explain(args):
    pred = Predictor(system_from_args(args))
    data = parse_keyvals(getattr(args, "kv", None))
    res = pred.explain(data)
    if getattr(args, "json", False):
        print(json.dumps(res, indent=2))
        return
    for iname, info in res["inputs"].items():
        degs = ", ".join(f"{t}({mu:.3f})" for t, mu in info["degrees"].items()) or "-"
        print(f"Input: {iname} = {info['value']:g} -> {degs}")
    for oname, info in res["outputs"].items():
        if info["value"] is not None:
            value = f"{info['value']:.6g}"
        elif info["fired"]:
            value = "undefined (zero area under the fired terms)"
        else:
            value = "undefined (no rule fired)"
        print(f"Output: {oname} = {value}")
        for r in info["fired"]:
            print(f"  R{r['rule']}: {r['text']}  alpha={r['strength']:.4f}")
