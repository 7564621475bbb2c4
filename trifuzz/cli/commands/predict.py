from ...fuzzy.model.predictor import Predictor
from ..argtypes import parse_keyvals
from .common import system_from_args


def cmd_predict(args):
    pred = Predictor(system_from_args(args))
    data = parse_keyvals(getattr(args, "kv", None))
    out = pred.predict(data)
    for oname, val in out.items():
        print(f"{oname}: {val:.6g}")
