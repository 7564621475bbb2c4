import argparse
from ..argtypes import SYSTEM_CHOICES, SWEEP_DEFAULTS, parse_kv, positive_float
# commands
from .explain import cmd_explain
from .predict import cmd_predict
from .run import cmd_run
from .show import cmd_show
from .sweep import cmd_sweep


def build_parser():
    fmt = argparse.ArgumentDefaultsHelpFormatter
    ap = argparse.ArgumentParser(
        prog="trifuzz",
        description=("Mamdani fuzzy inference with triangular terms and text rules "
                     "(show -> predict/explain -> sweep)"),
        formatter_class=fmt,
        epilog=(
            "Examples:\n"
            "  trifuzz show --system cruise\n"
            "  trifuzz show --system cruise --input 1 --rules\n"
            "  trifuzz predict --system cruise distance=0.2 speed=1.25\n"
            "  trifuzz explain --system inverter x=0.5 --json\n"
            "  trifuzz sweep --system inverter --input x --start -1 --stop 1 --by 0.1\n"
            "  trifuzz sweep --system grid --input input1 --cross input2\n"
            "  trifuzz run --config run.yaml\n"
        )
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="log every pipeline stage (DEBUG)")
    ap.add_argument("--cog-step", dest="cog_step", type=positive_float, default=None,
                    help="integration step of the centroid (default 0.02)")

    sub = ap.add_subparsers(dest="cmd", required=True)

    def system_arg(p):
        p.add_argument("--system", choices=SYSTEM_CHOICES, default="cruise", help="example system")

    # show
    sp_s = sub.add_parser("show", help="Print variables, terms and rules", formatter_class=fmt)
    system_arg(sp_s)
    sp_s.add_argument("--input", type=int, action="append", help="input set index (repeatable)")
    sp_s.add_argument("--output", type=int, action="append", help="output set index (repeatable)")
    sp_s.add_argument("--rules", action="store_true", help="print the rule list")
    sp_s.set_defaults(func=cmd_show)

    # predict
    sp_p = sub.add_parser("predict", help="Crisp outputs for one sample", formatter_class=fmt)
    system_arg(sp_p)
    sp_p.add_argument("kv", nargs="+", type=parse_kv, help="name=value pairs")
    sp_p.set_defaults(func=cmd_predict)

    # explain
    sp_e = sub.add_parser("explain", help="Degrees and fired rules for one sample", formatter_class=fmt)
    system_arg(sp_e)
    sp_e.add_argument("kv", nargs="+", type=parse_kv, help="name=value pairs")
    sp_e.add_argument("--json", action="store_true")
    sp_e.set_defaults(func=cmd_explain)

    # sweep
    start, stop, by = SWEEP_DEFAULTS
    sp_w = sub.add_parser("sweep", help="Tabulate outputs over an input range", formatter_class=fmt)
    system_arg(sp_w)
    sp_w.add_argument("--input", help="input to sweep (default: first input)")
    sp_w.add_argument("--cross", help="second input for a two-dimensional table")
    sp_w.add_argument("--start", type=float, default=start)
    sp_w.add_argument("--stop", type=float, default=stop)
    sp_w.add_argument("--by", type=positive_float, default=by)
    sp_w.add_argument("--at", nargs="*", type=parse_kv, help="fixed values of the other inputs")
    sp_w.set_defaults(func=cmd_sweep)

    # run
    sp_run = sub.add_parser("run", help="Execute the sections of a run file")
    sp_run.add_argument("--config", required=True, help="path to a .json/.yaml run file")
    sp_run.set_defaults(func=cmd_run)

    return ap
