from ...fuzzy.io.describe import describe_input, describe_output, describe_rules, describe_system
from .common import system_from_args


def cmd_show(args) -> None:
    """
    Flags:
      --system NAME   : example system
      --input IDX     : print only this input set (repeatable)
      --output IDX    : print only this output set (repeatable)
      --rules         : print only the rule list
    Without selection flags the whole system is printed.
    """
    fs = system_from_args(args)

    inputs = list(getattr(args, "input", None) or [])
    outputs = list(getattr(args, "output", None) or [])
    rules = bool(getattr(args, "rules", False))

    if not (inputs or outputs or rules):
        print(describe_system(fs))
        return

    parts = [describe_input(fs, i) for i in inputs]
    parts += [describe_output(fs, i) for i in outputs]
    if rules:
        parts.append(describe_rules(fs))
    print("\n\n".join(parts))
