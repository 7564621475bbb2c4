import logging
import sys

from ..fuzzy.core.types import FuzzyError
from .commands.parser import build_parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except FuzzyError as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(2) from e

if __name__ == "__main__":
    main()
