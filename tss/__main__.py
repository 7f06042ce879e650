from __future__ import annotations

import argparse
import logging
import sys

from tss.config import get_log_level
from tss.interpreter import Interpreter
from tss.types.errors import TssError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tss", description="Run a tss program")
    parser.add_argument("path", help="path to the script to execute")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (overrides TSS_LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    level = get_log_level() if args.log_level is None else args.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    try:
        Interpreter().run_file(args.path)
    except TssError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print("error: maximum recursion depth exceeded", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
