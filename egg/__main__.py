"""Command-line entry point: run a file, an inline expression, or a REPL."""

from __future__ import annotations

import argparse
import logging
import sys

from egg import config
from egg.interpreter import Interpreter
from egg.printer import to_string
from egg.repl import Shell, report
from egg.types.errors import EggError

logger = logging.getLogger("egg")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="egg", description="Egg language interpreter")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("file", nargs="?", help="Egg source file to run (if empty, starts the REPL)")
    source.add_argument("-e", "--eval", dest="code", help="evaluate CODE and print the result")
    parser.add_argument("--log-level", default=config.get_log_level(),
                        help="logging level (default: $EGG_LOG_LEVEL or WARNING)")
    return parser


def load_prelude(interp: Interpreter) -> None:
    for path in config.get_prelude_files():
        logger.info("Loading prelude %s", path)
        interp.eval_prelude(path.read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = args.log_level.upper()
    if not isinstance(logging.getLevelName(level), int):
        parser.error(f"unknown log level: {args.log_level}")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    interp = Interpreter()
    try:
        load_prelude(interp)
        if args.code is not None:
            print(to_string(interp.run(args.code)))
        elif args.file is not None:
            with open(args.file, encoding="utf-8") as f:
                interp.run(f.read())
        else:
            Shell(interp).cmdloop()
    except EggError as e:
        report(e)
        return 1
    except OSError as e:
        print(f"egg: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
