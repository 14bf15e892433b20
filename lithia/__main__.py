"""Run a lithia file, or the interactive REPL when no file is given."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from lithia import config
from lithia.errors import LispError
from lithia.interpreter import Lisp

REPL_PROGRAM = "(while t (print (eval (read))))"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lithia",
        description="Run a lithia program, or start a REPL.",
    )
    parser.add_argument("file", nargs="?", type=Path, help="source file to run")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.get_log_level())

    try:
        code = args.file.read_text() if args.file else REPL_PROGRAM
        Lisp().eval(code)
    except (LispError, OSError) as e:
        print(f"\x1b[31m{e}\x1b[0m")
        return 1
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
