"""Command-line entry point: checks options, loads pieces, shows debug info."""

import sys

from .options import (
    OptionError,
    apply_settings,
    check_argument,
    count_debug_help,
    default_bindings,
    format_bindings,
    has_debug,
    usage,
)
from .pieces import format_pieces, load_pieces

DEFAULT_PIECES_DIR = "tetrimino/"
FAILURE = 84
START_MESSAGE = "Press any key to start Tetris\n"


def run(argv, out=None, pieces_dir=DEFAULT_PIECES_DIR):
    """Process the full command line *argv* and return the exit status."""
    out = sys.stdout if out is None else out
    program = argv[0] if argv else "tetris"
    if len(argv) <= 1:
        out.write(usage(program))
        return FAILURE
    help_shown = count_debug_help(argv) in (2, 3)
    if help_shown:
        out.write(usage(program))
    for index in range(1, len(argv)):
        try:
            check_argument(argv, index)
        except OptionError:
            if not help_shown:
                out.write(usage(program))
            return FAILURE
    debug = has_debug(argv)
    bindings = default_bindings()
    if debug:
        bindings = apply_settings(bindings, argv)
    try:
        pieces = load_pieces(pieces_dir)
    except OSError:
        return FAILURE
    if debug:
        out.write(format_bindings(bindings))
        out.write(format_pieces(pieces))
    out.write(START_MESSAGE)
    return 0


def main(argv=None):
    """Run with *argv* (arguments without the program name) or ``sys.argv``."""
    full = list(sys.argv) if argv is None else ["tetris", *argv]
    return run(full)


if __name__ == "__main__":
    raise SystemExit(main())