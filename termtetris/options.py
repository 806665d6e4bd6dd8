"""Command-line option checking and the key bindings shown in debug mode."""

from dataclasses import dataclass, replace

from .textutil import equals_position, prefix_matches, split_words

_FLAG_TABLE = (
    ("-d", "--debug"),
    ("-w", "--without-next"),
    ("", "--map-size="),
    ("-kp", "--key-pause="),
    ("-kq", "--key-quit="),
    ("-kd", "--key-drop="),
    ("-kt", "--key-turn="),
    ("-kr", "--key-right="),
    ("-kl", "--key-left="),
    ("-l", "--level="),
)
SHORT_FLAGS = tuple(short for short, _ in _FLAG_TABLE)
LONG_FLAGS = tuple(long for _, long in _FLAG_TABLE)

_STANDALONE = ("--help", "-d", "-w")

_DEFAULT_BINDINGS = (
    ("-kl", "--key-left", "Key Left : ", "Q"),
    ("-kr", "--key-right", "Key Right : ", "D"),
    ("-kt", "--key-turn", "Key Turn : ", "(space)"),
    ("-kd", "--key-drop", "Key Drop : ", "x"),
    ("-kq", "--key-quit", "Key Quit : ", "a"),
    ("-kp", "--key-pause", "Key Pause : ", "p"),
    ("-w", "--without-next", "Next : ", "Yes"),
    ("-l", "--level", "Level : ", "1"),
    ("-mapsize", "--map-size", "Size : ", "20*10"),
)

_USAGE_BODY = (
    " [options]\nOptions:\n"
    "   --help\t\tDisplay this help\n"
    "   -l --level={num}\tStart Tetris at level num (def:  1)\n"
    "   -kl --key-left={K}\tMove the tetrimino LEFT using"
    " the K key (def:  left arrow)\n"
    "   -kr --key-right={K}\tMove the tetrimino RIGHT using"
    " the K key (def:  right arrow)\n"
    "   -kt --key-turn={K}\tTURN the tetrimino clockwise 90d"
    " using the K key (def:  top arrow)\n"
    "   -kd --key-drop={K}\tDROP the tetrimino using K key"
    " (def:  down arrow)\n"
    "   -kq --key-quit={K}\tQUIT the game using the K key"
    " (def:  'Q' key)\n"
    "   -kp --key-pause={K}\tPAUSE/RESTART the game using K"
    " key (def:  space bar)\n"
    "   --map-size={row,col}\tSet the numbers of rows and columns"
    " of the map (def:  20,10)\n"
    "   -w --without-next\tHide next tetrimino (def: false)\n"
    "   -d --debug\t\tDebug mode (def:  false)\n"
)

DEBUG_BANNER = "*** DEBUG MODE ***\n"


class OptionError(ValueError):
    """Raised when a command-line argument is not accepted."""


@dataclass
class KeyBinding:
    """A configurable setting with its short flag, long name and label."""

    flag: str
    name: str
    label: str
    value: str


def count_debug_help(args):
    """Score the arguments after the program name: 1 per ``-d``, 2 per ``--help``."""
    score = 0
    for arg in args[1:]:
        if arg == "-d":
            score += 1
        if arg == "--help":
            score += 2
    return score


def check_flag_value(value):
    """Accept the value of a short flag: at most one character."""
    if len(value) > 1:
        raise OptionError(f"flag value {value!r} is longer than one character")
    return value


def check_positional(arg, previous):
    """Accept a bare argument only when it follows a flag other than ``-w``."""
    if not arg.startswith("-") and previous == "-w":
        raise OptionError(f"{previous!r} takes no value, got {arg!r}")
    if not arg.startswith("-") and previous.startswith("-"):
        return arg
    raise OptionError(f"unexpected argument {arg!r}")


def check_long_flag(arg):
    """Accept a ``--name=value`` argument whose name starts a known option."""
    position = equals_position(arg)
    if position == 0:
        raise OptionError(f"option {arg!r} has no '='")
    head = arg[: max(len(arg) - 2, 0)]
    if any(prefix_matches(head, long, position) for long in LONG_FLAGS):
        return arg
    raise OptionError(f"unknown option {arg!r}")


def check_short_flag(arg):
    """Accept one of the known short flags."""
    if arg in SHORT_FLAGS:
        return arg
    raise OptionError(f"unknown flag {arg!r}")


def check_argument(args, index):
    """Validate ``args[index]`` in the context of its neighbours and return it.

    *args* is the full command line, the program name at index 0.
    """
    arg = args[index]
    if arg in _STANDALONE:
        return arg
    if not arg.startswith("-"):
        return check_positional(arg, args[index - 1])
    if len(arg) <= 3:
        check_short_flag(arg)
        if index + 1 >= len(args):
            raise OptionError(f"flag {arg!r} needs a value")
        check_flag_value(args[index + 1])
        return arg
    return check_long_flag(arg)


def usage(program):
    """Return the help text for *program*."""
    return "Usage:\t" + program + _USAGE_BODY


def has_debug(args):
    """Tell whether ``-d`` appears anywhere on the command line."""
    return "-d" in args


def default_bindings():
    """Return a fresh list of the settings with their default values."""
    return [KeyBinding(*fields) for fields in _DEFAULT_BINDINGS]


def apply_settings(bindings, args):
    """Return copies of *bindings* updated from the command line *args*.

    ``-w`` switches the next-piece setting to ``No``; a short flag takes the
    following argument; ``--name=value`` takes the text after the first '='.
    """
    updated = [replace(binding) for binding in bindings]
    for index, arg in enumerate(args[1:], start=1):
        words = split_words(arg, "=")
        for binding in updated:
            if arg == "-w":
                if binding.flag == "-w":
                    binding.value = "No"
            elif arg == binding.flag and index + 1 < len(args):
                binding.value = args[index + 1]
            if words and words[0] == binding.name:
                binding.value = words[1] if len(words) > 1 else ""
    return updated


def format_bindings(bindings):
    """Return the debug listing of *bindings*."""
    lines = [DEBUG_BANNER]
    for binding in bindings:
        value = "(space)" if binding.value == " " else binding.value
        lines.append(f"{binding.label}{value}\n")
    return "".join(lines)