import pytest

from termtetris.options import (
    KeyBinding,
    OptionError,
    apply_settings,
    check_argument,
    check_flag_value,
    check_long_flag,
    check_positional,
    check_short_flag,
    count_debug_help,
    default_bindings,
    format_bindings,
    has_debug,
    usage,
)


def test_count_debug_help_adds_scores():
    combined = count_debug_help(["tetris", "-d", "--help"])
    separate = count_debug_help(["tetris", "-d"]) + count_debug_help(["tetris", "--help"])
    assert combined == separate
    assert count_debug_help(["tetris", "--help"]) == 2 * count_debug_help(["tetris", "-d"])


def test_count_debug_help_ignores_program_name():
    assert count_debug_help(["-d"]) == count_debug_help(["tetris"])


def test_check_flag_value():
    assert check_flag_value("x") == "x"
    assert check_flag_value("") == ""
    with pytest.raises(OptionError):
        check_flag_value("xy")


def test_check_positional_accepts_after_flag():
    assert check_positional("5", "-l") == "5"


@pytest.mark.parametrize("previous", ["-w", "tetris", ""])
def test_check_positional_rejects(previous):
    with pytest.raises(OptionError):
        check_positional("5", previous)


@pytest.mark.parametrize(
    "arg", ["--level=5", "--key-left=a", "--map-size=20*10", "--without-next=x"]
)
def test_check_long_flag_accepts(arg):
    assert check_long_flag(arg) == arg


@pytest.mark.parametrize("arg", ["--level", "--debug", "--bogus=1"])
def test_check_long_flag_rejects(arg):
    with pytest.raises(OptionError):
        check_long_flag(arg)


@pytest.mark.parametrize("flag", ["-d", "-w", "-kp", "-kq", "-kd", "-kt", "-kr", "-kl", "-l"])
def test_check_short_flag_accepts(flag):
    assert check_short_flag(flag) == flag


def test_check_short_flag_rejects():
    with pytest.raises(OptionError):
        check_short_flag("-x")


def test_check_argument_accepts_flag_and_value():
    args = ["tetris", "-l", "5", "--help", "-d", "-w"]
    assert [check_argument(args, i) for i in range(1, len(args))] == args[1:]


@pytest.mark.parametrize(
    "args,index",
    [
        (["tetris", "-l"], 1),
        (["tetris", "-l", "10"], 1),
        (["tetris", "-w", "5"], 2),
        (["tetris", "foo"], 1),
        (["tetris", "-zz", "a"], 1),
        (["tetris", "--nothing=1"], 1),
    ],
)
def test_check_argument_rejects(args, index):
    with pytest.raises(OptionError):
        check_argument(args, index)


def test_usage_text():
    text = usage("prog")
    assert text.startswith("Usage:\tprog [options]\nOptions:\n")
    assert text.endswith("   -d --debug\t\tDebug mode (def:  false)\n")
    assert "   --help\t\tDisplay this help\n" in text


def test_has_debug():
    assert has_debug(["tetris", "-l", "5", "-d"])
    assert not has_debug(["tetris", "--debug=1"])


def test_default_bindings_values():
    values = [binding.value for binding in default_bindings()]
    assert values == ["Q", "D", "(space)", "x", "a", "p", "Yes", "1", "20*10"]


def test_default_bindings_are_fresh():
    first = default_bindings()
    first[0].value = "changed"
    assert default_bindings()[0].value == "Q"


def test_apply_settings_updates_copies():
    original = default_bindings()
    args = ["tetris", "-d", "--level=7", "-kt", " ", "-w", "-kl", "z"]
    updated = apply_settings(original, args)
    values = {binding.flag: binding.value for binding in updated}
    assert values["-l"] == "7"
    assert values["-kt"] == " "
    assert values["-w"] == "No"
    assert values["-kl"] == "z"
    assert values["-kr"] == "D"
    assert [binding.value for binding in original] == [b.value for b in default_bindings()]


def test_apply_settings_empty_long_value():
    updated = apply_settings(default_bindings(), ["tetris", "--level="])
    assert {b.flag: b.value for b in updated}["-l"] == ""


def test_format_bindings_shows_space_name():
    bindings = [KeyBinding("-kt", "--key-turn", "Key Turn : ", " ")]
    assert format_bindings(bindings) == "*** DEBUG MODE ***\nKey Turn : (space)\n"


def test_format_bindings_one_line_per_binding():
    bindings = default_bindings()
    text = format_bindings(bindings)
    assert text.startswith("*** DEBUG MODE ***\n")
    assert text.count("\n") == len(bindings) + 1
    assert "Key Left : Q\n" in text