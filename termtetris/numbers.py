"""Integer parsing and formatting helpers used by the game and its options."""

INT_MAX = 2147483647
_OVERFLOW_GUARD = INT_MAX // 10


def _split_sign(text: str) -> tuple[int, str]:
    """Consume the leading ``+``/``-`` run of *text*.

    Returns the sign it encodes (-1 for an odd number of minus signs, else 1)
    and the remainder of the text after the run.
    """
    minus_count = 0
    position = 0
    for char in text:
        if char == "-":
            minus_count += 1
        elif char != "+":
            break
        position += 1
    sign = -1 if minus_count % 2 else 1
    return sign, text[position:]


def parse_bounded_int(text: str) -> int:
    """Parse a signed decimal number, returning 0 when it overflows 32 bits.

    Any run of leading ``+``/``-`` characters sets the sign (an odd number of
    minus signs makes it negative).  Parsing stops at the first non-digit.
    """
    sign, body = _split_sign(text)
    value = 0
    for char in body:
        if not "0" <= char <= "9":
            break
        if value > _OVERFLOW_GUARD:
            return 0
        if value == _OVERFLOW_GUARD and char > "7":
            return 0
        value = value * 10 + int(char)
    return value * sign


def parse_last_digit(text: str) -> int:
    """Return the last digit of the leading digit run, with its sign.

    Leading ``+``/``-`` characters flip the sign for each minus.  Only the
    final digit before the first non-digit survives.
    """
    sign, body = _split_sign(text)
    result = 0
    for char in body:
        if not "0" <= char <= "9":
            break
        result = int(char)
    return result * sign


def parse_digit_sum(text: str) -> int:
    """Accumulate every character after an optional ``-`` as a decimal digit.

    Characters are not validated: each contributes its offset from ``'0'``,
    so non-digits skew the result rather than stopping the scan.
    """
    negative = text.startswith("-")
    body = text[1:] if negative else text
    stock = 0
    for char in body:
        stock = (stock + ord(char) - ord("0")) * 10
    magnitude = abs(stock) // 10
    stock = magnitude if stock >= 0 else -magnitude
    return -stock if negative else stock


def format_int(value: int) -> str:
    """Return the decimal representation of *value*."""
    if value < 0:
        return "-" + format_int(-value)
    if value <= 9:
        return chr(ord("0") + value)
    return format_int(value // 10) + chr(ord("0") + value % 10)