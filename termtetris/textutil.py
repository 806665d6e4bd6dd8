"""Small string helpers used when parsing options and piece files."""


def split_words(text: str, sep: str) -> list[str]:
    """Split *text* on *sep*, dropping the empty pieces between repeats."""
    return [word for word in text.split(sep) if word]


def compare(left: str, right: str) -> int:
    """Return the code-point difference at the first mismatch, or 0.

    A string that ends first compares as if followed by a code point of 0.
    """
    for a, b in zip(left, right):
        if a != b:
            return ord(a) - ord(b)
    if len(left) == len(right):
        return 0
    if len(left) > len(right):
        return ord(left[len(right)])
    return -ord(right[len(left)])


def prefix_matches(text: str, prefix: str, count: int) -> bool:
    """Tell whether the first *count* characters of *text* start *prefix*.

    Only as many characters as *text* actually has (up to *count*) are
    compared, so a short *text* that begins *prefix* matches.
    """
    head = text[: max(count, 0)]
    return prefix[: len(head)] == head


def equals_position(arg: str) -> int:
    """Return the 1-based position just past the first ``=``, or 0 if none."""
    return arg.find("=") + 1


def take_until(text: str, delim: str, start: int = 0) -> tuple[str, int]:
    """Return the text from *start* up to *delim* and the delimiter's index.

    Raises ValueError when *delim* does not occur at or after *start*.
    """
    index = text.find(delim, start)
    if index < 0:
        raise ValueError(f"delimiter {delim!r} not found after position {start}")
    return text[start:index], index