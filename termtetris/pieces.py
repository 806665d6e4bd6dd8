"""Loading, validating and describing tetrimino definition files."""

import re
from dataclasses import dataclass
from pathlib import Path

from .numbers import parse_digit_sum

MIN_FILE_SIZE = 8
MAX_FILE_SIZE = 400

_HEADER = re.compile(r"([1-9]+) ([1-9][0-9]*) ([0-9]+)")
_CELLS = frozenset(" *")


class PieceError(ValueError):
    """Raised when a tetrimino file is malformed."""


@dataclass(frozen=True)
class Tetrimino:
    """A tetrimino read from a file; *error* is set when the file was rejected."""

    name: str
    width: int = 0
    height: int = 0
    color: int = 0
    rows: tuple = ()
    error: str | None = None

    @property
    def valid(self):
        return self.error is None


def _trim(row):
    return row[: row.rfind("*") + 1]


def _display_name(filename):
    return filename.split(".", 1)[0]


def parse_header(line):
    """Parse a ``width height color`` header line into three integers."""
    match = _HEADER.fullmatch(line)
    if match is None:
        raise PieceError(f"invalid header {line!r}")
    width, height, color = (parse_digit_sum(group) for group in match.groups())
    return width, height, color


def check_shape(width, height, body):
    """Validate the rows of a piece and return them without trailing spaces.

    Every row must end with a newline, hold only spaces and stars, contain a
    star no further right than *width*; the widest row must be exactly
    *width* and there must be exactly *height* rows.
    """
    if not body.endswith("\n"):
        raise PieceError("every row must end with a newline")
    rows = body[:-1].split("\n")
    longest = 0
    for row in rows:
        if not set(row) <= _CELLS:
            raise PieceError(f"invalid character in row {row!r}")
        used = len(_trim(row))
        if used == 0 or used > width:
            raise PieceError(f"row {row!r} does not fit width {width}")
        longest = max(longest, used)
    if longest != width:
        raise PieceError(f"widest row is {longest}, expected {width}")
    if len(rows) != height:
        raise PieceError(f"piece has {len(rows)} rows, expected {height}")
    return tuple(_trim(row) for row in rows)


def trim_trailing(body):
    """Return *body* with every row cut just after its last star."""
    rows = body.split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    return "".join(_trim(row) + "\n" for row in rows)


def parse_piece(name, text):
    """Parse the contents of a tetrimino file."""
    header, newline, body = text.partition("\n")
    if not newline:
        raise PieceError("missing header line")
    width, height, color = parse_header(header)
    rows = check_shape(width, height, body)
    return Tetrimino(name, width, height, color, rows)


def load_piece(path):
    """Read and parse the tetrimino file at *path*."""
    path = Path(path)
    if "." not in path.name:
        raise PieceError(f"file name {path.name!r} has no extension")
    if not path.is_file():
        raise PieceError(f"{path.name!r} is not a regular file")
    size = path.stat().st_size
    if not MIN_FILE_SIZE <= size <= MAX_FILE_SIZE:
        raise PieceError(f"file size {size} out of range")
    text = path.read_bytes().decode("latin-1")
    return parse_piece(_display_name(path.name), text)


def load_pieces(directory):
    """Load every piece in *directory*, sorted by file name.

    Rejected files appear as pieces carrying an error. Raises OSError when
    the directory cannot be read.
    """
    pieces = []
    for entry in sorted(Path(directory).iterdir(), key=lambda p: p.name):
        if entry.name.endswith("."):
            continue
        try:
            pieces.append(load_piece(entry))
        except (PieceError, OSError) as exc:
            pieces.append(Tetrimino(_display_name(entry.name), error=str(exc)))
    return pieces


def format_pieces(pieces):
    """Return the debug listing of *pieces*."""
    parts = [f"Tetriminos :  {len(pieces)}\n"]
    for piece in pieces:
        parts.append(f"Tetriminos :  Name {piece.name} :  ")
        if not piece.valid:
            parts.append("Error\n")
            continue
        parts.append(
            f"Size : {piece.width}*{piece.height} :  Color {piece.color} :\n"
        )
        parts.extend(row + "\n" for row in piece.rows)
    return "".join(parts)