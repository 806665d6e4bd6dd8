"""The playing field and the piece that falls through it."""

EMPTY = " "
FALLING = "*"
FROZEN = "s"

LEFT_KEY = "q"
RIGHT_KEY = "d"

DEFAULT_SHAPE = ("*", "*", "**")
DEFAULT_START_COL = 30
START_ROW = 1


def _star_cells(shape):
    """Yield the (row, column) offsets of the filled cells of *shape*."""
    for r, line in enumerate(shape):
        for c, char in enumerate(line):
            if char == FALLING:
                yield r, c


class Board:
    """A grid of cells: blank, part of the falling piece, or frozen."""

    def __init__(self, rows, cols):
        if rows < 1 or cols < 1:
            raise ValueError(f"board must be at least 1x1, got {rows}x{cols}")
        self._height = rows
        self._width = cols
        self._grid = [[EMPTY] * cols for _ in range(rows)]

    def _inside(self, row, col):
        return 0 <= row < self._height and 0 <= col < self._width

    def _fits(self, row, col, shape):
        """Tell whether *shape* at (*row*, *col*) lies on blank cells only."""
        return all(
            self._inside(row + r, col + c) and self._grid[row + r][col + c] == EMPTY
            for r, c in _star_cells(shape)
        )

    def _cells(self, row, col, shape):
        cells = [(row + r, col + c) for r, c in _star_cells(shape)]
        outside = [cell for cell in cells if not self._inside(*cell)]
        if outside:
            raise ValueError(f"shape at ({row}, {col}) leaves the board")
        return cells

    def place(self, row, col, shape):
        """Draw the stars of *shape* with its top-left corner at (*row*, *col*)."""
        for r, c in self._cells(row, col, shape):
            self._grid[r][c] = FALLING

    def erase(self, row, col, shape):
        """Blank the cells covered by the stars of *shape* at (*row*, *col*)."""
        for r, c in self._cells(row, col, shape):
            self._grid[r][c] = EMPTY

    def freeze(self):
        """Turn every falling cell into a frozen one."""
        for line in self._grid:
            for c, char in enumerate(line):
                if char == FALLING:
                    line[c] = FROZEN

    def has_collision(self):
        """Tell whether a falling cell rests on the floor or on a non-falling cell."""
        for r, line in enumerate(self._grid):
            for c, char in enumerate(line):
                if char != FALLING:
                    continue
                if r + 1 == self._height:
                    return True
                if self._grid[r + 1][c] not in (EMPTY, FALLING):
                    return True
        return False

    def rows(self):
        """Return the board as a tuple of strings, top row first."""
        return tuple("".join(line) for line in self._grid)


class FallingPiece:
    """A piece dropping one row per step, steered left or right by keys."""

    def __init__(self, board, shape=DEFAULT_SHAPE, start_col=DEFAULT_START_COL):
        if not any(FALLING in line for line in shape):
            raise ValueError("shape has no filled cell")
        self.board = board
        self.shape = tuple(shape)
        self.start_col = start_col
        self.row = START_ROW
        self.col = start_col

    @property
    def height(self):
        return len(self.shape)

    def _reset(self):
        self.row = START_ROW
        self.col = self.start_col

    def _move(self, key):
        if key == LEFT_KEY and self.board._fits(self.row, self.col - 1, self.shape):
            self.col -= 1
        elif key == RIGHT_KEY and self.board._fits(self.row, self.col + 1, self.shape):
            self.col += 1

    def step(self, key=None):
        """Advance the piece by one row and return the frame to display.

        When the piece has come to rest it is frozen into the board and a new
        piece starts again at the top.
        """
        self._move(key)
        if self.board.has_collision():
            self.board.freeze()
            self._reset()
            return self.board.rows()
        self.board.place(self.row, self.col, self.shape)
        frame = self.board.rows()
        if not self.board.has_collision():
            self.board.erase(self.row, self.col, self.shape)
        self.row += 1
        if self.row + self.height > self.board._height:
            self._reset()
            self.board.freeze()
        return frame