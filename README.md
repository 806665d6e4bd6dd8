# termtetris

A small Tetris for the terminal, together with the tools around it: a
command-line option checker, a loader that validates tetrimino description
files, and a curses playing field where a piece falls and can be steered.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

### `termtetris`

Checks the command line and the tetrimino files. In debug mode (`-d`) it
prints the resulting settings and a description of every tetrimino file.

```
termtetris --help
termtetris -d
termtetris -d -kl q -kr d --level=3
```

Accepted options:

| Option                  | Meaning                                 |
|-------------------------|-----------------------------------------|
| `--help`                | display the usage text                  |
| `-l`, `--level=`        | starting level                          |
| `-kl`, `--key-left=`    | key that moves the piece left           |
| `-kr`, `--key-right=`   | key that moves the piece right          |
| `-kt`, `--key-turn=`    | key that turns the piece                |
| `-kd`, `--key-drop=`    | key that drops the piece                |
| `-kq`, `--key-quit=`    | key that quits the game                 |
| `-kp`, `--key-pause=`   | key that pauses the game                |
| `--map-size=`           | rows and columns of the map             |
| `-w`, `--without-next`  | hide the next tetrimino                 |
| `-d`, `--debug`         | debug mode                              |

A short option takes its value from the next argument, which must be at
most one character long. A long option takes its value after `=`.

Behaviour:

- Without any argument the usage text is printed and the exit status is 84.
- With `--help` (alone or with `-d`) the usage text is printed before the
  rest of the checks.
- An argument that is not accepted makes the command print the usage text
  (unless it was already printed) and exit with status 84.
- The `tetrimino/` directory of the current working directory is always
  read; if it cannot be read the exit status is 84.
- With `-d` the command prints `*** DEBUG MODE ***`, then each setting
  (`Key Left`, `Key Right`, `Key Turn`, `Key Drop`, `Key Quit`,
  `Key Pause`, `Next`, `Level`, `Size`) with its value, a value of a single
  space shown as `(space)`. Then it prints the number of tetrimino files and,
  for each, its name and either its size and colour followed by its shape,
  or `Error`.
- Finally it prints `Press any key to start Tetris` and exits with status 0.

### `termtetris-play`

Opens the curses playing field with its LEVEL, HOLD and NEXT panels and
drops an L-shaped piece through it. Press `q` to move the falling piece left
and `d` to move it right. When the piece comes to rest it is frozen in place
and a new one starts from the top. Stop the game with Ctrl-C.

```
termtetris-play
termtetris-play 30 40
```

The two optional arguments are the height and width of the game window;
they default to 50 and 60. Giving only one of them, or a value below 2, is
an error.

## Tetrimino files

`termtetris` reads every entry of `tetrimino/`, sorted by name, skipping
names that end with a dot. A valid file has a dot in its name (the listed
name is the part before the first dot), is a regular file, and is between
8 and 400 bytes long. Its first line holds the width, the height and the
colour, separated by single spaces; each following line draws one row of
the shape with `*` and spaces and ends with a newline:

```
2 3 1
*
*
**
```

Every row must contain at least one `*`. Trailing spaces are ignored; the
widest row must equal the declared width and the number of rows must equal
the declared height.

## Library use

- `termtetris.pieces`: `parse_piece`, `load_piece` and `load_pieces` read
  and validate tetrimino files into `Tetrimino` values; `parse_header`,
  `check_shape` and `trim_trailing` handle the parts of a file;
  `format_pieces` builds the debug listing. Bad input raises `PieceError`.
- `termtetris.options`: the argument checks (`check_argument`,
  `check_short_flag`, `check_long_flag`, `check_flag_value`,
  `check_positional`), `usage`, the `KeyBinding` settings from
  `default_bindings`, `apply_settings` and `format_bindings`. Rejected
  arguments raise `OptionError`.
- `termtetris.cli.run(argv, out, pieces_dir)` runs the `termtetris` command
  against any output stream and pieces directory and returns the exit
  status.
- `termtetris.board`: `Board` and `FallingPiece` implement the playing field
  without a terminal; `FallingPiece.step(key)` returns each frame as a tuple
  of strings.
- `termtetris.screen`: `compute_layout` gives the window geometry as a
  `Layout`, `parse_size` reads the window size arguments.
- `termtetris.linereader.LineReader` reads newline-terminated lines from a
  text or binary stream a few characters at a time.
- `termtetris.numbers` and `termtetris.textutil` hold the small integer and
  string helpers the rest of the package uses.

## What it does not do

The two commands are separate: `termtetris` checks options and pieces but
does not start a game, and `termtetris-play` ignores the options and the
tetrimino files. The playing field has a single fixed piece, no rotation,
dropping, pausing, quit key, line clearing, scoring or levels; the LEVEL,
HOLD and NEXT panels show only their titles.