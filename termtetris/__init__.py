"""Terminal Tetris: option checking, tetrimino file loading and a curses playing field."""

__version__ = "0.1.0"