"""Small command-line utilities: unit conversion, echo, duplicate lines, Lissajous GIFs, fetching and bit counting."""

__version__ = "0.1.0"