"""chesswalk — random legal chess games in SAN, with a pure-Python rules core."""

__version__ = "0.1.0"
