"""Prime-field elliptic curve arithmetic over the SEC 2 curves: big integers, GF(p) and points."""

__version__ = "0.1.0"