"""CID Filler: resolve clipboard codes against a SQLite table."""

__version__ = "1.1.0"
__author__ = "Gusto F. Chatami (gustof@tuta.io | github.com/9vy)"
