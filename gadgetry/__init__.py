"""Small everyday helpers: strings, lists, file system, vectors, matrices and more."""

__version__ = "0.1.0"