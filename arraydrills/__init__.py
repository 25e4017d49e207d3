"""Classic array, matrix and sorting exercises, each solved several ways."""

__version__ = "0.1.0"