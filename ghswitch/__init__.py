"""Switch the active GitHub CLI token between named profiles."""

__version__ = "0.3.0"
