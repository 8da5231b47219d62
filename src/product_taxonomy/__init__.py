"""Product taxonomy attributes, values and localizations."""

__version__ = "0.1.0"
