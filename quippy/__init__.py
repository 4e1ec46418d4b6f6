"""Value types, operators and variable storage for the quippy scripting language."""

__version__ = "0.1.0"
__all__ = ["interp", "values"]