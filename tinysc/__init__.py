"""A tiny Scheme-like expression interpreter with a lexer, parser and command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]