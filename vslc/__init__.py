"""Types, syntax tree, visitor, printer, diagnostics and option parsing for VSL."""

__version__ = "0.1.0"