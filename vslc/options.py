"""Command-line option parsing for the compiler."""

from __future__ import annotations

import enum
import sys
from typing import Iterable, Optional, TextIO


class Action(enum.Enum):
    """What the compiler has been asked to do."""

    COMPILE = enum.auto()
    """Compile a source file into an object file."""
    DISPLAY_HELP = enum.auto()
    """Display help and usage information."""
    REPL_LEX = enum.auto()
    """Emit a list of tokens."""
    REPL_PARSE = enum.auto()
    """Emit a syntax tree."""
    REPL_GENERATE = enum.auto()
    """Emit intermediate code."""


_ACTION_FLAGS = {
    "-h": Action.DISPLAY_HELP,
    "--help": Action.DISPLAY_HELP,
    "-l": Action.REPL_LEX,
    "-p": Action.REPL_PARSE,
    "-g": Action.REPL_GENERATE,
}


class OptionParser:
    """Parses compiler arguments.

    Bad arguments are reported on the error stream and collected in
    ``errors``; parsing carries on past them.
    """

    def __init__(self, err: Optional[TextIO] = None) -> None:
        self.action = Action.COMPILE
        self.optimize = False
        self.infile: Optional[str] = None
        self.outfile = "a.out"
        self.errors: list[str] = []
        self._err = err

    def _error(self, message: str) -> None:
        self.errors.append(message)
        stream = self._err if self._err is not None else sys.stderr
        stream.write(message + "\n")

    def parse(self, argv: Iterable[str]) -> "OptionParser":
        """Parse the arguments, not including the program name."""
        args = iter(argv)
        for arg in args:
            if arg in _ACTION_FLAGS:
                self.action = _ACTION_FLAGS[arg]
            elif arg == "-o":
                outfile = next(args, None)
                if outfile is None:
                    self._error("Error: no output file given")
                else:
                    self.outfile = outfile
            elif arg.startswith("-O"):
                level = arg[2:]
                if not level:
                    self._error("Error: No optimization level specified.")
                elif level[0] == "0":
                    self.optimize = False
                elif level[0] == "1":
                    self.optimize = True
                else:
                    self._error(f"Error: Unknown optimization level '{level}'")
            # a lone "-" means standard input
            elif arg.startswith("-") and len(arg) > 1:
                self._error(f"Error: unknown flag '{arg}'")
            elif self.infile is not None:
                self._error(
                    "Error: VSL currently doesn't support multiple input files"
                )
            else:
                self.infile = arg
        return self