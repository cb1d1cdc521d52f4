"""Interactive mode for the Egg interpreter. Uses cmd as backend."""

from __future__ import annotations

import cmd
import sys

from egg.interpreter import Interpreter
from egg.printer import to_string
from egg.types.errors import EggError


def open_parens(text: str) -> int:
    """Number of unclosed '(' in `text`, ignoring anything inside string literals."""
    depth = 0
    in_string = False
    for ch in text:
        if ch == '"':
            in_string = not in_string
        elif in_string:
            continue
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
    return depth


def report(error: EggError, stream=None) -> None:
    stream = stream if stream is not None else sys.stderr
    print(f"{type(error).__name__.removeprefix('Egg')}: {error}", file=stream)


class Shell(cmd.Cmd):
    """Egg interpreter shell."""
    intro = "Egg interpreter\nType 'help' for more information, 'exit' to quit."
    prompt = "> "
    secondary_prompt = ". "  # used while parentheses are still open

    def __init__(self, interp: Interpreter, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interp = interp
        self._pending = ""

    def default(self, line):
        """Evaluates a line of Egg in the session scope."""
        source = f"{self._pending}\n{line}" if self._pending else line
        if open_parens(source) > 0:
            self._pending = source
            self.prompt = self.secondary_prompt
            return
        self._pending = ""
        self.prompt = Shell.prompt

        # cmd.Cmd would exit on an uncaught exception
        try:
            result = self.interp.eval(source)
        except EggError as e:
            report(e, self.stdout)
            return
        print(to_string(result), file=self.stdout)

    def do_help(self, arg):
        """Short introduction instead of per-command docs."""
        print("Egg is a tiny expression language. Everything is an expression:\n"
              "  define(x, 10)            bind a name\n"
              "  +(x, 1)                  apply a function\n"
              "  if(<(x, 5), \"a\", \"b\")    choose a branch\n"
              "  define(f, func(a, *(a, a)))\n"
              "Definitions persist for the rest of the session.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
