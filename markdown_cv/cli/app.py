"""Decorator-registered argparse subcommands for the markdown-cv CLI.

Example:
    app = CLIApp("markdown-cv", "Render Markdown CVs")

    @app.command("render", help="Render HTML")
    @app.argument("input", help="Markdown file")
    def cmd_render(args):
        ...
        return 0

`@argument` lines sit below `@command`; they are applied first and kept on
the function until `@command` registers it.
"""
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..errors import ExitCode, handle_error

CommandFunc = Callable[[argparse.Namespace], int]

_ARGS_ATTR = "_cli_arguments"


@dataclass
class CommandDef:
    name: str
    func: CommandFunc
    help: str = ""
    arguments: List[Tuple[Tuple[str, ...], Dict[str, Any]]] = field(default_factory=list)

    def add_to(self, subparsers: Any) -> None:
        parser = subparsers.add_parser(self.name, help=self.help, description=self.help)
        for flags, kwargs in self.arguments:
            parser.add_argument(*flags, **kwargs)
        parser.set_defaults(_cmd_func=self.func)


class CLIApp:
    def __init__(self, name: str, description: str = "", *, version: Optional[str] = None):
        self.name = name
        self.description = description
        self.version = version
        self._commands: Dict[str, CommandDef] = {}

    def command(self, name: str, *, help: str = "") -> Callable[[CommandFunc], CommandFunc]:
        """Register the decorated function as subcommand `name`."""
        def decorator(func: CommandFunc) -> CommandFunc:
            # Decorators run bottom-up, so the stored arguments are reversed.
            arguments = list(reversed(getattr(func, _ARGS_ATTR, [])))
            self._commands[name] = CommandDef(name, func, help, arguments)
            return func
        return decorator

    def argument(self, *flags: str, **kwargs: Any) -> Callable[[CommandFunc], CommandFunc]:
        """Attach one `add_argument` call to the command decorated above."""
        def decorator(func: CommandFunc) -> CommandFunc:
            pending = getattr(func, _ARGS_ATTR, None)
            if pending is None:
                pending = []
                setattr(func, _ARGS_ATTR, pending)
            pending.append((flags, kwargs))
            return func
        return decorator

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog=self.name, description=self.description)
        if self.version:
            parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {self.version}")
        parser.add_argument("--verbose", "-v", action="store_true", help="Show tracebacks for unexpected errors")
        subparsers = parser.add_subparsers(dest="command", metavar="<command>")
        for cmd_def in self._commands.values():
            cmd_def.add_to(subparsers)
        return parser

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Parse `argv` and dispatch; every failure becomes an exit code."""
        parser = self.build_parser()
        args = parser.parse_args(argv)
        cmd_func = getattr(args, "_cmd_func", None)
        if cmd_func is None:
            parser.print_help()
            return ExitCode.USAGE
        try:
            return int(cmd_func(args))
        except (Exception, KeyboardInterrupt) as e:
            return handle_error(e, verbose=args.verbose)

    def main(self, argv: Optional[Sequence[str]] = None) -> None:
        sys.exit(self.run(argv))
