"""Errors raised around the extractor: files, front matter and templates.

The extractor itself never raises; these cover the I/O and rendering steps
and map onto the exit codes of the `markdown-cv` command.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    USAGE = 2
    CONFIG_ERROR = 3  # front matter or template folder
    NOT_FOUND = 6  # input file or template name
    INTERRUPTED = 130


@dataclass
class CLIError(Exception):
    """An expected failure with the exit code and an optional fix-it hint."""
    message: str
    code: ExitCode = ExitCode.ERROR
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    def report(self) -> None:
        _print_error(self.message, self.hint)


class ConfigError(CLIError):
    """Front matter that does not parse, or a template that cannot render."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.CONFIG_ERROR, hint)


class NotFoundError(CLIError):
    """Missing input file or unknown built-in template."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.NOT_FOUND, hint)


class UsageError(CLIError):
    """Arguments that parse but cannot be honoured together."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.USAGE, hint)


def _print_error(message: str, hint: Optional[str] = None) -> None:
    print(f"Error: {message}", file=sys.stderr)
    if hint:
        print(f"Hint: {hint}", file=sys.stderr)


def handle_error(error: BaseException, verbose: bool = False) -> int:
    """Report `error` on stderr and return the exit code for it.

    CLIError carries its own code; Ctrl+C maps to INTERRUPTED; anything
    else is ERROR, with the traceback when `verbose` is set.
    """
    if isinstance(error, CLIError):
        error.report()
        return error.code
    if isinstance(error, KeyboardInterrupt):
        print("\nInterrupted.", file=sys.stderr)
        return ExitCode.INTERRUPTED
    _print_error(str(error) or type(error).__name__)
    if verbose:
        import traceback
        traceback.print_exception(type(error), error, error.__traceback__)
    return ExitCode.ERROR
