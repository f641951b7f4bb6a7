"""Windows command-line quoting and parsing."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable

_WHITESPACE = " \t"
_PROGRAM = re.compile(r'"(?P<quoted>[^"]*)"?|(?P<plain>[^ \t]*)')


def escape_one(arg: str) -> str:
    """Quote a single argument so Windows parses it back as one argument."""
    if not arg:
        return '""'

    space = any(ch in _WHITESPACE for ch in arg)
    if not space and '"' not in arg and "\\" not in arg:
        return arg

    out = ['"'] if space else []
    slash = 0
    for ch in arg:
        if ch == "\\":
            slash += 1
            out.append("\\")
        elif ch == '"':
            out.append("\\" * (slash + 1))
            out.append('"')
        else:
            slash = 0
            out.append(ch)
    if space:
        out.append("\\" * slash)
        out.append('"')
    return "".join(out)


def args_to_cmd(args: Iterable[str]) -> str:
    """Join arguments into one Windows command line."""
    return " ".join(escape_one(arg) for arg in args)


def _parse_arguments(text: str) -> list[str]:
    args: list[str] = []
    current: list[str] = []
    started = False
    bcount = 0
    qcount = 0
    pos = 0
    end = len(text)
    while pos < end:
        ch = text[pos]
        if ch in _WHITESPACE and qcount == 0:
            if started:
                args.append("".join(current))
                current = []
                started = False
            bcount = 0
            pos += 1
            continue
        started = True
        if ch == "\\":
            current.append(ch)
            bcount += 1
            pos += 1
        elif ch == '"':
            if bcount % 2 == 0:
                del current[len(current) - bcount // 2:]
                qcount += 1
            else:
                del current[len(current) - bcount // 2 - 1:]
                current.append('"')
            pos += 1
            bcount = 0
            while pos < end and text[pos] == '"':
                qcount += 1
                if qcount == 3:
                    current.append('"')
                    qcount = 0
                pos += 1
            if qcount == 2:
                qcount = 0
        else:
            current.append(ch)
            bcount = 0
            pos += 1
    if started:
        args.append("".join(current))
    return args


def cmd_to_args(cmd: str) -> list[str]:
    """Split a Windows command line into arguments.

    The first argument is the program and ends at the closing quote or the
    first blank; the rest follow the usual backslash and quote rules. An
    empty command line yields the running program's path.
    """
    if not cmd:
        return [sys.executable]
    match = _PROGRAM.match(cmd)
    program = match.group("quoted") if match.group("quoted") is not None else match.group("plain")
    rest = cmd[match.end():].lstrip(_WHITESPACE)
    return [program, *_parse_arguments(rest)]