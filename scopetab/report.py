"""Command-driven symbol table sessions and the hash collision report.

An input file starts with the bucket count, followed by one command per
line:

``I name type [extra...]``
    insert a symbol (``FUNCTION`` takes a return type and parameter types,
    ``STRUCT`` and ``UNION`` take ``type name`` pairs)
``L name``
    look a symbol up through all open scopes
``D name``
    delete a symbol from the current scope
``P C`` / ``P A``
    print the current scope or all scopes
``S`` / ``E``
    enter or exit a scope
``Q``
    quit

The report runs the whole session once per hash function and records the
average collision ratio of each.
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from .hashing import HASH_NAMES
from .symbol import OutputStyle, SymbolInfo
from .table import SymbolTable

__all__ = ["split_command", "process", "report_generator", "main"]

_AGGREGATE_KINDS = ("STRUCT", "UNION")


def split_command(line: str) -> List[str]:
    """Split a command line into words separated by spaces."""
    return [word for word in line.split(" ") if word]


def _mismatch(out: TextIO, command: str) -> bool:
    out.write(f"\t\tNumber of parameters mismatch for the command {command}\n")
    return False


def _insert(words: Sequence[str], table: SymbolTable) -> bool:
    if len(words) < 3:
        return False
    name, kind, extra = words[1], words[2], words[3:]

    if kind == "FUNCTION":
        if not extra:
            print("I : Function type needs to have a return type")
            return False
        symbol = SymbolInfo(name, kind)
        for type_name in extra:
            symbol.add_extra(SymbolInfo("", type_name))
        table.insert(symbol)
        return True

    if kind in _AGGREGATE_KINDS:
        if len(extra) % 2 != 0:
            print(
                "I : STRUCT or UNION needs to have variable_name and "
                "variable_type in pair"
            )
            return False
        symbol = SymbolInfo(name, kind)
        for member_type, member_name in zip(extra[::2], extra[1::2]):
            symbol.add_extra(SymbolInfo(member_name, member_type))
        table.insert(symbol)
        return True

    table.insert(SymbolInfo(name, kind))
    return True


def process(words: Sequence[str], table: SymbolTable, out: TextIO) -> bool:
    """Carry out one split command on ``table``; return whether it was valid.

    Problems with arguments are reported on ``out``; a malformed insertion
    or an unknown command is reported on standard output.
    """
    if not words:
        return False
    command = words[0]
    count = len(words)

    if command == "I":
        return _insert(words, table)

    if command == "L" and count > 1:
        if count > 2:
            return _mismatch(out, command)
        table.look_up(words[1])
        return True

    if command == "D" and count > 1:
        if count > 2:
            return _mismatch(out, command)
        table.remove(words[1])
        return True

    if command == "P" and count > 1:
        if count > 2:
            return _mismatch(out, command)
        option = words[1]
        if option == "C":
            table.print_current()
        elif option == "A":
            table.print_all()
        else:
            out.write(f"\t\tNot valid option in command {option}\n")
            return False
        return True

    if command == "S":
        # A single stray argument is tolerated here.
        if count > 2:
            return _mismatch(out, command)
        table.enter_scope()
        return True

    if command == "E":
        if count > 1:
            return _mismatch(out, command)
        table.exit_scope()
        return True

    print("Not valid command")
    return False


def _read_bucket_count(lines: Iterable[str]) -> int:
    for line in lines:
        tokens = line.split()
        if tokens:
            try:
                return int(tokens[0])
            except ValueError:
                raise ValueError(f"invalid bucket count {tokens[0]!r}") from None
    raise ValueError("input holds no bucket count")


def report_generator(
    lines: Iterable[str],
    out: TextIO,
    hash_name: str = "SDBM",
    style: OutputStyle = OutputStyle.PLAIN,
) -> float:
    """Run one session of commands and return its collision ratio.

    ``lines`` holds the bucket count first and then the commands; reading
    stops at ``Q`` or at the end of the input. Every command line is echoed
    to ``out`` with its number.
    """
    stream = iter(lines)
    num_buckets = _read_bucket_count(stream)
    table = SymbolTable(num_buckets, out, hash_name, style)
    try:
        for number, raw in enumerate(stream, 1):
            line = raw.rstrip("\r\n")
            out.write(f"Cmd {number}: {line}\n")
            words = split_command(line)
            if not words:
                continue
            if words[0] == "Q":
                break
            process(words, table, out)
        return table.collision_ratio()
    finally:
        table.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the session with every hash function and write the report."""
    parser = argparse.ArgumentParser(
        prog="scopetab-report",
        description="Run symbol table commands and report hash collisions.",
    )
    parser.add_argument("input", help="file with the bucket count and commands")
    parser.add_argument("output", help="file that receives the session log")
    parser.add_argument(
        "hash_name",
        nargs="?",
        help="accepted for compatibility; every hash is always reported",
    )
    parser.add_argument(
        "--report", default="report.txt", help="where the report is written"
    )
    parser.add_argument(
        "--style",
        choices=[s.value for s in OutputStyle],
        default=OutputStyle.PLAIN.value,
        help="output style of the session log",
    )
    args = parser.parse_args(argv)
    style = OutputStyle(args.style)

    with open(args.input, encoding="utf-8") as source:
        lines = source.readlines()

    with open(args.output, "w", encoding="utf-8") as out, open(
        args.report, "w", encoding="utf-8"
    ) as report:
        for name in HASH_NAMES:
            ratio = report_generator(lines, out, name, style)
            report.write(f"{name}     {format(ratio, 'g')}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())