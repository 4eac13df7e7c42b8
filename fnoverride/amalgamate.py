"""Merge a header and the headers it includes with quotes into one text."""

from __future__ import annotations

import io
import sys
from typing import Optional, Sequence, TextIO

_RULE = "//" + "=" * 65
_INCLUDE = '#include "'


class AmalgamationError(Exception):
    """A file could not be read or an include could not be resolved."""


class Amalgamator:
    """Writes each file once, replacing quoted includes with their contents."""

    def __init__(self, out: Optional[TextIO] = None, log: Optional[TextIO] = None):
        self.out = out if out is not None else sys.stdout
        self.log = log if log is not None else sys.stderr
        self.included_files: set[str] = set()

    def process_file(self, file_path: str) -> None:
        """Write ``file_path`` with its includes expanded; raise on failure."""
        try:
            handle = open(file_path, encoding="utf-8", newline="")
        except OSError as exc:
            raise AmalgamationError(f"Error opening file: {file_path}") from exc

        with handle:
            if file_path in self.included_files:
                return
            self.included_files.add(file_path)

            self.out.write(f"{_RULE}\n//{file_path}\n{_RULE}\n")
            for raw_line in handle:
                line = raw_line[:-1] if raw_line.endswith("\n") else raw_line
                if _INCLUDE in line:
                    self._include(file_path, line)
                else:
                    self.out.write(line + "\n")

    def _include(self, file_path: str, line: str) -> None:
        start = line.index('"') + 1
        end = line.rindex('"')
        include_path = line[start:end] if end >= start else line[start:]

        if include_path in self.included_files:
            return

        if include_path.startswith("./"):
            include_path = include_path[2:]

        back_count = 0
        while include_path.startswith("../"):
            include_path = include_path[3:]
            back_count += 1

        base_path, slash, _ = file_path.rpartition("/")
        if not slash:
            raise AmalgamationError("Failed to find base path")
        for _ in range(back_count):
            base_path, slash, _ = base_path.rpartition("/")
            if not slash:
                raise AmalgamationError("Failed to find base path")
            self.log.write(f"Trimming to base: {base_path}\n")

        include_path = f"{base_path}/{include_path}"
        self.log.write(f"Including: {include_path}\n")
        self.process_file(include_path)
        self.out.write("\n")


def amalgamate(entry_path: str) -> str:
    """Return the merged text for the header at ``entry_path``."""
    buffer = io.StringIO()
    Amalgamator(out=buffer).process_file(entry_path)
    return buffer.getvalue()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: amalgamate <Entry Header>")
        return 0
    try:
        Amalgamator().process_file(args[0])
    except AmalgamationError as exc:
        print(exc, file=sys.stderr)
    return 0