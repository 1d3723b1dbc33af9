"""Browsing and writing files relative to a current directory."""

from __future__ import annotations

import os
import sys
from typing import List, Optional


def combine_path(path: str, name: str) -> str:
    """Join a directory and a name with a forward slash."""
    return path + "/" + name


def is_dir(path: str) -> bool:
    """Whether the path names an existing directory."""
    return os.path.isdir(path)


def default_path(base: Optional[str] = None) -> str:
    """The application's directory without a trailing separator.

    ``base`` defaults to the directory of the running program. A base made
    only of separators falls back to ``/``.
    """
    if base is None:
        base = os.path.dirname(os.path.abspath(sys.argv[0])) + os.sep
    stripped = base.rstrip("/\\")
    if not stripped:
        print("failed to find a default dirrectory. Setting it to: /", file=sys.stderr)
        return "/"
    return stripped


class FileSystem:
    """Keeps a current directory for listing and writing files."""

    def __init__(self, current_path: Optional[str] = None) -> None:
        self.current_path = current_path if current_path is not None else default_path()

    def list_files(self, path: str) -> List[str]:
        """Entries of a directory, including ``.`` and ``..``; empty if unreadable."""
        try:
            entries = os.listdir(path)
        except OSError:
            print(f"failed to find dirrectory: {path}", file=sys.stderr)
            return []
        return [".", ".."] + entries

    def write_file(self, name: str, data: str) -> str:
        """Write text to a file in the current directory and return its path."""
        full_path = combine_path(self.current_path, name)
        with open(full_path, "w", encoding="utf-8") as handle:
            handle.write(data)
        return full_path