"""Browsing the file system as directory strings that end in a separator."""

from __future__ import annotations

import os
import string
from dataclasses import dataclass
from typing import List

MAX_PATH_LENGTH = 10000


@dataclass(frozen=True)
class FileObject:
    """An entry shown in a directory listing."""

    name: str
    directory: bool = False
    drive: bool = False


def current_directory() -> str:
    """Return the working directory with a trailing separator."""
    path = os.getcwd()
    if not path.endswith(os.sep):
        path += os.sep
    return path


def _drives() -> List[FileObject]:
    if os.name == "nt":
        roots = [f"{letter}:\\" for letter in string.ascii_uppercase]
        return [FileObject(root, drive=True) for root in roots if os.path.exists(root)]
    return [FileObject(os.sep, drive=True)]


def list_file_objects(directory: str) -> List[FileObject]:
    """List a directory; an empty directory string lists the drives.

    Raises OSError when the directory cannot be read.
    """
    if not directory:
        return _drives()
    with os.scandir(directory) as entries:
        objects = [
            FileObject(entry.name, directory=entry.is_dir())
            for entry in entries
            if entry.name not in (".", "..")
        ]
    return sorted(objects, key=lambda item: item.name)


def go_back(directory: str) -> str:
    """Return the parent directory, or an empty string above the top level."""
    last = directory.rfind(os.sep)
    if last == -1:
        return ""
    second_last = directory.rfind(os.sep, 0, last)
    if second_last == -1:
        return ""
    return directory[: second_last + 1]


def advance(directory: str, file_object: FileObject) -> str:
    """Return the path of file_object inside directory.

    Directories get a trailing separator; drive names already carry one.
    Raises ValueError when the result would be too long.
    """
    if len(directory) + len(file_object.name) + 1 >= MAX_PATH_LENGTH - 2:
        raise ValueError("path too long")
    path = directory + file_object.name
    if file_object.directory:
        path += os.sep
    return path