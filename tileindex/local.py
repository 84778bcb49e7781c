import os
from typing import IO, List
from contextlib import contextmanager

from tileindex.connector import Connector
from tileindex.utils.entry import FSEntry, entry_from_stat


class LocalConnector(Connector):
    """Local file system connector."""

    @contextmanager
    def open(self, path: str, mode: str = 'rb') -> IO:
        with open(path, mode) as f:
            yield f

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def isfile(self, path: str) -> bool:
        return os.path.isfile(path)

    def isdir(self, path: str) -> bool:
        return os.path.isdir(path)

    def stat(self, path: str) -> FSEntry:
        if not self.exists(path):
            raise FileNotFoundError(f"No such file or directory: '{path}'")
        path = os.path.normpath(path)
        return entry_from_stat(os.path.basename(path), path, os.stat(path))

    def scandir(self, path: str) -> List[FSEntry]:
        result = []
        with os.scandir(path) as it:
            for entry in it:
                if entry.is_dir() or entry.is_file():
                    result.append(entry_from_stat(entry.name, entry.path, entry.stat()))
        return result
