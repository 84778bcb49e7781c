from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any

from tileindex.utils.entry import FSEntry


class Connector(ABC):
    """Abstract class for read-only connector."""

    @abstractmethod
    def open(self, path: str, mode: str) -> AbstractContextManager[Any]:
        """Open file.

        Parameters
        ----------
        path : str
            Path to file.
        mode : str
            Open mode.

        Returns
        -------
        Any
            Readable file-like object.
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check that path exists.

        Parameters
        ----------
        path : str
            File or directory path.

        Returns
        -------
        bool
            True if path exists.
        """
        pass

    @abstractmethod
    def isfile(self, path: str) -> bool:
        """Check that path is a file.

        Parameters
        ----------
        path : str
            Path to check.

        Returns
        -------
        bool
            True if path is an existing file.
        """
        pass

    @abstractmethod
    def isdir(self, path: str) -> bool:
        """Check that path is a directory.

        Parameters
        ----------
        path : str
            Path to check.

        Returns
        -------
        bool
            True if path is an existing directory.
        """
        pass

    @abstractmethod
    def stat(self, path: str) -> FSEntry:
        """Get metadata of a single file or directory.

        Parameters
        ----------
        path : str
            File or directory path.

        Returns
        -------
        FSEntry
            Entry with metadata.
        """
        pass

    @abstractmethod
    def scandir(self, path: str) -> list[FSEntry]:
        """List directory content with metadata.

        Parameters
        ----------
        path : str
            Directory path.

        Returns
        -------
        list[FSEntry]
            Immediate children of the directory with metadata.
        """
        pass
