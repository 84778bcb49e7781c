"""Zip export of files and directory trees.

Files of a directory are archived in ascending name order. Subdirectories,
when requested, follow in descending order of last modification, each under
its own folder inside the archive.
"""

import datetime
import logging
import os
import posixpath
import zipfile
from dataclasses import dataclass, field
from typing import IO, Iterator, List, Optional, Protocol

from tileindex.connector import Connector
from tileindex.filters import name_key, split_entries
from tileindex.local import LocalConnector
from tileindex.utils.entry import FSEntry
from tileindex.utils.stream import ArchiveSink

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1024 * 1024

_MIN_DATE_TIME = (1980, 1, 1, 0, 0, 0)
_MAX_DATE_TIME = (2107, 12, 31, 23, 59, 59)


class ArchiveCancelled(RuntimeError):
    """Archive build stopped by its cancel event."""


class CancelEvent(Protocol):
    def is_set(self) -> bool: ...


@dataclass
class ArchiveRequest:
    """Archive options.

    Attributes
    ----------
    include_hidden : bool, default=False
        Archive entries the visibility filter would hide.
    recursive : bool, default=False
        Descend into subdirectories.
    store_only : bool, default=False
        Store entries without compression.
    exclude : frozenset[str], default=frozenset()
        Real paths of files left out of the archive, such as the archive
        file itself when it is written inside the archived tree.
    """
    include_hidden: bool = False
    recursive: bool = False
    store_only: bool = False
    exclude: frozenset[str] = field(default_factory=frozenset)

    @property
    def compression(self) -> int:
        return zipfile.ZIP_STORED if self.store_only else zipfile.ZIP_DEFLATED


def archive_path(destination: str, name: str) -> str:
    return posixpath.join(destination, name) if destination else name


def order_subdirectories(directories: List[FSEntry]) -> List[FSEntry]:
    """Sort subdirectories newest modified first, ties by name."""
    ordered = sorted(directories, key=name_key)
    ordered.sort(key=lambda entry: entry.last_modified or datetime.datetime.min, reverse=True)
    return ordered


def order_files(files: List[FSEntry], exclude: frozenset[str] = frozenset()) -> List[FSEntry]:
    if exclude:
        files = [entry for entry in files if os.path.realpath(entry.path) not in exclude]
    return sorted(files, key=name_key)


def make_info(entry: FSEntry, arcname: str, compression: int) -> zipfile.ZipInfo:
    date_time = _MIN_DATE_TIME
    if entry.last_modified is not None:
        date_time = entry.last_modified.timetuple()[:6]
        date_time = min(max(date_time, _MIN_DATE_TIME), _MAX_DATE_TIME)
    info = zipfile.ZipInfo(arcname, date_time)
    info.compress_type = compression
    info.external_attr = 0o644 << 16
    if entry.size is not None:
        info.file_size = entry.size
    return info


class ArchiveBuilder:
    """Streams files and directory trees into a zip archive.

    Attributes
    ----------
    connector : Connector
        Connector used to read the source tree.
    chunk_size : int
        Read chunk size in bytes.
    """

    def __init__(
        self,
        connector: Optional[Connector] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE
    ):
        self.connector = connector or LocalConnector()
        self.chunk_size = chunk_size

    def build(
        self,
        root_path: str,
        request: ArchiveRequest,
        output: IO[bytes],
        cancel: Optional[CancelEvent] = None
    ) -> List[str]:
        """Write a zip archive of a file or directory to a stream.

        Parameters
        ----------
        root_path : str
            File or directory to archive.
        request : ArchiveRequest
            Archive options.
        output : IO[bytes]
            Writable binary stream. Seeking is not required.
        cancel : CancelEvent, optional
            Stops the build when set.

        Returns
        -------
        List[str]
            Names of the archived entries in write order.

        Raises
        ------
        FileNotFoundError
            If ``root_path`` is neither a file nor a directory. Nothing is
            written to ``output`` in that case.
        ArchiveCancelled
            If ``cancel`` is set while the archive is written.
        """
        entries = self._plan(root_path, request)
        sink = ArchiveSink(output)
        names = []
        with zipfile.ZipFile(sink, 'w', compression=request.compression) as zf, sink.guard():
            for entry, arcname in entries:
                self._check(cancel)
                info = make_info(entry, arcname, request.compression)
                self._write_entry(zf, sink, entry, info, cancel)
                names.append(arcname)
                logger.debug(f"added '{entry.path}' as '{arcname}'")
        return names

    def _plan(self, root_path: str, request: ArchiveRequest) -> Iterator[tuple[FSEntry, str]]:
        if self.connector.isfile(root_path):
            entry = self.connector.stat(root_path)
            return iter([(entry, entry.name)])
        elif self.connector.isdir(root_path):
            return self._walk(root_path, '', request)
        raise FileNotFoundError(f"No such file or directory: '{root_path}'")

    def _walk(self, path: str, destination: str, request: ArchiveRequest) -> Iterator[tuple[FSEntry, str]]:
        directories, files = split_entries(self.connector.scandir(path), request.include_hidden)
        for entry in order_files(files, request.exclude):
            yield entry, archive_path(destination, entry.name)
        if request.recursive:
            for directory in order_subdirectories(directories):
                logger.debug(f"entering '{directory.path}'")
                yield from self._walk(directory.path, archive_path(destination, directory.name), request)

    def _write_entry(
        self,
        zf: zipfile.ZipFile,
        sink: ArchiveSink,
        entry: FSEntry,
        info: zipfile.ZipInfo,
        cancel: Optional[CancelEvent]
    ) -> None:
        with self.connector.open(entry.path, 'rb') as src_file:
            with zf.open(info, 'w') as dst_file, sink.guard():
                chunk = src_file.read(self.chunk_size)
                while chunk:
                    self._check(cancel)
                    dst_file.write(chunk)
                    chunk = src_file.read(self.chunk_size)

    @staticmethod
    def _check(cancel: Optional[CancelEvent]) -> None:
        if cancel is not None and cancel.is_set():
            raise ArchiveCancelled('archive build cancelled')
