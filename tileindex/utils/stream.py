from contextlib import contextmanager
from typing import IO, Iterator, Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


class ArchiveSink:
    """Write-through wrapper around an output stream.

    Hides ``tell`` and ``seek`` so ``zipfile`` streams with data descriptors
    instead of seeking back. Once aborted, every write is dropped, so trailers
    written while unwinding a failed build never reach the output.

    Attributes
    ----------
    output : IO[bytes], optional
        Wrapped output stream. Without one, written bytes are kept until
        drained.
    """

    def __init__(self, output: Optional[IO[bytes]] = None):
        self.output = output
        self.aborted = False
        self._chunks: list[bytes] = []

    def write(self, data: Buffer) -> int:
        if self.aborted or not data:
            return len(data)
        if self.output is None:
            self._chunks.append(bytes(data))
        else:
            self.output.write(data)
        return len(data)

    def flush(self) -> None:
        if not self.aborted and self.output is not None and hasattr(self.output, 'flush'):
            self.output.flush()

    def abort(self) -> None:
        self.aborted = True

    @contextmanager
    def guard(self) -> Iterator['ArchiveSink']:
        try:
            yield self
        except BaseException:
            self.abort()
            raise


class ChunkBuffer(ArchiveSink):
    """Unseekable sink that holds written bytes until drained."""

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self._chunks)

    def drain(self) -> bytes:
        data = b''.join(self._chunks)
        self._chunks.clear()
        return data
