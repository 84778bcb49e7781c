"""Windowed view over directories followed by files.

The directories and files of a listing form one conceptual sequence:
directories (descending by name) followed by files (ascending by name).
Pages are cut from that sequence by offset arithmetic over the two inputs,
so only the selected window is ever copied.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, Sequence, TypeVar, Union

DEFAULT_PAGE_SIZE = 50

T = TypeVar('T')


@dataclass
class Page(Generic[T]):
    """One page of a listing.

    Attributes
    ----------
    directories : Sequence
        Directories on this page.
    files : Sequence
        Files on this page.
    has_previous : bool
        A previous page exists.
    remaining : int
        Items after this page. Not clamped at zero when the files run out.
    page : int
        Effective page index.
    page_size : int
        Effective page size.
    """
    directories: Sequence[T]
    files: Sequence[T]
    has_previous: bool
    remaining: int
    page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def has_next(self) -> bool:
        return self.remaining > 0

    @property
    def next_count(self) -> int:
        return min(self.page_size, self.remaining)

    def __len__(self) -> int:
        return len(self.directories) + len(self.files)


def paginate(
    directories: Sequence[T],
    files: Sequence[T],
    page: int = 0,
    page_size: int = DEFAULT_PAGE_SIZE
) -> Page[T]:
    """Cut a page from directories followed by files.

    Parameters
    ----------
    directories : Sequence
        Visible directories, sorted descending by name.
    files : Sequence
        Visible files, sorted ascending by name.
    page : int, default=0
        Page index. Negative values act as 0.
    page_size : int, default=50
        Page size. Values below 1 fall back to ``DEFAULT_PAGE_SIZE``.

    Returns
    -------
    Page
        Selected directories and files with navigation counts.
    """
    if page_size <= 0:
        page_size = DEFAULT_PAGE_SIZE
    page = max(0, page)
    skip = page * page_size

    taken_dirs = directories[skip:skip + page_size]
    file_skip = max(0, skip - len(directories))
    file_take = page_size - len(taken_dirs)
    taken_files = files[file_skip:file_skip + file_take]

    dirs_left = max(0, len(directories) - (skip + page_size))
    # files_left goes negative once the files are exhausted
    files_left = max(0, len(files) - file_skip) - file_take

    return Page(
        directories=taken_dirs,
        files=taken_files,
        has_previous=skip > 0,
        remaining=dirs_left + files_left,
        page=page,
        page_size=page_size
    )


def _parse_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


def parse_page_params(
    page: Optional[Union[str, int]] = None,
    page_size: Optional[Union[str, int]] = None,
    default_page_size: int = DEFAULT_PAGE_SIZE
) -> tuple[int, int]:
    """Parse raw page parameters.

    Unparsable values never raise: the page falls back to 0 and the page
    size to ``default_page_size``.

    Parameters
    ----------
    page : str or int, optional
        Raw page index.
    page_size : str or int, optional
        Raw page size.
    default_page_size : int, default=50
        Page size used when ``page_size`` is missing or malformed.

    Returns
    -------
    tuple[int, int]
        Page index and page size.
    """
    return _parse_int(page, 0), _parse_int(page_size, default_page_size)
