"""Visibility rules for directory entries."""

from typing import Iterable, List

from tileindex.utils.entry import FSEntry

HIDDEN_DIR_NAMES = frozenset(['bin'])
HIDDEN_FILE_NAMES = frozenset(['web.config'])
HIDDEN_EXTENSIONS = frozenset(['.thm', '.thv', '.ashx'])


def is_visible(entry: FSEntry, show_hidden: bool = False) -> bool:
    """Decide whether an entry is shown in listings and archives.

    Parameters
    ----------
    entry : FSEntry
        Directory entry.
    show_hidden : bool, default=False
        Disable filtering.

    Returns
    -------
    bool
        True if the entry is visible.
    """
    if show_hidden:
        return True
    if entry.name.startswith('.') or entry.hidden:
        return False
    name = entry.name.lower()
    if entry.is_dir:
        return name not in HIDDEN_DIR_NAMES
    return entry.extension.lower() not in HIDDEN_EXTENSIONS and name not in HIDDEN_FILE_NAMES


def visible_entries(entries: Iterable[FSEntry], show_hidden: bool = False) -> List[FSEntry]:
    return [entry for entry in entries if is_visible(entry, show_hidden)]


def name_key(entry: FSEntry) -> tuple[str, str]:
    return entry.name.casefold(), entry.name


def split_entries(entries: Iterable[FSEntry], show_hidden: bool = False) -> tuple[List[FSEntry], List[FSEntry]]:
    """Split visible entries into browsing order.

    Directories are sorted descending by name, files ascending by name.
    """
    directories, files = [], []
    for entry in visible_entries(entries, show_hidden):
        if entry.is_dir:
            directories.append(entry)
        else:
            files.append(entry)
    directories.sort(key=name_key, reverse=True)
    files.sort(key=name_key)
    return directories, files
