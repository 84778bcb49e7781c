import datetime
import os
import stat
from dataclasses import dataclass
from typing import Literal, Optional

_FILE_ATTRIBUTE_HIDDEN = getattr(stat, 'FILE_ATTRIBUTE_HIDDEN', 0x2)
_UF_HIDDEN = getattr(stat, 'UF_HIDDEN', 0x8000)


@dataclass
class FSEntry:
    name: str
    path: str
    type: Literal['file', 'dir']
    size: Optional[int] = None
    last_modified: Optional[datetime.datetime] = None
    extension: str = ''
    hidden: bool = False

    @property
    def is_dir(self) -> bool:
        return self.type == 'dir'


def has_hidden_attribute(st: os.stat_result) -> bool:
    """Check the platform hidden flag of a stat result.

    Parameters
    ----------
    st : os.stat_result
        Stat result of the entry.

    Returns
    -------
    bool
        True if Windows ``FILE_ATTRIBUTE_HIDDEN`` or BSD ``UF_HIDDEN`` is set.
    """
    attributes = getattr(st, 'st_file_attributes', 0)
    if attributes & _FILE_ATTRIBUTE_HIDDEN:
        return True
    flags = getattr(st, 'st_flags', 0)
    return bool(flags & _UF_HIDDEN)


def entry_from_stat(name: str, path: str, st: os.stat_result) -> FSEntry:
    last_modified = datetime.datetime.fromtimestamp(st.st_mtime)
    hidden = has_hidden_attribute(st)
    if stat.S_ISDIR(st.st_mode):
        return FSEntry(name, path, 'dir', last_modified=last_modified, hidden=hidden)
    extension = os.path.splitext(name)[1]
    return FSEntry(name, path, 'file', st.st_size, last_modified, extension, hidden)
