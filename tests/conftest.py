import os
import time

import pytest


def write_file(path, data=b'', mtime=None):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def tree(tmp_path):
    """Directory with visible and hidden entries, two dated subdirectories."""
    root = tmp_path / 'album'
    now = time.time()
    write_file(root / 'b.txt', b'bbb')
    write_file(root / 'a.txt', b'aaa')
    write_file(root / '.secret', b'hidden')
    write_file(root / 'clip.THM', b'poster')
    write_file(root / 'web.config', b'<configuration/>')
    write_file(root / 'old' / 'o.txt', b'old')
    write_file(root / 'new' / 'n.txt', b'new')
    write_file(root / 'new' / 'deeper' / 'd.txt', b'deep')
    write_file(root / 'bin' / 'tool.exe', b'exe')
    write_file(root / '.git' / 'HEAD', b'ref')
    os.utime(root / 'new' / 'deeper', (now - 50, now - 50))
    os.utime(root / 'old', (now - 3600, now - 3600))
    os.utime(root / 'new', (now - 60, now - 60))
    return root
