"""Presentation of file tiles by extension and sidecar files."""

import os
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from tileindex.urls import IndexUrls

THUMBNAIL_SIZE = 224
AUDIO_EXTENSIONS = frozenset(['.mp3', '.aac'])
VIDEO_EXTENSIONS = frozenset(['.mp4', '.m4v', '.ogv', '.webm', '.mov', '.f4v', '.3g2', '.3gp'])
IMAGE_EXTENSIONS = frozenset(['.jpg'])
PREVIEW_EXTENSION = '.THV'
POSTER_EXTENSION = '.THM'
FILE_ICON = 'file.png'


@dataclass
class Presentation:
    kind: Literal['audio', 'video', 'image', 'generic']
    link: str
    source: Optional[str] = None
    poster: Optional[str] = None
    thumbnail: Optional[str] = None


def sidecar_path(file_path: str, extension: str) -> str:
    return os.path.splitext(file_path)[0] + extension


def resolve(
    file_path: str,
    urls: IndexUrls,
    thumbnail_size: int = THUMBNAIL_SIZE,
    isfile: Callable[[str], bool] = os.path.isfile
) -> Presentation:
    """Classify a file and resolve its secondary links.

    Parameters
    ----------
    file_path : str
        Physical path of the file.
    urls : IndexUrls
        Links of the page the file is shown on.
    thumbnail_size : int, default=224
        Box size of image thumbnails.
    isfile : Callable[[str], bool], default=os.path.isfile
        Existence check used for sidecar files.

    Returns
    -------
    Presentation
        Presentation kind with its links.
    """
    link = urls.file_path(file_path)
    extension = os.path.splitext(file_path)[1].lower()
    if extension in AUDIO_EXTENSIONS:
        return Presentation('audio', link, source=link)
    if extension in VIDEO_EXTENSIONS:
        source, poster = link, None
        preview_path = sidecar_path(file_path, PREVIEW_EXTENSION)
        if isfile(preview_path):
            source = urls.file_path(preview_path)
        poster_path = sidecar_path(file_path, POSTER_EXTENSION)
        if isfile(poster_path):
            poster = urls.file_path(poster_path)
        return Presentation('video', link, source=source, poster=poster)
    if extension in IMAGE_EXTENSIONS:
        return Presentation('image', link, thumbnail=urls.thumbnail(link, thumbnail_size))
    return Presentation('generic', link, thumbnail=urls.resource(FILE_ICON))
