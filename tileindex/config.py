from dataclasses import dataclass, fields
from typing import Any, Optional

import yaml

from tileindex.pagination import DEFAULT_PAGE_SIZE
from tileindex.presentation import THUMBNAIL_SIZE


@dataclass
class IndexConfig:
    """Index settings.

    Attributes
    ----------
    page_size : int, default=50
        Page size used when a request gives none.
    thumbnail_size : int, default=224
        Box size of image thumbnails.
    root_uri : str, default='/'
        URI of the index root.
    resource_dir : str, default='.res/'
        Resource folder under the root.
    chunk_size : int, default=1024 * 1024
        Read chunk size in bytes for archive export.
    """
    page_size: int = DEFAULT_PAGE_SIZE
    thumbnail_size: int = THUMBNAIL_SIZE
    root_uri: str = '/'
    resource_dir: str = '.res/'
    chunk_size: int = 1024 * 1024

    def __post_init__(self) -> None:
        for field in ['page_size', 'thumbnail_size', 'chunk_size']:
            value = getattr(self, field)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"'{field}' must be a positive integer, got {value!r}")

    @classmethod
    def from_dict(cls, config: Optional[dict[str, Any]]) -> 'IndexConfig':
        config = config or {}
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise ValueError(f"unknown configuration fields: {', '.join(unknown)}")
        return cls(**config)

    @classmethod
    def from_yaml(cls, path: str) -> 'IndexConfig':
        """Creates class instance from configuration path.

        Parameters
        ----------
        path : str
            path to configuration file.

        Returns
        -------
        IndexConfig
            Class instance.
        """
        with open(path) as f:
            config = yaml.safe_load(f)
        if config is not None and not isinstance(config, dict):
            raise ValueError(f"configuration file '{path}' must contain a mapping")
        return cls.from_dict(config)
