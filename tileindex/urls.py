import os
from typing import Optional
from urllib.parse import quote

from tileindex.pagination import DEFAULT_PAGE_SIZE


def plusified(uri: str) -> str:
    return uri.replace('%20', '+').replace(' ', '+')


def path_encode(value: str) -> str:
    return plusified(quote(value, safe="/!$&'()*+,;=:@~"))


class IndexUrls:
    """Links of one directory index page.

    Attributes
    ----------
    root_uri : str
        URI of the index root, always ending with ``/``.
    uri : str
        URI of the current directory.
    resource_dir : str
        Resource folder under the root.
    default_page_size : int
        Page size that is left out of generated links.
    """

    def __init__(
        self,
        root_uri: str,
        uri: str,
        resource_dir: str = '.res/',
        default_page_size: int = DEFAULT_PAGE_SIZE
    ):
        if not root_uri.endswith('/'):
            root_uri = root_uri + '/'
        if not resource_dir.endswith('/'):
            resource_dir = resource_dir + '/'
        self.root_uri = root_uri
        self.uri = plusified(uri)
        self.resource_dir = resource_dir
        self.default_page_size = default_page_size

    @property
    def is_root(self) -> bool:
        return self.uri == self.root_uri

    def resource(self, name: str) -> str:
        return self.root_uri + self.resource_dir + path_encode(name)

    def file(self, name: str) -> str:
        return self.uri + path_encode(name)

    def file_path(self, path: str) -> str:
        return self.file(os.path.basename(path))

    def dir(self, name: str) -> str:
        return self.uri + path_encode(name) + '/'

    def index(self, uri: str, page: Optional[int] = None, page_size: Optional[int] = None) -> str:
        """Link to an index page.

        The page size is only added when it differs from the default.
        """
        if page_size is None:
            page_size = self.default_page_size
        params = []
        if page is not None:
            params.append(f'page={page}')
        if page_size != self.default_page_size:
            params.append(f'pageSize={page_size}')
        if not params:
            return uri
        return uri + '?' + '&'.join(params)

    def up(self, page_size: Optional[int] = None) -> str:
        return self.index('../', page_size=page_size)

    @staticmethod
    def thumbnail(file_uri: str, size: int) -> str:
        return f'{file_uri}?w={size}&h={size}&mode=Box'
