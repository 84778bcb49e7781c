import pytest

from tileindex.config import IndexConfig
from tileindex.index import DirectoryIndex
from tileindex.urls import IndexUrls


@pytest.fixture
def photos(tmp_path):
    root = tmp_path / 'photos'
    for name in ['a', 'b', '.cache', 'bin']:
        (root / name).mkdir(parents=True)
    for name in ['z.txt', 'y.mp3', 'x.jpg', 'x.THM', 'Thumbs.ashx']:
        (root / name).write_bytes(b'data')
    return root


@pytest.fixture
def urls():
    return IndexUrls('/', '/photos/')


class TestListPage:

    def test_scan(self, photos):
        directories, files = DirectoryIndex().scan(str(photos))
        assert [entry.name for entry in directories] == ['b', 'a']
        assert [entry.name for entry in files] == ['x.jpg', 'y.mp3', 'z.txt']

    def test_scan_hidden(self, photos):
        directories, files = DirectoryIndex().scan(str(photos), show_hidden=True)
        assert [entry.name for entry in directories] == ['bin', 'b', 'a', '.cache']
        assert [entry.name for entry in files] == ['Thumbs.ashx', 'x.jpg', 'x.THM', 'y.mp3', 'z.txt']

    def test_default_page_size_from_config(self, photos):
        page = DirectoryIndex(config=IndexConfig(page_size=3)).list_page(str(photos))
        assert page.page_size == 3
        assert [entry.name for entry in page.directories] == ['b', 'a']
        assert [entry.name for entry in page.files] == ['x.jpg']
        assert page.remaining == 2

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DirectoryIndex().list_page(str(tmp_path / 'missing'))


class TestTiles:

    def test_first_page(self, photos, urls):
        tiles = DirectoryIndex().tiles(str(photos), urls, page=0, page_size=2)
        assert [(tile.kind, tile.name, tile.link) for tile in tiles] == [
            ('up', '..', '../?pageSize=2'),
            ('dir', 'b', '/photos/b/?pageSize=2'),
            ('dir', 'a', '/photos/a/?pageSize=2'),
            ('next', 'Next 2', '/photos/?page=1&pageSize=2'),
        ]
        assert tiles[1].icon == '/.res/folder.png'
        assert tiles[-1].icon == '/.res/next.png'

    def test_middle_page(self, photos, urls):
        tiles = DirectoryIndex().tiles(str(photos), urls, page=1, page_size=2)
        assert [(tile.kind, tile.name) for tile in tiles] == [
            ('up', '..'),
            ('previous', 'Previous 2'),
            ('file', 'x.jpg'),
            ('file', 'y.mp3'),
            ('next', 'Next 1'),
        ]
        assert tiles[1].link == '/photos/?page=0&pageSize=2'
        assert tiles[1].icon == '/.res/prev.png'
        assert tiles[2].presentation.kind == 'image'
        assert tiles[2].presentation.thumbnail == '/photos/x.jpg?w=224&h=224&mode=Box'
        assert tiles[3].presentation.kind == 'audio'
        assert tiles[3].link == '/photos/y.mp3'

    def test_last_page(self, photos, urls):
        tiles = DirectoryIndex().tiles(str(photos), urls, page=2, page_size=2)
        assert [(tile.kind, tile.name) for tile in tiles] == [
            ('up', '..'), ('previous', 'Previous 2'), ('file', 'z.txt')
        ]
        assert tiles[-1].presentation.kind == 'generic'

    def test_root_has_no_up_tile(self, photos):
        tiles = DirectoryIndex().tiles(str(photos), IndexUrls('/', '/'))
        assert [tile.kind for tile in tiles] == ['dir', 'dir', 'file', 'file', 'file']
        assert tiles[0].link == '/b/'

    def test_config_thumbnail_size(self, photos, urls):
        index = DirectoryIndex(config=IndexConfig(thumbnail_size=120))
        tiles = index.tiles(str(photos), urls)
        image = next(tile for tile in tiles if tile.name == 'x.jpg')
        assert image.presentation.thumbnail == '/photos/x.jpg?w=120&h=120&mode=Box'
