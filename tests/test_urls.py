from tileindex.urls import IndexUrls, path_encode, plusified


class TestPlusified:

    def test_spaces(self):
        assert plusified('/a%20b/c d/') == '/a+b/c+d/'

    def test_path_encode(self):
        assert path_encode('holiday 2020.jpg') == 'holiday+2020.jpg'
        assert path_encode('a#b?.txt') == 'a%23b%3F.txt'


class TestIndexUrls:

    def test_root_normalization(self):
        urls = IndexUrls('/gallery', '/gallery/')
        assert urls.root_uri == '/gallery/'
        assert urls.is_root

    def test_not_root(self):
        urls = IndexUrls('/gallery/', '/gallery/2020 trip/')
        assert not urls.is_root
        assert urls.uri == '/gallery/2020+trip/'

    def test_links(self):
        urls = IndexUrls('/gallery/', '/gallery/trip/')
        assert urls.resource('folder.png') == '/gallery/.res/folder.png'
        assert urls.file('a b.jpg') == '/gallery/trip/a+b.jpg'
        assert urls.file_path('/srv/photos/trip/a.jpg') == '/gallery/trip/a.jpg'
        assert urls.dir('day 1') == '/gallery/trip/day+1/'

    def test_index_links_omit_default_page_size(self):
        urls = IndexUrls('/', '/x/')
        assert urls.index('/x/') == '/x/'
        assert urls.index('/x/', page=2) == '/x/?page=2'
        assert urls.index('/x/', page=2, page_size=50) == '/x/?page=2'
        assert urls.index('/x/', page=2, page_size=10) == '/x/?page=2&pageSize=10'
        assert urls.index('/x/', page_size=10) == '/x/?pageSize=10'

    def test_up(self):
        urls = IndexUrls('/', '/x/')
        assert urls.up() == '../'
        assert urls.up(20) == '../?pageSize=20'

    def test_custom_default_page_size(self):
        urls = IndexUrls('/', '/x/', default_page_size=20)
        assert urls.index('/x/', page=1, page_size=20) == '/x/?page=1'

    def test_thumbnail(self):
        assert IndexUrls.thumbnail('/x/a.jpg', 224) == '/x/a.jpg?w=224&h=224&mode=Box'
