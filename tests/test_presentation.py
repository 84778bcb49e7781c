import pytest

from tileindex.presentation import resolve
from tileindex.urls import IndexUrls


@pytest.fixture
def urls():
    return IndexUrls('/', '/media/')


def touch(path):
    path.write_bytes(b'')
    return str(path)


class TestResolveVideo:

    def test_with_preview_and_poster(self, tmp_path, urls):
        clip = touch(tmp_path / 'clip.mp4')
        touch(tmp_path / 'clip.THV')
        touch(tmp_path / 'clip.THM')
        presentation = resolve(clip, urls)
        assert presentation.kind == 'video'
        assert presentation.link == '/media/clip.mp4'
        assert presentation.source == '/media/clip.THV'
        assert presentation.poster == '/media/clip.THM'

    def test_without_sidecars(self, tmp_path, urls):
        presentation = resolve(touch(tmp_path / 'clip.mp4'), urls)
        assert presentation.kind == 'video'
        assert presentation.source == '/media/clip.mp4'
        assert presentation.poster is None

    def test_poster_only(self, tmp_path, urls):
        clip = touch(tmp_path / 'clip.MOV')
        touch(tmp_path / 'clip.THM')
        presentation = resolve(clip, urls)
        assert presentation.source == '/media/clip.MOV'
        assert presentation.poster == '/media/clip.THM'

    def test_preview_only(self, tmp_path, urls):
        clip = touch(tmp_path / 'clip.3gp')
        touch(tmp_path / 'clip.THV')
        presentation = resolve(clip, urls)
        assert presentation.source == '/media/clip.THV'
        assert presentation.poster is None

    @pytest.mark.parametrize('extension', ['.mp4', '.m4v', '.ogv', '.webm', '.mov', '.f4v', '.3g2', '.3gp', '.MP4'])
    def test_video_extensions(self, tmp_path, urls, extension):
        assert resolve(touch(tmp_path / f'clip{extension}'), urls).kind == 'video'


class TestResolveOther:

    @pytest.mark.parametrize('name', ['song.mp3', 'song.AAC'])
    def test_audio(self, tmp_path, urls, name):
        presentation = resolve(touch(tmp_path / name), urls)
        assert presentation.kind == 'audio'
        assert presentation.source == presentation.link == f'/media/{name}'
        assert presentation.thumbnail is None

    def test_image(self, tmp_path, urls):
        presentation = resolve(touch(tmp_path / 'photo.JPG'), urls)
        assert presentation.kind == 'image'
        assert presentation.link == '/media/photo.JPG'
        assert presentation.thumbnail == '/media/photo.JPG?w=224&h=224&mode=Box'

    def test_image_thumbnail_size(self, tmp_path, urls):
        presentation = resolve(touch(tmp_path / 'photo.jpg'), urls, thumbnail_size=100)
        assert presentation.thumbnail == '/media/photo.jpg?w=100&h=100&mode=Box'

    @pytest.mark.parametrize('name', ['notes.txt', 'photo.png', 'photo.jpeg', 'README'])
    def test_generic(self, tmp_path, urls, name):
        presentation = resolve(touch(tmp_path / name), urls)
        assert presentation.kind == 'generic'
        assert presentation.link == f'/media/{name}'
        assert presentation.thumbnail == '/.res/file.png'

    def test_name_with_spaces(self, tmp_path, urls):
        presentation = resolve(touch(tmp_path / 'my song.mp3'), urls)
        assert presentation.link == '/media/my+song.mp3'

    def test_custom_existence_check(self, urls):
        existing = {'/data/clip.THM'}
        presentation = resolve('/data/clip.mp4', urls, isfile=existing.__contains__)
        assert presentation.source == '/media/clip.mp4'
        assert presentation.poster == '/media/clip.THM'
