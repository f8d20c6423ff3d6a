import pytest

from imgmd.exceptions import ImageFileError, ImageFileErrorCode
from imgmd.image_file import ImageFile
from imgmd.value_formatter import format_byte_count


def test_properties(camera_jpeg):
    image_file = ImageFile(str(camera_jpeg))
    assert image_file.filename == "camera.jpg"
    assert image_file.basename == "camera"
    assert image_file.path == str(camera_jpeg)
    assert image_file.url == camera_jpeg.as_uri()
    assert image_file.content_type == "image/jpeg"
    assert image_file.file_size == camera_jpeg.stat().st_size


def test_to_dict(camera_jpeg):
    result = ImageFile(camera_jpeg).to_dict()
    assert result["filename"] == "camera.jpg"
    assert result["contentType"] == "image/jpeg"
    assert result["fileSize"] == format_byte_count(camera_jpeg.stat().st_size)


def test_file_url_is_accepted(camera_jpeg):
    assert ImageFile(camera_jpeg.as_uri()) == ImageFile(camera_jpeg)


def test_missing_file(tmp_path):
    path = tmp_path / "missing.jpg"
    with pytest.raises(ImageFileError) as exc_info:
        ImageFile(path)
    assert exc_info.value.code == ImageFileErrorCode.NO_SUCH_FILE
    assert exc_info.value.url == path.as_uri()


@pytest.mark.parametrize("url", [
    "https://example.com/photo.jpg",
    "ftp://example.com/photo.jpg",
    "file://remotehost/photo.jpg",
])
def test_non_local_urls_are_rejected(url):
    with pytest.raises(ImageFileError) as exc_info:
        ImageFile(url)
    assert exc_info.value.code == ImageFileErrorCode.INVALID_URL
    assert exc_info.value.message == f"{url} is not a file URL."


def test_non_image_content_type(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello")
    with pytest.raises(ImageFileError) as exc_info:
        ImageFile(path)
    assert exc_info.value.code == ImageFileErrorCode.INVALID_CONTENT_TYPE


def test_directory_is_not_readable(tmp_path):
    folder = tmp_path / "album.jpg"
    folder.mkdir()
    with pytest.raises(ImageFileError) as exc_info:
        ImageFile(folder)
    assert exc_info.value.code == ImageFileErrorCode.UNKNOWN


def test_equality_and_hash(camera_jpeg, plain_png):
    assert ImageFile(camera_jpeg) == ImageFile(str(camera_jpeg))
    assert len({ImageFile(camera_jpeg), ImageFile(camera_jpeg)}) == 1
    assert ImageFile(camera_jpeg) != ImageFile(plain_png)
    assert str(ImageFile(plain_png)) == plain_png.as_uri()


def test_colon_in_filename_is_not_a_scheme(jpeg_factory, tmp_path, monkeypatch):
    path = jpeg_factory("shot:1.jpg")
    monkeypatch.chdir(tmp_path)
    image_file = ImageFile("shot:1.jpg")
    assert image_file.filename == "shot:1.jpg"
    assert image_file.path == str(path)
