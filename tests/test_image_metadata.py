import json

import pytest

from imgmd.exceptions import (
    ImageFileError,
    ImageFileErrorCode,
    InvalidImageProperties,
    InvalidImageSource,
    KeyNotFound,
)
from imgmd.image_metadata import ImageMetadata
from imgmd.image_source import ImageSource
from imgmd.iptc_codes import Scene
from imgmd.metadata import dump_json
from imgmd.metadata_options import MetadataOptions
from imgmd.orientation import ImageOrientation


def test_from_url_reads_every_family(camera_jpeg):
    metadata = ImageMetadata.from_url(camera_jpeg)

    assert metadata.pixel_width == 64
    assert metadata.pixel_height == 48
    assert metadata.orientation is ImageOrientation.RIGHT
    assert metadata.content_type == "image/jpeg"
    assert metadata.dpi_width == 300
    assert metadata.dpi_height == 300
    assert metadata.has_alpha is False

    assert metadata.exif.version == "2.3.2"
    assert metadata.exif.lens_model == "EF24-70mm f/2.8L II USM"
    assert metadata.exif.serial_number == "0123456789"
    assert metadata.tiff.make == "Canon"
    assert metadata.gps.coordinate == pytest.approx((37.775033, -122.4194), abs=1e-5)
    assert metadata.iptc.keywords == ["beach", "sunset"]
    assert metadata.iptc.scene_codes == [Scene.HEADSHOT, Scene.ACTION]


def test_projection(camera_jpeg):
    result = ImageMetadata.from_url(camera_jpeg).to_dict()

    assert result["orientation"] == "right"
    assert result["dpiWidth"] == 300
    assert result["bytes"] == camera_jpeg.stat().st_size
    assert result["exif"]["dateTimeOriginal"] == "2023-04-01T10:00:00Z"
    assert result["exif"]["meteringMode"] == "Pattern"
    assert result["exif"]["exposureProgram"] == "Aperture priority"
    assert result["exif"]["whiteBalance"] == "Manual white balance"
    assert result["tiff"]["dateTime"] == "2023-04-02T09:30:00Z"
    assert result["gps"]["dateTime"] == "2023-04-01T12:30:05Z"
    assert result["gps"]["altitudeReference"] == "Above sea level"
    assert result["iptc"]["creationDate"] == "2023-04-01T12:00:00Z"
    assert result["iptc"]["sceneCodes"] == ["headshot", "action"]
    assert result["iptc"]["creatorContactInfo"] == {
        "CiAdrCity": "Chicago",
        "CiEmailWork": "photo@example.com",
    }
    assert result["imageFile"]["filename"] == "camera.jpg"
    assert "pixelFormat" not in result


def test_options_gate_serialization_not_decoding(camera_jpeg):
    metadata = ImageMetadata.from_url(camera_jpeg, MetadataOptions.ALL & ~MetadataOptions.GPS)
    result = metadata.to_dict()
    assert "gps" not in result
    assert {"exif", "iptc", "tiff"} <= set(result)
    assert metadata.gps is not None


def test_basic_options_leave_only_image_properties(camera_jpeg):
    result = ImageMetadata.from_url(camera_jpeg, MetadataOptions.NONE).to_dict()
    assert not {"exif", "iptc", "tiff", "gps"} & set(result)
    assert result["pixelWidth"] == 64


def test_image_without_metadata(plain_png):
    metadata = ImageMetadata.from_url(plain_png)
    assert metadata.exif is None
    assert metadata.iptc is None
    assert metadata.gps is None
    assert metadata.has_alpha is True
    assert metadata.content_type == "image/png"
    assert not {"exif", "iptc", "tiff", "gps"} & set(metadata.to_dict())


def test_require(plain_png):
    metadata = ImageMetadata.from_url(plain_png)
    assert metadata.require("PixelWidth") == 10
    with pytest.raises(KeyNotFound) as exc_info:
        metadata.require("ProfileName")
    assert exc_info.value.key == "ProfileName"


def test_non_image_bytes_with_image_extension(tmp_path):
    path = tmp_path / "fake.jpg"
    path.write_text("definitely not a JPEG")
    with pytest.raises(InvalidImageSource):
        ImageMetadata.from_url(path)


def test_missing_file(tmp_path):
    with pytest.raises(ImageFileError) as exc_info:
        ImageMetadata.from_url(tmp_path / "nothing.png")
    assert exc_info.value.code == ImageFileErrorCode.NO_SUCH_FILE


def test_source_without_properties(plain_png, monkeypatch):
    monkeypatch.setattr(ImageSource, "properties_at", lambda self, index: None)
    with ImageSource.open(plain_png) as source:
        with pytest.raises(InvalidImageProperties):
            ImageMetadata.from_image_source(source)


def test_from_mapping():
    metadata = ImageMetadata({"PixelWidth": 4, "FileSize": 366533, "HasAlpha": "yes"})
    assert metadata.memory_size == "358 KB (366,533 bytes)"
    assert metadata.has_alpha is False
    assert metadata.image_file is None
    assert "imageFile" not in metadata.to_dict()


def test_dump_json_single_vs_many(camera_jpeg, plain_png):
    one = json.loads(dump_json([ImageMetadata.from_url(plain_png)]))
    many = json.loads(dump_json([ImageMetadata.from_url(camera_jpeg), ImageMetadata.from_url(plain_png)]))
    assert isinstance(one, dict)
    assert isinstance(many, list)
    assert [m["imageFile"]["filename"] for m in many] == ["camera.jpg", "plain.png"]


def test_serialization_is_idempotent(camera_jpeg):
    metadata = ImageMetadata.from_url(camera_jpeg)
    assert metadata.to_json() == metadata.to_json()
