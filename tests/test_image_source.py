import pytest

from imgmd.exceptions import InvalidImageSource
from imgmd.image_source import ImageSource, _time_stamp, _version_components

from conftest import build_jpeg


def test_rejects_non_image_data():
    with pytest.raises(InvalidImageSource):
        ImageSource.from_bytes(b"this is not an image")


def test_rejects_unreadable_path(tmp_path):
    with pytest.raises(InvalidImageSource):
        ImageSource.open(tmp_path / "missing.jpg")


def test_type_identifier_and_count(plain_png):
    with ImageSource.open(plain_png) as source:
        assert source.type_identifier == "image/png"
        assert source.count == 1


def test_properties_out_of_range_are_absent(plain_png):
    with ImageSource.open(plain_png) as source:
        assert source.properties_at(1) is None
        assert source.properties_at(-1) is None


def test_plain_image_properties(plain_png):
    with ImageSource.open(plain_png) as source:
        properties = source.properties_at(0)
    assert properties["PixelWidth"] == 10
    assert properties["PixelHeight"] == 8
    assert properties["Depth"] == 8
    assert properties["ColorModel"] == "RGB"
    assert properties["HasAlpha"] is True
    assert properties["IsIndexed"] is False
    assert properties["FileSize"] == plain_png.stat().st_size
    assert "{Exif}" not in properties
    assert "{IPTC}" not in properties


def test_exif_and_tiff_dictionaries(camera_jpeg):
    with ImageSource.open(camera_jpeg) as source:
        properties = source.properties_at(0)
    assert properties["Orientation"] == 6
    assert properties["DPIWidth"] == 300
    tiff = properties["{TIFF}"]
    assert tiff["Make"] == "Canon"
    assert tiff["DateTime"] == "2023:04:02 09:30:00"
    exif = properties["{Exif}"]
    assert exif["ExifVersion"] == [2, 3, 2]
    assert exif["FlashPixVersion"] == [1, 0]
    assert exif["ISOSpeedRatings"] == [200]
    assert exif["FNumber"] == pytest.approx(2.8)
    assert exif["OffsetTimeOriginal"] == "+02:00"
    assert exif["{ExifAux}"] == {
        "SerialNumber": "0123456789",
        "LensModel": "EF24-70mm f/2.8L II USM",
        "Firmware": "1.1.3",
    }


def test_gps_dictionary(camera_jpeg):
    with ImageSource.open(camera_jpeg) as source:
        gps = source.properties_at(0)["{GPS}"]
    assert gps["LatitudeRef"] == "N"
    assert gps["Latitude"] == pytest.approx(37 + 46 / 60 + 30.12 / 3600)
    assert gps["Longitude"] == pytest.approx(122 + 25 / 60 + 9.84 / 3600)
    assert gps["AltitudeRef"] == 0
    assert gps["Altitude"] == pytest.approx(16.5)
    assert gps["TimeStamp"] == "12:30:05"
    assert gps["DateStamp"] == "2023:04:01"


def test_iptc_dictionary_prefers_iim_over_xmp(camera_jpeg):
    with ImageSource.open(camera_jpeg) as source:
        iptc = source.properties_at(0)["{IPTC}"]
    assert iptc["Keywords"] == ["beach", "sunset"]
    assert iptc["ObjectName"] == "Sunset"
    assert iptc["Byline"] == ["Jane Photographer"]
    assert iptc["City"] == "San Francisco"
    assert iptc["DateCreated"] == "20230401"
    # Only present in XMP
    assert iptc["StarRating"] == "4"
    assert iptc["RightsUsageTerms"] == "Editorial use only"
    assert iptc["Scene"] == ["010100", "999999", "011900"]
    assert iptc["CreatorContactInfo"]["CiAdrCity"] == "Chicago"


def test_malformed_xmp_is_skipped(tmp_path):
    path = tmp_path / "broken.jpg"
    path.write_bytes(build_jpeg(xmp="<x:xmpmeta><rdf:RDF>"))
    with ImageSource.open(path) as source:
        properties = source.properties_at(0)
    assert properties is not None
    assert "{IPTC}" not in properties


@pytest.mark.parametrize("raw, expected", [
    (b"0232", [2, 3, 2]),
    (b"0100", [1, 0]),
    ("0220", [2, 2]),
    (b"abc", None),
])
def test_version_components(raw, expected):
    assert _version_components(raw) == expected


def test_time_stamp_keeps_fractions():
    assert _time_stamp((12, 30, 5)) == "12:30:05"
    assert _time_stamp((12, 30, 5.5)) == "12:30:05.50"
