import pytest

from imgmd.exif_codes import (
    Contrast,
    CustomRendered,
    ExposureMode,
    ExposureProgram,
    LightSource,
    MeteringMode,
    Saturation,
    SceneCaptureType,
    SensingMethod,
    Sharpness,
    SubjectDistanceRange,
    WhiteBalance,
)
from imgmd.gps import AltitudeReference
from imgmd.iptc_codes import CreatorContactKey, Scene
from imgmd.orientation import ImageOrientation

CODED_ENUMS = [
    Contrast, CustomRendered, ExposureMode, ExposureProgram, LightSource, MeteringMode,
    Saturation, SceneCaptureType, SensingMethod, Sharpness, SubjectDistanceRange,
    WhiteBalance, AltitudeReference, ImageOrientation, Scene, CreatorContactKey,
]


@pytest.mark.parametrize("enum", CODED_ENUMS)
def test_every_member_has_a_label(enum):
    for member in enum:
        assert isinstance(member.label, str)
        assert member.label


@pytest.mark.parametrize("enum", CODED_ENUMS)
def test_decode_round_trips_each_code(enum):
    for member in enum:
        assert enum.decode(member.code) is member


@pytest.mark.parametrize("enum", CODED_ENUMS)
def test_decode_unused_code_is_none(enum):
    unused = "zz" if isinstance(next(iter(enum)).code, str) else -1
    assert enum.decode(unused) is None
    assert enum.decode(None) is None


def test_decode_unknown_code_is_none():
    assert MeteringMode.decode(42) is None
    assert LightSource.decode(None) is None
    assert ImageOrientation.decode(0) is None
    assert Scene.decode("999999") is None


def test_decode_rejects_bool():
    assert WhiteBalance.decode(True) is None
    assert Contrast.decode(False) is None


def test_exif_labels():
    assert MeteringMode.decode(5).label == "Pattern"
    assert ExposureProgram.decode(3).label == "Aperture priority"
    assert WhiteBalance.decode(1).label == "Manual white balance"
    assert LightSource.decode(22).label == "D75"


def test_orientation_labels():
    assert [o.label for o in ImageOrientation] == [
        "up", "upMirrored", "down", "downMirrored",
        "leftMirrored", "right", "rightMirrored", "left",
    ]


def test_scene_carries_definition():
    scene = Scene.decode("010100")
    assert scene is Scene.HEADSHOT
    assert scene.label == "headshot"
    assert scene.definition.startswith("A head only view")


def test_creator_contact_key_matches_case_insensitively():
    assert CreatorContactKey.decode("CiAdrCity") is CreatorContactKey.CITY
    assert CreatorContactKey.decode("ciadrcity") is CreatorContactKey.CITY
    assert CreatorContactKey.decode("CIEMAILWORK") is CreatorContactKey.EMAILS
    assert CreatorContactKey.decode("CiSomethingElse") is None
    assert CreatorContactKey.decode(7) is None


def test_altitude_reference():
    assert AltitudeReference.decode(0) is AltitudeReference.ABOVE_SEA_LEVEL
    assert AltitudeReference.decode(1).label == "Below sea level"
    assert AltitudeReference.decode(2) is None
