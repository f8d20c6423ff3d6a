# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Image source backed by Pillow

Opens an image with Pillow and flattens what Pillow decodes (image
attributes, the EXIF/GPS IFDs, IPTC-IIM datasets and the XMP packet) into
the property mapping the metadata views read. Pillow is the authority on
container formats; this module only converts its values into plain
strings, numbers, lists and nested dictionaries.

Copyright 2025 DNAi inc.
"""

import io
import logging
import math
import struct
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from PIL import ExifTags, Image, ImageCms, IptcImagePlugin, UnidentifiedImageError
from PIL.TiffImagePlugin import IFDRational

from imgmd import property_keys as keys
from imgmd.exceptions import InvalidImageSource, MetadataReadError
from imgmd.exif_tags import (
    ARRAY_TAGS,
    EXIF_AUX_TAGS,
    EXIF_TAGS,
    GPS_DMS_TAGS,
    GPS_TAGS,
    SINGLE_BYTE_TAGS,
    TIFF_TAGS,
    VERSION_TAGS,
)
from imgmd.iptc_tags import IIM_DATASETS, IPTC_APPLICATION_RECORD, LIST_KEYS, XMP_IPTC_TAGS
from imgmd.xmp_parser import XMPParser

logger = logging.getLogger(__name__)

XMP_TIFF_TAG = 700
XMP_APP1_HEADER = b"http://ns.adobe.com/xap/1.0/\x00"

# Pillow mode -> bits per channel
MODE_DEPTH = {
    "1": 1,
    "L": 8, "LA": 8, "La": 8, "P": 8, "PA": 8,
    "RGB": 8, "RGBA": 8, "RGBa": 8, "RGBX": 8,
    "CMYK": 8, "YCbCr": 8, "LAB": 8, "HSV": 8,
    "I;16": 16, "I;16L": 16, "I;16B": 16, "I;16N": 16,
    "I": 32, "F": 32,
}

MODE_COLOR_MODEL = {
    "1": keys.COLOR_MODEL_GRAY, "L": keys.COLOR_MODEL_GRAY, "LA": keys.COLOR_MODEL_GRAY,
    "La": keys.COLOR_MODEL_GRAY, "I": keys.COLOR_MODEL_GRAY, "F": keys.COLOR_MODEL_GRAY,
    "I;16": keys.COLOR_MODEL_GRAY, "I;16L": keys.COLOR_MODEL_GRAY,
    "I;16B": keys.COLOR_MODEL_GRAY, "I;16N": keys.COLOR_MODEL_GRAY,
    "P": keys.COLOR_MODEL_RGB, "PA": keys.COLOR_MODEL_RGB, "RGB": keys.COLOR_MODEL_RGB,
    "RGBA": keys.COLOR_MODEL_RGB, "RGBa": keys.COLOR_MODEL_RGB, "RGBX": keys.COLOR_MODEL_RGB,
    "YCbCr": keys.COLOR_MODEL_RGB, "HSV": keys.COLOR_MODEL_RGB,
    "CMYK": keys.COLOR_MODEL_CMYK,
    "LAB": keys.COLOR_MODEL_LAB,
}

ALPHA_MODES = {"LA", "La", "PA", "RGBA", "RGBa"}
INDEXED_MODES = {"P", "PA"}

# UserComment character code prefixes (8 bytes each)
USER_COMMENT_CODES = {
    b"ASCII\x00\x00\x00": "ascii",
    b"UNICODE\x00": "utf-16",
    b"JIS\x00\x00\x00\x00\x00": "shift_jis",
    b"\x00\x00\x00\x00\x00\x00\x00\x00": "utf-8",
}

DECODE_ERRORS = (EOFError, OSError, SyntaxError, ValueError, struct.error)


class ImageSource:
    """
    A decoded image and the properties of each of its frames.

    Example:
        >>> source = ImageSource.open("hang-in.jpg")
        >>> source.type_identifier
        'image/jpeg'
    """

    def __init__(self, image: Image.Image, data_size: Optional[int] = None):
        """
        Wrap an image Pillow has already opened.

        Args:
            image: Opened Pillow image
            data_size: Size in bytes of the encoded image, if known
        """
        self._image = image
        self._data_size = data_size

    @classmethod
    def open(cls, path: Union[str, Path]) -> "ImageSource":
        """
        Read and decode an image file.

        Raises:
            InvalidImageSource: If the file cannot be read or is not an
                image Pillow recognizes
        """
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise InvalidImageSource() from e
        return cls.from_bytes(data)

    @classmethod
    def from_bytes(cls, data: bytes) -> "ImageSource":
        """
        Decode an in-memory image.

        Raises:
            InvalidImageSource: If Pillow does not recognize the data
        """
        try:
            image = Image.open(io.BytesIO(data))
        except (UnidentifiedImageError, Image.DecompressionBombError) as e:
            logger.debug("Unrecognized image data: %s", e)
            raise InvalidImageSource() from e
        except DECODE_ERRORS as e:
            logger.debug("Failed to open image data: %s", e)
            raise InvalidImageSource() from e
        return cls(image, data_size=len(data))

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def type_identifier(self) -> Optional[str]:
        """MIME type of the container format, e.g. "image/png"."""
        if self._image.format is None:
            return None
        return Image.MIME.get(self._image.format.upper())

    @property
    def count(self) -> int:
        """Number of frames (images) in the source."""
        return getattr(self._image, "n_frames", 1)

    def properties_at(self, index: int) -> Optional[Dict[str, Any]]:
        """
        Build the property mapping of one frame.

        Args:
            index: Frame index, 0 for the primary image

        Returns:
            Property mapping, or None if the frame does not exist or cannot
            be decoded
        """
        if index < 0 or index >= self.count:
            logger.debug("No image at index %d (count %d)", index, self.count)
            return None
        try:
            if index != self._image.tell():
                self._image.seek(index)
            return self._build_properties(self._image)
        except DECODE_ERRORS as e:
            logger.warning("Failed to read image properties at index %d: %s", index, e)
            return None

    def close(self) -> None:
        self._image.close()

    def __enter__(self) -> "ImageSource":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _build_properties(self, image: Image.Image) -> Dict[str, Any]:
        properties: Dict[str, Any] = {}
        mode = image.mode

        if self._data_size is not None:
            properties[keys.FILE_SIZE] = self._data_size
        properties[keys.PIXEL_WIDTH], properties[keys.PIXEL_HEIGHT] = image.size
        if mode in MODE_DEPTH:
            properties[keys.DEPTH] = MODE_DEPTH[mode]
        if mode in MODE_COLOR_MODEL:
            properties[keys.COLOR_MODEL] = MODE_COLOR_MODEL[mode]
        properties[keys.HAS_ALPHA] = mode in ALPHA_MODES or "transparency" in image.info
        properties[keys.IS_FLOAT] = mode == "F"
        properties[keys.IS_INDEXED] = mode in INDEXED_MODES

        profile_name = _profile_name(image.info.get("icc_profile"))
        if profile_name:
            properties[keys.PROFILE_NAME] = profile_name

        dpi = image.info.get("dpi")
        if isinstance(dpi, (tuple, list)) and len(dpi) == 2:
            try:
                properties[keys.DPI_WIDTH] = int(round(float(dpi[0])))
                properties[keys.DPI_HEIGHT] = int(round(float(dpi[1])))
            except (TypeError, ValueError):
                logger.debug("Ignoring malformed DPI %r", dpi)

        exif = _read_exif(image)
        orientation = exif.get(0x0112)
        if isinstance(orientation, int):
            properties[keys.ORIENTATION] = orientation

        tiff = _tag_properties(exif, TIFF_TAGS)
        if tiff:
            properties[keys.TIFF_DICTIONARY] = tiff

        xmp = _read_xmp(image)

        exif_properties = _tag_properties(_read_ifd(exif, ExifTags.IFD.Exif), EXIF_TAGS)
        aux = {}
        for name, key in EXIF_AUX_TAGS.items():
            text = _xmp_text(xmp.get(name))
            if text is not None:
                aux[key] = text
        if aux:
            exif_properties[keys.EXIF_AUX_DICTIONARY] = aux
        if exif_properties:
            properties[keys.EXIF_DICTIONARY] = exif_properties

        gps = _gps_properties(_read_ifd(exif, ExifTags.IFD.GPSInfo))
        if gps:
            properties[keys.GPS_DICTIONARY] = gps

        iptc = _iptc_properties(image, xmp)
        if iptc:
            properties[keys.IPTC_DICTIONARY] = iptc

        return properties


def _profile_name(icc_profile: Optional[bytes]) -> Optional[str]:
    if not icc_profile:
        return None
    try:
        profile = ImageCms.ImageCmsProfile(io.BytesIO(icc_profile))
        return ImageCms.getProfileDescription(profile).strip() or None
    except (ImageCms.PyCMSError, OSError, TypeError) as e:
        logger.debug("Unreadable ICC profile: %s", e)
        return None


def _read_exif(image: Image.Image) -> Image.Exif:
    try:
        return image.getexif()
    except DECODE_ERRORS as e:
        logger.warning("Skipping unreadable EXIF data: %s", e)
        return Image.Exif()


def _read_ifd(exif: Image.Exif, ifd: int) -> Dict[int, Any]:
    try:
        return dict(exif.get_ifd(ifd))
    except (KeyError, TypeError) + DECODE_ERRORS as e:
        logger.warning("Skipping unreadable IFD 0x%04X: %s", ifd, e)
        return {}


def _tag_properties(tags: Any, names: Dict[int, str]) -> Dict[str, Any]:
    """Convert the known tags of one IFD into a property mapping."""
    properties: Dict[str, Any] = {}
    for tag, raw in tags.items():
        key = names.get(tag)
        if key is None:
            continue
        value = _convert_tag(key, raw)
        if value is not None:
            properties[key] = value
    return properties


def _convert_tag(key: str, raw: Any) -> Any:
    if key in VERSION_TAGS:
        return _version_components(raw)
    if key in SINGLE_BYTE_TAGS:
        return _byte_int(raw)
    if key == "ComponentsConfiguration":
        return list(raw) if isinstance(raw, bytes) else _convert_value(raw)
    if key == "UserComment":
        return _decode_user_comment(raw)
    value = _convert_value(raw)
    if key in ARRAY_TAGS and value is not None and not isinstance(value, list):
        value = [value]
    return value


def _convert_value(value: Any) -> Any:
    """
    Convert a Pillow tag value into a plain property value.

    Rationals become floats, tuples become lists and text loses its NUL
    padding. Binary blobs and non-finite numbers are dropped.
    """
    if isinstance(value, IFDRational):
        try:
            number = float(value)
        except ZeroDivisionError:
            return None
        return number if math.isfinite(number) else None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.replace("\x00", "").strip()
        return text or None
    if isinstance(value, (tuple, list)):
        items = [_convert_value(v) for v in value]
        items = [v for v in items if v is not None]
        return items or None
    return None


def _version_components(value: Any) -> Optional[List[int]]:
    """
    Split a 4-digit version such as b"0232" into [2, 3, 2].

    The first two digits are the major version; a zero revision is omitted.
    """
    if isinstance(value, bytes):
        value = value.decode("ascii", errors="ignore")
    if not isinstance(value, str):
        return None
    digits = value.strip("\x00 ")
    if len(digits) != 4 or not digits.isdigit():
        return None
    components = [int(digits[:2]), int(digits[2])]
    if digits[3] != "0":
        components.append(int(digits[3]))
    return components


def _byte_int(value: Any) -> Optional[int]:
    if isinstance(value, bytes):
        return value[0] if value else None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _decode_user_comment(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return _convert_value(value)
    if not isinstance(value, bytes) or len(value) < 8:
        return None
    encoding = USER_COMMENT_CODES.get(value[:8])
    if encoding is None:
        return None
    text = value[8:].decode(encoding, errors="ignore")
    return _convert_value(text)


def _gps_properties(ifd: Dict[int, Any]) -> Dict[str, Any]:
    properties: Dict[str, Any] = {}
    for tag, raw in ifd.items():
        key = GPS_TAGS.get(tag)
        if key is None:
            continue
        if key in GPS_DMS_TAGS:
            value = _decimal_degrees(raw)
        elif key == "TimeStamp":
            value = _time_stamp(raw)
        elif key == "AltitudeRef":
            value = _byte_int(raw)
        elif key == "Version":
            value = list(raw) if isinstance(raw, bytes) else _convert_value(raw)
        else:
            value = _convert_value(raw)
        if value is not None:
            properties[key] = value
    return properties


def _decimal_degrees(value: Any) -> Optional[float]:
    """Convert (degrees, minutes, seconds) into unsigned decimal degrees."""
    parts = _convert_value(value)
    if isinstance(parts, float):
        return parts
    if not isinstance(parts, list) or len(parts) != 3:
        return None
    degrees, minutes, seconds = parts
    return degrees + minutes / 60.0 + seconds / 3600.0


def _time_stamp(value: Any) -> Optional[str]:
    """Convert (hour, minute, second) into "HH:MM:SS", keeping fractions."""
    parts = _convert_value(value)
    if not isinstance(parts, list) or len(parts) != 3:
        return None
    hours, minutes, seconds = parts
    if float(seconds).is_integer():
        return f"{int(hours):02d}:{int(minutes):02d}:{int(seconds):02d}"
    return f"{int(hours):02d}:{int(minutes):02d}:{seconds:05.2f}"


def _read_xmp(image: Image.Image) -> Dict[str, Any]:
    packet = image.info.get("xmp") or image.info.get("XML:com.adobe.xmp")
    if packet is None:
        for marker, segment in getattr(image, "applist", []):
            if marker == "APP1" and segment.startswith(XMP_APP1_HEADER):
                packet = segment[len(XMP_APP1_HEADER):]
                break
    if packet is None:
        tag_v2 = getattr(image, "tag_v2", None)
        if tag_v2 is not None:
            packet = tag_v2.get(XMP_TIFF_TAG)
    if not packet:
        return {}
    try:
        return XMPParser(packet).read()
    except MetadataReadError as e:
        logger.warning("Skipping malformed XMP packet: %s", e.message)
        return {}


def _xmp_text(value: Any) -> Optional[str]:
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, str):
        return value or None
    return None


def _iim_text(value: bytes) -> str:
    try:
        text = value.decode("utf-8")
    except UnicodeDecodeError:
        text = value.decode("latin-1")
    return text.replace("\x00", "").strip()


def _iptc_properties(image: Image.Image, xmp: Dict[str, Any]) -> Dict[str, Any]:
    """Merge IIM datasets with their XMP counterparts; IIM wins."""
    properties: Dict[str, Any] = {}

    try:
        datasets = IptcImagePlugin.getiptcinfo(image) or {}
    except DECODE_ERRORS as e:
        logger.warning("Skipping unreadable IPTC data: %s", e)
        datasets = {}

    for (record, dataset), raw in datasets.items():
        if record != IPTC_APPLICATION_RECORD:
            continue
        key = IIM_DATASETS.get(dataset)
        if key is None:
            continue
        raw_values = raw if isinstance(raw, list) else [raw]
        values = [_iim_text(v) for v in raw_values if isinstance(v, bytes)]
        if not values:
            continue
        properties[key] = values if key in LIST_KEYS else values[0]

    for name, key in XMP_IPTC_TAGS.items():
        if key in properties or name not in xmp:
            continue
        value = xmp[name]
        if key in LIST_KEYS:
            if isinstance(value, str):
                value = [value]
            if isinstance(value, list):
                value = [v for v in value if isinstance(v, str)]
        elif not isinstance(value, dict):
            value = _xmp_text(value)
        if value:
            properties[key] = value

    return properties
