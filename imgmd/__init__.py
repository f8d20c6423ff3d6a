# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
imgmd - Typed image metadata

Reads EXIF, IPTC, TIFF and GPS metadata through Pillow and exposes it as
typed, documented fields with a uniform JSON projection.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from imgmd.exceptions import (
    ImgmdError,
    ImageFileError,
    ImageFileErrorCode,
    MetadataError,
    InvalidImageSource,
    InvalidImageProperties,
    KeyNotFound,
)
from imgmd.exif import EXIF
from imgmd.gps import GPS, AltitudeReference
from imgmd.image_file import ImageFile
from imgmd.image_metadata import ImageMetadata
from imgmd.image_source import ImageSource
from imgmd.iptc import IPTC
from imgmd.iptc_codes import CreatorContactKey, Scene
from imgmd.metadata_options import MetadataOptions
from imgmd.orientation import ImageOrientation
from imgmd.property_store import PropertyStore
from imgmd.tiff import TIFF

__all__ = [
    'ImageMetadata',
    'ImageFile',
    'ImageSource',
    'MetadataOptions',
    'PropertyStore',
    'EXIF',
    'IPTC',
    'TIFF',
    'GPS',
    'AltitudeReference',
    'CreatorContactKey',
    'Scene',
    'ImageOrientation',
    'ImgmdError',
    'ImageFileError',
    'ImageFileErrorCode',
    'MetadataError',
    'InvalidImageSource',
    'InvalidImageProperties',
    'KeyNotFound',
]
