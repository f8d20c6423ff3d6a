# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Options selecting which tag families are serialized.

Copyright 2025 DNAi inc.
"""

from enum import Flag


class MetadataOptions(Flag):
    """
    Tag families to include in the serialized projection.

    Options never affect decoding: a view excluded here is still available
    as an attribute of ImageMetadata.
    """
    NONE = 0
    EXIF = 1
    IPTC = 2
    TIFF = 4
    GPS = 8
    ALL = EXIF | IPTC | TIFF | GPS

    @classmethod
    def from_flags(cls, exif: bool = True, iptc: bool = True,
                   tiff: bool = True, gps: bool = True) -> "MetadataOptions":
        """Build an option set from one boolean per family."""
        options = cls.NONE
        if exif:
            options |= cls.EXIF
        if iptc:
            options |= cls.IPTC
        if tiff:
            options |= cls.TIFF
        if gps:
            options |= cls.GPS
        return options
