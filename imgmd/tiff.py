# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
TIFF view

Typed accessors over the "{TIFF}" property mapping, the document-level
tags stored in IFD0.

Copyright 2025 DNAi inc.
"""

from datetime import datetime
from typing import List, Optional

from imgmd.date_formatter import TIFF_DATE_FORMAT
from imgmd.metadata import Metadata


class TIFF(Metadata):
    """Tagged Image File Format metadata."""

    FIELDS = (
        ("artist", "artist"),
        ("compression", "compression"),
        ("copyright", "copyright"),
        ("dateTime", "date_time"),
        ("documentName", "document_name"),
        ("hostComputer", "host_computer"),
        ("imageDescription", "image_description"),
        ("make", "make"),
        ("model", "model"),
        ("orientation", "orientation"),
        ("photometricInterpretation", "photometric_interpretation"),
        ("primaryChromaticities", "primary_chromaticities"),
        ("resolutionUnit", "resolution_unit"),
        ("software", "software"),
        ("tileLength", "tile_length"),
        ("tileWidth", "tile_width"),
        ("transferFunction", "transfer_function"),
        ("whitePoint", "white_point"),
        ("xResolution", "x_resolution"),
        ("yResolution", "y_resolution"),
    )

    # Image quality

    @property
    def compression(self) -> Optional[int]:
        """Compression scheme, e.g. 1 (none) or 6 (JPEG)."""
        return self._store.get_int("Compression")

    @property
    def photometric_interpretation(self) -> Optional[int]:
        return self._store.get_int("PhotometricInterpretation")

    @property
    def transfer_function(self) -> Optional[List[int]]:
        return self._store.get_int_array("TransferFunction")

    # Canvas details

    @property
    def orientation(self) -> Optional[int]:
        return self._store.get_int("Orientation")

    @property
    def x_resolution(self) -> Optional[float]:
        return self._store.get_double("XResolution")

    @property
    def y_resolution(self) -> Optional[float]:
        return self._store.get_double("YResolution")

    @property
    def resolution_unit(self) -> Optional[int]:
        """Unit of the resolutions: 2 (inch) or 3 (centimeter)."""
        return self._store.get_int("ResolutionUnit")

    @property
    def white_point(self) -> Optional[List[float]]:
        return self._store.get_double_array("WhitePoint")

    @property
    def primary_chromaticities(self) -> Optional[List[float]]:
        return self._store.get_double_array("PrimaryChromaticities")

    @property
    def tile_length(self) -> Optional[int]:
        return self._store.get_int("TileLength")

    @property
    def tile_width(self) -> Optional[int]:
        return self._store.get_int("TileWidth")

    # Descriptive information

    @property
    def document_name(self) -> Optional[str]:
        return self._store.get_string("DocumentName")

    @property
    def image_description(self) -> Optional[str]:
        return self._store.get_string("ImageDescription")

    @property
    def artist(self) -> Optional[str]:
        return self._store.get_string("Artist")

    @property
    def copyright(self) -> Optional[str]:
        return self._store.get_string("Copyright")

    @property
    def date_time(self) -> Optional[datetime]:
        """Date the file was last changed, read at UTC."""
        return TIFF_DATE_FORMAT.parse(self._store.get_string("DateTime"))

    @property
    def make(self) -> Optional[str]:
        return self._store.get_string("Make")

    @property
    def model(self) -> Optional[str]:
        return self._store.get_string("Model")

    @property
    def software(self) -> Optional[str]:
        return self._store.get_string("Software")

    @property
    def host_computer(self) -> Optional[str]:
        return self._store.get_string("HostComputer")
