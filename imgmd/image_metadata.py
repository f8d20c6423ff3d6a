# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Unified image metadata

ImageMetadata ties together the top-level image properties and the four
tag-family views (EXIF, IPTC, TIFF, GPS) of one image. It can be built
from a file path or URL, an ImageFile, an ImageSource or a raw property
mapping.

Copyright 2025 DNAi inc.
"""

import logging
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from imgmd import property_keys as keys
from imgmd.exceptions import InvalidImageProperties, KeyNotFound
from imgmd.exif import EXIF
from imgmd.gps import GPS
from imgmd.image_file import ImageFile
from imgmd.image_source import ImageSource
from imgmd.iptc import IPTC
from imgmd.metadata import Metadata, serialize_value
from imgmd.metadata_options import MetadataOptions
from imgmd.orientation import ImageOrientation
from imgmd.property_store import PropertyStore
from imgmd.tiff import TIFF
from imgmd.value_formatter import format_byte_count

logger = logging.getLogger(__name__)


class ImageMetadata(Metadata):
    """
    All metadata of one image.

    Example:
        >>> metadata = ImageMetadata.from_url("hang-in.jpg")
        >>> aperture = metadata.exif.f_number if metadata.exif else None
        >>> print(metadata.to_json())
    """

    FIELDS = (
        ("bitDepth", "bit_depth"),
        ("bytes", "bytes"),
        ("colorModel", "color_model"),
        ("colorProfile", "color_profile"),
        ("contentType", "content_type"),
        ("dpiHeight", "dpi_height"),
        ("dpiWidth", "dpi_width"),
        ("hasAlpha", "has_alpha"),
        ("isFloat", "is_float"),
        ("isIndexed", "is_indexed"),
        ("memorySize", "memory_size"),
        ("orientation", "orientation"),
        ("pixelFormat", "pixel_format"),
        ("pixelHeight", "pixel_height"),
        ("pixelWidth", "pixel_width"),
    )

    FAMILY_FIELDS = (
        ("exif", "exif", MetadataOptions.EXIF),
        ("iptc", "iptc", MetadataOptions.IPTC),
        ("tiff", "tiff", MetadataOptions.TIFF),
        ("gps", "gps", MetadataOptions.GPS),
    )

    def __init__(
        self,
        properties: Union[PropertyStore, Mapping[str, Any], None] = None,
        options: MetadataOptions = MetadataOptions.ALL,
        content_type: Optional[str] = None,
        image_file: Optional[ImageFile] = None,
    ):
        """
        Wrap a raw property mapping.

        Args:
            properties: Property mapping of the image
            options: Tag families to include when serializing
            content_type: MIME type of the image container
            image_file: The file the properties were read from, if any
        """
        super().__init__(properties)
        self.options = options
        self.content_type = content_type
        self.image_file = image_file

    @classmethod
    def from_url(cls, url: Union[str, Path],
                 options: MetadataOptions = MetadataOptions.ALL) -> "ImageMetadata":
        """
        Read the metadata of a local image file.

        Args:
            url: Local path or file URL
            options: Tag families to include when serializing

        Raises:
            ImageFileError: If the file cannot be resolved (see ImageFile)
            InvalidImageSource: If the file is not a decodable image
            InvalidImageProperties: If no properties exist at index 0
        """
        return cls.from_image_file(ImageFile(url), options)

    @classmethod
    def from_image_file(cls, image_file: ImageFile,
                        options: MetadataOptions = MetadataOptions.ALL) -> "ImageMetadata":
        with ImageSource.open(image_file.path) as source:
            metadata = cls.from_image_source(source, options)
        metadata.image_file = image_file
        return metadata

    @classmethod
    def from_image_source(cls, source: ImageSource,
                          options: MetadataOptions = MetadataOptions.ALL) -> "ImageMetadata":
        properties = source.properties_at(0)
        if properties is None:
            raise InvalidImageProperties()
        logger.debug("Read %d properties (%s)", len(properties), source.type_identifier)
        return cls(properties, options=options, content_type=source.type_identifier)

    def require(self, key: str) -> Any:
        """
        Get a top-level property that must be present.

        Raises:
            KeyNotFound: If the property is missing
        """
        if key not in self._store:
            raise KeyNotFound(key)
        return self._store[key]

    # Image properties

    @property
    def bit_depth(self) -> Optional[int]:
        return self._store.get_int(keys.DEPTH)

    @property
    def bytes(self) -> Optional[int]:
        """Size of the encoded image in bytes."""
        return self._store.get_int(keys.FILE_SIZE)

    @property
    def color_model(self) -> Optional[str]:
        return self._store.get_string(keys.COLOR_MODEL)

    @property
    def color_profile(self) -> Optional[str]:
        """Description of the embedded ICC profile."""
        return self._store.get_string(keys.PROFILE_NAME)

    @property
    def dpi_height(self) -> Optional[int]:
        return self._store.get_int(keys.DPI_HEIGHT)

    @property
    def dpi_width(self) -> Optional[int]:
        return self._store.get_int(keys.DPI_WIDTH)

    @property
    def has_alpha(self) -> bool:
        return bool(self._store.get_bool(keys.HAS_ALPHA))

    @property
    def is_float(self) -> bool:
        return bool(self._store.get_bool(keys.IS_FLOAT))

    @property
    def is_indexed(self) -> bool:
        return bool(self._store.get_bool(keys.IS_INDEXED))

    @property
    def memory_size(self) -> Optional[str]:
        """Formatted byte size, e.g. "358 KB (366,533 bytes)"."""
        return format_byte_count(self.bytes)

    @property
    def orientation(self) -> Optional[ImageOrientation]:
        return ImageOrientation.decode(self._store.get_int(keys.ORIENTATION))

    @property
    def pixel_format(self) -> Optional[int]:
        return self._store.get_int(keys.PIXEL_FORMAT)

    @property
    def pixel_height(self) -> Optional[int]:
        return self._store.get_int(keys.PIXEL_HEIGHT)

    @property
    def pixel_width(self) -> Optional[int]:
        return self._store.get_int(keys.PIXEL_WIDTH)

    # Tag families, present whenever the mapping has them

    @cached_property
    def exif(self) -> Optional[EXIF]:
        store = self._store.get_mapping(keys.EXIF_DICTIONARY)
        return EXIF(store) if store is not None else None

    @cached_property
    def iptc(self) -> Optional[IPTC]:
        store = self._store.get_mapping(keys.IPTC_DICTIONARY)
        return IPTC(store) if store is not None else None

    @cached_property
    def tiff(self) -> Optional[TIFF]:
        store = self._store.get_mapping(keys.TIFF_DICTIONARY)
        return TIFF(store) if store is not None else None

    @cached_property
    def gps(self) -> Optional[GPS]:
        store = self._store.get_mapping(keys.GPS_DICTIONARY)
        return GPS(store) if store is not None else None

    def to_dict(self) -> Dict[str, Any]:
        """
        Build the structured projection.

        Tag families are included only when selected by the options.
        """
        result = super().to_dict()
        for name, attribute, option in self.FAMILY_FIELDS:
            if option not in self.options:
                continue
            view = getattr(self, attribute)
            if view is not None:
                result[name] = view.to_dict()
        if self.image_file is not None:
            result["imageFile"] = serialize_value(self.image_file)
        return result
