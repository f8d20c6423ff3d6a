# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Keys of the decoded image property mapping.

The top level holds scalar image properties and one nested mapping per
tag family. Family mappings use the standard tag names as keys.

Copyright 2025 DNAi inc.
"""

# Nested family mappings
EXIF_DICTIONARY = "{Exif}"
EXIF_AUX_DICTIONARY = "{ExifAux}"
IPTC_DICTIONARY = "{IPTC}"
TIFF_DICTIONARY = "{TIFF}"
GPS_DICTIONARY = "{GPS}"

# Top-level image properties
FILE_SIZE = "FileSize"
PIXEL_WIDTH = "PixelWidth"
PIXEL_HEIGHT = "PixelHeight"
DEPTH = "Depth"
COLOR_MODEL = "ColorModel"
PIXEL_FORMAT = "PixelFormat"
PROFILE_NAME = "ProfileName"
DPI_WIDTH = "DPIWidth"
DPI_HEIGHT = "DPIHeight"
HAS_ALPHA = "HasAlpha"
IS_FLOAT = "IsFloat"
IS_INDEXED = "IsIndexed"
ORIENTATION = "Orientation"

# Color models
COLOR_MODEL_RGB = "RGB"
COLOR_MODEL_GRAY = "Gray"
COLOR_MODEL_CMYK = "CMYK"
COLOR_MODEL_LAB = "Lab"
