# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Image orientation (EXIF/TIFF tag 0x0112).

Copyright 2025 DNAi inc.
"""

from imgmd.coded_value import CodedValue


class ImageOrientation(CodedValue):
    """Position of the pixel data relative to the visual top-left corner."""
    UP = (1, "up")
    UP_MIRRORED = (2, "upMirrored")
    DOWN = (3, "down")
    DOWN_MIRRORED = (4, "downMirrored")
    LEFT_MIRRORED = (5, "leftMirrored")
    RIGHT = (6, "right")
    RIGHT_MIRRORED = (7, "rightMirrored")
    LEFT = (8, "left")
