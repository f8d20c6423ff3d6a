# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
EXIF coded values

Enumerations for the EXIF tags whose values are drawn from a closed,
standardized code table (EXIF 2.32, section 4.6.5).

Copyright 2025 DNAi inc.
"""

from imgmd.coded_value import CodedValue


class Contrast(CodedValue):
    """Direction of contrast processing applied by the camera (0xA408)."""
    NORMAL = (0, "Normal")
    SOFT = (1, "Soft")
    HARD = (2, "Hard")


class CustomRendered(CodedValue):
    """Use of special processing on image data (0xA401)."""
    NORMAL_PROCESS = (0, "Normal process")
    CUSTOM_PROCESS = (1, "Custom process")


class ExposureMode(CodedValue):
    """Exposure mode set when the image was shot (0xA402)."""
    AUTO = (0, "Auto exposure")
    MANUAL = (1, "Manual exposure")
    AUTO_BRACKET = (2, "Auto bracket")


class ExposureProgram(CodedValue):
    """Class of program used by the camera to set exposure (0x8822)."""
    NOT_DEFINED = (0, "Not defined")
    MANUAL = (1, "Manual")
    NORMAL_PROGRAM = (2, "Normal program")
    APERTURE_PRIORITY = (3, "Aperture priority")
    SHUTTER_PRIORITY = (4, "Shutter priority")
    CREATIVE_PROGRAM = (5, "Creative program")
    ACTION_PROGRAM = (6, "Action program")
    PORTRAIT_MODE = (7, "Portrait mode")
    LANDSCAPE_MODE = (8, "Landscape mode")
    OTHER = (9, "Other")


class LightSource(CodedValue):
    """Kind of light source (0x9208). 255 is the catch-all code."""
    UNKNOWN = (0, "Unknown")
    DAYLIGHT = (1, "Daylight")
    FLUORESCENT = (2, "Fluorescent")
    TUNGSTEN = (3, "Tungsten (incandescent light)")
    FLASH = (4, "Flash")
    FINE_WEATHER = (9, "Fine weather")
    CLOUDY_WEATHER = (10, "Cloudy weather")
    SHADE = (11, "Shade")
    DAYLIGHT_FLUORESCENT = (12, "Daylight fluorescent (D 5700 - 7100K)")
    DAY_WHITE_FLUORESCENT = (13, "Day white fluorescent (N 4600 - 5400K)")
    COOL_WHITE_FLUORESCENT = (14, "Cool white fluorescent (W 3900 - 4500K)")
    WHITE_FLUORESCENT = (15, "White fluorescent (WW 3200 - 3700K)")
    STANDARD_LIGHT_A = (17, "Standard light A")
    STANDARD_LIGHT_B = (18, "Standard light B")
    STANDARD_LIGHT_C = (19, "Standard light C")
    D55 = (20, "D55")
    D65 = (21, "D65")
    D75 = (22, "D75")
    D50 = (23, "D50")
    ISO_STUDIO_TUNGSTEN = (24, "ISO studio tungsten")
    OTHER = (255, "Other light source")


class MeteringMode(CodedValue):
    """Metering mode (0x9207)."""
    UNKNOWN = (0, "Unknown")
    AVERAGE = (1, "Average")
    CENTER_WEIGHTED_AVERAGE = (2, "Center weighted average")
    SPOT = (3, "Spot")
    MULTI_SPOT = (4, "Multi Spot")
    PATTERN = (5, "Pattern")
    PARTIAL = (6, "Partial")
    OTHER = (255, "Other")


class Saturation(CodedValue):
    """Direction of saturation processing (0xA409)."""
    NORMAL = (0, "Normal")
    LOW = (1, "Low saturation")
    HIGH = (2, "High saturation")


class SceneCaptureType(CodedValue):
    """Type of scene that was shot (0xA406)."""
    STANDARD = (0, "Standard")
    LANDSCAPE = (1, "Landscape")
    PORTRAIT = (2, "Portrait")
    NIGHT_SCENE = (3, "Night scene")


class SensingMethod(CodedValue):
    """Image sensor type on the camera (0xA217). Code 6 is unassigned."""
    NOT_DEFINED = (1, "Not defined")
    ONE_CHIP_COLOR_AREA = (2, "One-chip color area sensor")
    TWO_CHIP_COLOR_AREA = (3, "Two-chip color area sensor")
    THREE_CHIP_COLOR_AREA = (4, "Three-chip color area sensor")
    COLOR_SEQUENTIAL_AREA = (5, "Color sequential area sensor")
    TRILINEAR = (7, "Trilinear sensor")
    COLOR_SEQUENTIAL_LINEAR = (8, "Color sequential linear sensor")


class Sharpness(CodedValue):
    """Direction of sharpness processing (0xA40A)."""
    NORMAL = (0, "Normal")
    SOFT = (1, "Soft")
    HARD = (2, "Hard")


class SubjectDistanceRange(CodedValue):
    """Distance range to the subject (0xA40C)."""
    UNKNOWN = (0, "Unknown")
    MACRO = (1, "Macro")
    CLOSE_VIEW = (2, "Close view")
    DISTANT_VIEW = (3, "Distant view")
    OTHER = (4, "Other")


class WhiteBalance(CodedValue):
    """White balance mode (0xA403)."""
    AUTO = (0, "Auto white balance")
    MANUAL = (1, "Manual white balance")
