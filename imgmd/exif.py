# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
EXIF view

Typed accessors over the "{Exif}" property mapping, including the
"{ExifAux}" auxiliary mapping some cameras and editors write through XMP.

Copyright 2025 DNAi inc.
"""

from datetime import datetime
from typing import List, Optional

from imgmd.date_formatter import EXIF_DATE_FORMAT
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
from imgmd.metadata import Metadata
from imgmd.property_keys import EXIF_AUX_DICTIONARY
from imgmd.property_store import PropertyStore


class EXIF(Metadata):
    """
    Exchangeable image file format metadata.

    Every field is optional and independently derived; a field that is
    missing or has an unexpected type reads as None.
    """

    FIELDS = (
        ("apertureValue", "aperture_value"),
        ("bodySerialNumber", "body_serial_number"),
        ("brightnessValue", "brightness_value"),
        ("cameraOwnerName", "camera_owner_name"),
        ("cfaPattern", "cfa_pattern"),
        ("colorSpace", "color_space"),
        ("componentsConfiguration", "components_configuration"),
        ("compositeImage", "composite_image"),
        ("compressedBitsPerPixel", "compressed_bits_per_pixel"),
        ("contrast", "contrast"),
        ("customRendered", "custom_rendered"),
        ("dateTimeDigitized", "date_time_digitized"),
        ("dateTimeOriginal", "date_time_original"),
        ("deviceSettingDescription", "device_setting_description"),
        ("digitalZoomRatio", "digital_zoom_ratio"),
        ("exposureBiasValue", "exposure_bias_value"),
        ("exposureIndex", "exposure_index"),
        ("exposureMode", "exposure_mode"),
        ("exposureProgram", "exposure_program"),
        ("exposureTime", "exposure_time"),
        ("fileSource", "file_source"),
        ("firmware", "firmware"),
        ("flash", "flash"),
        ("flashCompensation", "flash_compensation"),
        ("flashEnergy", "flash_energy"),
        ("flashPixVersion", "flash_pix_version"),
        ("fNumber", "f_number"),
        ("focalLength", "focal_length"),
        ("focalLenIn35mmFilm", "focal_len_in_35mm_film"),
        ("focalPlaneResolutionUnit", "focal_plane_resolution_unit"),
        ("focalPlaneXResolution", "focal_plane_x_resolution"),
        ("focalPlaneYResolution", "focal_plane_y_resolution"),
        ("gainControl", "gain_control"),
        ("gamma", "gamma"),
        ("imageNumber", "image_number"),
        ("imageUniqueID", "image_unique_id"),
        ("isoSpeed", "iso_speed"),
        ("isoSpeedLatitudeYYY", "iso_speed_latitude_yyy"),
        ("isoSpeedLatitudeZZZ", "iso_speed_latitude_zzz"),
        ("isoSpeedRatings", "iso_speed_ratings"),
        ("lensID", "lens_id"),
        ("lensInfo", "lens_info"),
        ("lensMake", "lens_make"),
        ("lensModel", "lens_model"),
        ("lensSerialNumber", "lens_serial_number"),
        ("lensSpecification", "lens_specification"),
        ("lightSource", "light_source"),
        ("makerNote", "maker_note"),
        ("maxApertureValue", "max_aperture_value"),
        ("meteringMode", "metering_mode"),
        ("oecf", "oecf"),
        ("offsetTime", "offset_time"),
        ("offsetTimeDigitized", "offset_time_digitized"),
        ("offsetTimeOriginal", "offset_time_original"),
        ("ownerName", "owner_name"),
        ("pixelXDimension", "pixel_x_dimension"),
        ("pixelYDimension", "pixel_y_dimension"),
        ("recommendedExposureIndex", "recommended_exposure_index"),
        ("relatedSoundFile", "related_sound_file"),
        ("saturation", "saturation"),
        ("sceneCaptureType", "scene_capture_type"),
        ("sceneType", "scene_type"),
        ("sensingMethod", "sensing_method"),
        ("sensitivityType", "sensitivity_type"),
        ("serialNumber", "serial_number"),
        ("sharpness", "sharpness"),
        ("shutterSpeedValue", "shutter_speed_value"),
        ("sourceExposureTimesOfCompositeImage", "source_exposure_times_of_composite_image"),
        ("sourceImageNumberOfCompositeImage", "source_image_number_of_composite_image"),
        ("spatialFrequencyResponse", "spatial_frequency_response"),
        ("spectralSensitivity", "spectral_sensitivity"),
        ("standardOutputSensitivity", "standard_output_sensitivity"),
        ("subjectArea", "subject_area"),
        ("subjectDistance", "subject_distance"),
        ("subjectDistanceRange", "subject_distance_range"),
        ("subjectLocation", "subject_location"),
        ("subsecTime", "subsec_time"),
        ("subsecTimeDigitized", "subsec_time_digitized"),
        ("subsecTimeOriginal", "subsec_time_original"),
        ("userComment", "user_comment"),
        ("version", "version"),
        ("whiteBalance", "white_balance"),
    )

    @property
    def aperture_value(self) -> Optional[float]:
        """Lens aperture in APEX units."""
        return self._store.get_double("ApertureValue")

    @property
    def body_serial_number(self) -> Optional[str]:
        return self._store.get_string("BodySerialNumber")

    @property
    def brightness_value(self) -> Optional[float]:
        """Brightness in APEX units, typically -99.99 to 99.99."""
        return self._store.get_double("BrightnessValue")

    @property
    def camera_owner_name(self) -> Optional[str]:
        return self._store.get_string("CameraOwnerName")

    @property
    def cfa_pattern(self) -> Optional[int]:
        """Color filter array geometry of the image sensor."""
        return self._store.get_int("CFAPattern")

    @property
    def color_space(self) -> Optional[int]:
        """Color space: 1 is sRGB, 0xFFFF is uncalibrated."""
        return self._store.get_int("ColorSpace")

    @property
    def components_configuration(self) -> Optional[List[int]]:
        """Channel order of compressed data, e.g. [1, 2, 3, 0] for YCbCr."""
        return self._store.get_int_array("ComponentsConfiguration")

    @property
    def composite_image(self) -> Optional[int]:
        return self._store.get_int("CompositeImage")

    @property
    def compressed_bits_per_pixel(self) -> Optional[float]:
        return self._store.get_double("CompressedBitsPerPixel")

    @property
    def contrast(self) -> Optional[Contrast]:
        return Contrast.decode(self._store.get_int("Contrast"))

    @property
    def custom_rendered(self) -> Optional[CustomRendered]:
        return CustomRendered.decode(self._store.get_int("CustomRendered"))

    @property
    def date_time_digitized(self) -> Optional[datetime]:
        """
        Date the image was stored as digital data.

        OffsetTimeDigitized is applied when present; otherwise UTC.
        """
        return EXIF_DATE_FORMAT.parse(
            self._store.get_string("DateTimeDigitized"),
            offset=self.offset_time_digitized,
        )

    @property
    def date_time_original(self) -> Optional[datetime]:
        """
        Date the original image data was generated.

        For a digital still camera this is when the picture was taken.
        OffsetTimeOriginal is applied when present; otherwise UTC.
        """
        return EXIF_DATE_FORMAT.parse(
            self._store.get_string("DateTimeOriginal"),
            offset=self.offset_time_original,
        )

    @property
    def device_setting_description(self) -> Optional[str]:
        return self._store.get_string("DeviceSettingDescription")

    @property
    def digital_zoom_ratio(self) -> Optional[float]:
        return self._store.get_double("DigitalZoomRatio")

    @property
    def exposure_bias_value(self) -> Optional[float]:
        return self._store.get_double("ExposureBiasValue")

    @property
    def exposure_index(self) -> Optional[float]:
        return self._store.get_double("ExposureIndex")

    @property
    def exposure_mode(self) -> Optional[ExposureMode]:
        return ExposureMode.decode(self._store.get_int("ExposureMode"))

    @property
    def exposure_program(self) -> Optional[ExposureProgram]:
        return ExposureProgram.decode(self._store.get_int("ExposureProgram"))

    @property
    def exposure_time(self) -> Optional[float]:
        """Exposure time in seconds."""
        return self._store.get_double("ExposureTime")

    @property
    def file_source(self) -> Optional[int]:
        return self._store.get_int("FileSource")

    @property
    def flash(self) -> Optional[int]:
        """Raw flash status bit field."""
        return self._store.get_int("Flash")

    @property
    def flash_energy(self) -> Optional[float]:
        return self._store.get_double("FlashEnergy")

    @property
    def flash_pix_version(self) -> Optional[str]:
        return self._store.get_version_string("FlashPixVersion")

    @property
    def f_number(self) -> Optional[float]:
        return self._store.get_double("FNumber")

    @property
    def focal_length(self) -> Optional[float]:
        """Actual focal length of the lens in millimeters."""
        return self._store.get_double("FocalLength")

    @property
    def focal_len_in_35mm_film(self) -> Optional[int]:
        return self._store.get_int("FocalLenIn35mmFilm")

    @property
    def focal_plane_resolution_unit(self) -> Optional[int]:
        return self._store.get_int("FocalPlaneResolutionUnit")

    @property
    def focal_plane_x_resolution(self) -> Optional[float]:
        return self._store.get_double("FocalPlaneXResolution")

    @property
    def focal_plane_y_resolution(self) -> Optional[float]:
        return self._store.get_double("FocalPlaneYResolution")

    @property
    def gain_control(self) -> Optional[int]:
        return self._store.get_int("GainControl")

    @property
    def gamma(self) -> Optional[float]:
        return self._store.get_double("Gamma")

    @property
    def image_unique_id(self) -> Optional[str]:
        return self._store.get_string("ImageUniqueID")

    @property
    def iso_speed(self) -> Optional[int]:
        return self._store.get_int("ISOSpeed")

    @property
    def iso_speed_latitude_yyy(self) -> Optional[int]:
        return self._store.get_int("ISOSpeedLatitudeyyy")

    @property
    def iso_speed_latitude_zzz(self) -> Optional[int]:
        return self._store.get_int("ISOSpeedLatitudezzz")

    @property
    def iso_speed_ratings(self) -> Optional[List[int]]:
        return self._store.get_int_array("ISOSpeedRatings")

    @property
    def lens_make(self) -> Optional[str]:
        return self._store.get_string("LensMake")

    @property
    def lens_specification(self) -> Optional[List[float]]:
        """Minimum/maximum focal length and the f-numbers at each."""
        return self._store.get_double_array("LensSpecification")

    @property
    def light_source(self) -> Optional[LightSource]:
        return LightSource.decode(self._store.get_int("LightSource"))

    @property
    def maker_note(self) -> Optional[str]:
        return self._store.get_string("MakerNote")

    @property
    def max_aperture_value(self) -> Optional[float]:
        return self._store.get_double("MaxApertureValue")

    @property
    def metering_mode(self) -> Optional[MeteringMode]:
        return MeteringMode.decode(self._store.get_int("MeteringMode"))

    @property
    def oecf(self) -> Optional[str]:
        """Opto-electronic conversion function."""
        return self._store.get_string("OECF")

    @property
    def offset_time(self) -> Optional[str]:
        return self._store.get_string("OffsetTime")

    @property
    def offset_time_digitized(self) -> Optional[str]:
        return self._store.get_string("OffsetTimeDigitized")

    @property
    def offset_time_original(self) -> Optional[str]:
        return self._store.get_string("OffsetTimeOriginal")

    @property
    def pixel_x_dimension(self) -> Optional[int]:
        return self._store.get_int("PixelXDimension")

    @property
    def pixel_y_dimension(self) -> Optional[int]:
        return self._store.get_int("PixelYDimension")

    @property
    def recommended_exposure_index(self) -> Optional[int]:
        return self._store.get_int("RecommendedExposureIndex")

    @property
    def related_sound_file(self) -> Optional[str]:
        return self._store.get_string("RelatedSoundFile")

    @property
    def saturation(self) -> Optional[Saturation]:
        return Saturation.decode(self._store.get_int("Saturation"))

    @property
    def scene_capture_type(self) -> Optional[SceneCaptureType]:
        return SceneCaptureType.decode(self._store.get_int("SceneCaptureType"))

    @property
    def scene_type(self) -> Optional[int]:
        return self._store.get_int("SceneType")

    @property
    def sensing_method(self) -> Optional[SensingMethod]:
        return SensingMethod.decode(self._store.get_int("SensingMethod"))

    @property
    def sensitivity_type(self) -> Optional[int]:
        return self._store.get_int("SensitivityType")

    @property
    def sharpness(self) -> Optional[Sharpness]:
        return Sharpness.decode(self._store.get_int("Sharpness"))

    @property
    def shutter_speed_value(self) -> Optional[float]:
        return self._store.get_double("ShutterSpeedValue")

    @property
    def source_exposure_times_of_composite_image(self) -> Optional[str]:
        return self._store.get_string("SourceExposureTimesOfCompositeImage")

    @property
    def source_image_number_of_composite_image(self) -> Optional[int]:
        return self._store.get_int("SourceImageNumberOfCompositeImage")

    @property
    def spatial_frequency_response(self) -> Optional[str]:
        return self._store.get_string("SpatialFrequencyResponse")

    @property
    def spectral_sensitivity(self) -> Optional[str]:
        return self._store.get_string("SpectralSensitivity")

    @property
    def standard_output_sensitivity(self) -> Optional[float]:
        return self._store.get_double("StandardOutputSensitivity")

    @property
    def subject_area(self) -> Optional[List[int]]:
        """Location and area of the main subject, 2 to 4 values."""
        return self._store.get_int_array("SubjectArea")

    @property
    def subject_distance(self) -> Optional[float]:
        return self._store.get_double("SubjectDistance")

    @property
    def subject_distance_range(self) -> Optional[SubjectDistanceRange]:
        return SubjectDistanceRange.decode(self._store.get_int("SubjectDistRange"))

    @property
    def subject_location(self) -> Optional[List[int]]:
        return self._store.get_int_array("SubjectLocation")

    @property
    def subsec_time(self) -> Optional[str]:
        return self._store.get_string("SubsecTime")

    @property
    def subsec_time_digitized(self) -> Optional[str]:
        return self._store.get_string("SubsecTimeDigitized")

    @property
    def subsec_time_original(self) -> Optional[str]:
        return self._store.get_string("SubsecTimeOriginal")

    @property
    def user_comment(self) -> Optional[str]:
        return self._store.get_string("UserComment")

    @property
    def version(self) -> Optional[str]:
        """EXIF version, e.g. "2.3.2"."""
        return self._store.get_version_string("ExifVersion")

    @property
    def white_balance(self) -> Optional[WhiteBalance]:
        return WhiteBalance.decode(self._store.get_int("WhiteBalance"))

    # Auxiliary properties. Only the lens model and lens serial number
    # fall back to the primary mapping.

    @property
    def auxiliary_properties(self) -> Optional[PropertyStore]:
        return self._store.get_mapping(EXIF_AUX_DICTIONARY)

    def _aux_string(self, key: str) -> Optional[str]:
        aux = self.auxiliary_properties
        return aux.get_string(key) if aux is not None else None

    @property
    def firmware(self) -> Optional[str]:
        return self._aux_string("Firmware")

    @property
    def flash_compensation(self) -> Optional[str]:
        return self._aux_string("FlashCompensation")

    @property
    def image_number(self) -> Optional[str]:
        return self._aux_string("ImageNumber")

    @property
    def lens_id(self) -> Optional[str]:
        return self._aux_string("LensID")

    @property
    def lens_info(self) -> Optional[str]:
        return self._aux_string("LensInfo")

    @property
    def lens_model(self) -> Optional[str]:
        model = self._aux_string("LensModel")
        if model is None:
            model = self._store.get_string("LensModel")
        return model

    @property
    def lens_serial_number(self) -> Optional[str]:
        serial = self._aux_string("LensSerialNumber")
        if serial is None:
            serial = self._store.get_string("LensSerialNumber")
        return serial

    @property
    def owner_name(self) -> Optional[str]:
        return self._aux_string("OwnerName")

    @property
    def serial_number(self) -> Optional[str]:
        return self._aux_string("SerialNumber")
