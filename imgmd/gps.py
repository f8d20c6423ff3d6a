# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
GPS view

Typed accessors over the "{GPS}" property mapping. Latitude and longitude
are stored as unsigned decimal degrees next to their N/S and E/W
references, as in the GPS IFD itself.

Copyright 2025 DNAi inc.
"""

from datetime import datetime
from typing import Optional, Tuple

from imgmd.coded_value import CodedValue
from imgmd.date_formatter import GPS_DATE_FORMAT
from imgmd.metadata import Metadata


class AltitudeReference(CodedValue):
    """Reference point of GPSAltitude (0x0005)."""
    ABOVE_SEA_LEVEL = (0, "Above sea level")
    BELOW_SEA_LEVEL = (1, "Below sea level")


class GPS(Metadata):
    """Geolocation metadata."""

    FIELDS = (
        ("altitude", "altitude"),
        ("altitudeReference", "altitude_reference"),
        ("dateTime", "date"),
        ("horizontalPositioningError", "horizontal_positioning_error"),
        ("latitude", "latitude"),
        ("latitudeReference", "latitude_reference"),
        ("longitude", "longitude"),
        ("longitudeReference", "longitude_reference"),
    )

    @property
    def altitude(self) -> Optional[float]:
        """Altitude in meters relative to altitude_reference."""
        return self._store.get_double("Altitude")

    @property
    def altitude_reference(self) -> Optional[AltitudeReference]:
        return AltitudeReference.decode(self._store.get_int("AltitudeRef"))

    @property
    def latitude(self) -> Optional[float]:
        return self._store.get_double("Latitude")

    @property
    def latitude_reference(self) -> Optional[str]:
        """Hemisphere of the latitude, N or S."""
        return self._store.get_string("LatitudeRef")

    @property
    def longitude(self) -> Optional[float]:
        return self._store.get_double("Longitude")

    @property
    def longitude_reference(self) -> Optional[str]:
        """Hemisphere of the longitude, E or W."""
        return self._store.get_string("LongitudeRef")

    @property
    def horizontal_positioning_error(self) -> Optional[float]:
        """Horizontal positioning error in meters."""
        return self._store.get_double("HPositioningError")

    @property
    def date_stamp(self) -> Optional[str]:
        return self._store.get_string("DateStamp")

    @property
    def time_stamp(self) -> Optional[str]:
        return self._store.get_string("TimeStamp")

    @property
    def date(self) -> Optional[datetime]:
        """UTC instant rebuilt from the date stamp and the time stamp."""
        return GPS_DATE_FORMAT.parse(self.date_stamp, self.time_stamp)

    @property
    def coordinate(self) -> Optional[Tuple[float, float]]:
        """
        Signed (latitude, longitude) in decimal degrees.

        South and west references negate their component. None when either
        component is missing or outside the valid range.
        """
        latitude = self.latitude
        longitude = self.longitude
        if latitude is None or longitude is None:
            return None
        if (self.latitude_reference or "").upper() == "S":
            latitude = -abs(latitude)
        if (self.longitude_reference or "").upper() == "W":
            longitude = -abs(longitude)
        if not (-90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0):
            return None
        return latitude, longitude
