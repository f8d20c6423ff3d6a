# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Date parsing and formatting utilities

Metadata dates are split across several raw fields (a date, a time and
sometimes a UTC offset). Each tag family has a fixed pattern for putting
them back together; this module holds those patterns as shared,
immutable DateFormat values and renders parsed instants in one
serialization format.

Copyright 2025 DNAi inc.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

OFFSET_PATTERN = re.compile(r'^([+-])(\d{2}):?(\d{2})$')

TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%SZ'


@dataclass(frozen=True)
class DateFormat:
    """
    Pattern set for rebuilding one family's composite dates.

    Attributes:
        patterns: strptime patterns tried in order against the joined parts
        tz: Zone applied when neither the text nor an offset field carries one
    """
    patterns: Tuple[str, ...]
    tz: timezone = timezone.utc

    def parse(self, *parts: Optional[str], offset: Optional[str] = None) -> Optional[datetime]:
        """
        Parse a composite date from its raw components.

        Args:
            *parts: Raw components, joined with a single space
            offset: Optional "+HH:MM" style offset field

        Returns:
            An aware datetime, or None if any component is missing or
            unparseable. A malformed offset is ignored and tz applies.
        """
        if not parts or not all(isinstance(p, str) and p.strip() for p in parts):
            return None

        tz = self.tz
        if offset is not None:
            parsed_offset = parse_offset(offset)
            if parsed_offset is not None:
                tz = parsed_offset

        text = ' '.join(p.strip() for p in parts)
        for pattern in self.patterns:
            try:
                parsed = datetime.strptime(text, pattern)
            except ValueError:
                continue
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=tz)
            return parsed
        return None


def parse_offset(value: str) -> Optional[timezone]:
    """
    Parse an EXIF/IPTC UTC offset such as "+02:00" or "-0530".

    Args:
        value: Offset text

    Returns:
        A fixed-offset timezone, or None if the text is not an offset
    """
    if not isinstance(value, str):
        return None
    match = OFFSET_PATTERN.match(value.strip())
    if not match:
        return None
    sign, hours, minutes = match.groups()
    if int(hours) > 23 or int(minutes) > 59:
        return None
    delta = timedelta(hours=int(hours), minutes=int(minutes))
    return timezone(-delta if sign == '-' else delta)


def format_timestamp(value: datetime) -> str:
    """
    Render an instant in the serialization format (ISO-8601, UTC).

    Naive values are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


# EXIF 2.32 DateTimeOriginal / DateTimeDigitized: "YYYY:MM:DD HH:MM:SS"
EXIF_DATE_FORMAT = DateFormat(('%Y:%m:%d %H:%M:%S',))

# TIFF DateTime uses the EXIF layout
TIFF_DATE_FORMAT = EXIF_DATE_FORMAT

# GPSDateStamp + GPSTimeStamp, always UTC; the time may carry fractions
GPS_DATE_FORMAT = DateFormat(('%Y:%m:%d %H:%M:%S', '%Y:%m:%d %H:%M:%S.%f'))

# IIM DateCreated (CCYYMMDD) + TimeCreated (HHMMSS, optionally +HHMM)
IPTC_DATE_FORMAT = DateFormat(('%Y%m%d %H%M%S%z', '%Y%m%d %H%M%S'))
