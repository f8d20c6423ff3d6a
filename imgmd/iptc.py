# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
IPTC view

Typed accessors over the "{IPTC}" property mapping. The mapping merges
IPTC-IIM datasets with the IPTC Core fields that only exist in XMP
(scene codes, creator contact info, usage terms, rating).

See https://www.iptc.org/std/photometadata/specification/IPTC-PhotoMetadata

Copyright 2025 DNAi inc.
"""

from datetime import datetime
from typing import Dict, List, Optional

from imgmd.date_formatter import IPTC_DATE_FORMAT
from imgmd.iptc_codes import CreatorContactKey, Scene
from imgmd.metadata import Metadata


class IPTC(Metadata):
    """
    Press and editorial metadata.
    """

    FIELDS = (
        ("actionAdvised", "action_advised"),
        ("byline", "byline"),
        ("bylineTitle", "byline_title"),
        ("captionAbstract", "caption_abstract"),
        ("category", "category"),
        ("city", "city"),
        ("contact", "contact"),
        ("contentLocationCode", "content_location_code"),
        ("contentLocationName", "content_location_name"),
        ("copyrightNotice", "copyright_notice"),
        ("country", "country"),
        ("countryCode", "country_code"),
        ("creationDate", "creation_date"),
        ("creatorContactInfo", "creator_contact_info"),
        ("creditLine", "credit_line"),
        ("digitalCreationDate", "digital_creation_date"),
        ("editorialUpdate", "editorial_update"),
        ("editStatus", "edit_status"),
        ("expirationDate", "expiration_date"),
        ("fixtureIdentifier", "fixture_identifier"),
        ("headline", "headline"),
        ("imageOrientation", "image_orientation"),
        ("imageType", "image_type"),
        ("keywords", "keywords"),
        ("languageIdentifier", "language_identifier"),
        ("objectAttribute", "object_attribute"),
        ("objectCycle", "object_cycle"),
        ("objectName", "object_name"),
        ("objectType", "object_type"),
        ("originalTransmissionReference", "original_transmission_reference"),
        ("originatingProgram", "originating_program"),
        ("programVersion", "program_version"),
        ("provinceState", "province_state"),
        ("referenceDate", "reference_date"),
        ("referenceNumber", "reference_number"),
        ("referenceService", "reference_service"),
        ("releaseDate", "release_date"),
        ("rightsUsageTerms", "rights_usage_terms"),
        ("sceneCodes", "scene_codes"),
        ("source", "source"),
        ("specialInstructions", "special_instructions"),
        ("starRating", "star_rating"),
        ("subjectReference", "subject_reference"),
        ("subLocation", "sub_location"),
        ("supplementalCategory", "supplemental_category"),
        ("urgency", "urgency"),
        ("writerEditor", "writer_editor"),
    )

    def _string(self, key: str) -> Optional[str]:
        return self._store.get_string(key)

    def _date(self, date_key: str, time_key: str) -> Optional[datetime]:
        return IPTC_DATE_FORMAT.parse(self._string(date_key), self._string(time_key))

    # Image categorization

    @property
    def urgency(self) -> Optional[str]:
        """Editorial urgency, "1" (most urgent) to "8"."""
        return self._string("Urgency")

    @property
    def subject_reference(self) -> Optional[str]:
        return self._string("SubjectReference")

    @property
    def category(self) -> Optional[str]:
        return self._string("Category")

    @property
    def supplemental_category(self) -> Optional[str]:
        return self._string("SupplementalCategory")

    @property
    def fixture_identifier(self) -> Optional[str]:
        return self._string("FixtureIdentifier")

    @property
    def keywords(self) -> Optional[List[str]]:
        """
        Keywords relevant to the image.

        Empty entries are dropped; None when no keyword remains.
        """
        keywords = self._store.get_string_array("Keywords")
        if keywords is None:
            return None
        keywords = [k for k in keywords if k]
        return keywords or None

    @property
    def content_location_code(self) -> Optional[str]:
        return self._string("ContentLocationCode")

    @property
    def content_location_name(self) -> Optional[str]:
        return self._string("ContentLocationName")

    @property
    def edit_status(self) -> Optional[str]:
        return self._string("EditStatus")

    @property
    def editorial_update(self) -> Optional[str]:
        return self._string("EditorialUpdate")

    @property
    def object_cycle(self) -> Optional[str]:
        """Publication cycle: a (morning), p (evening) or b (both)."""
        return self._string("ObjectCycle")

    # Image information

    @property
    def image_type(self) -> Optional[str]:
        return self._string("ImageType")

    @property
    def image_orientation(self) -> Optional[str]:
        """Layout code: P (portrait), L (landscape) or S (square)."""
        return self._string("ImageOrientation")

    @property
    def language_identifier(self) -> Optional[str]:
        return self._string("LanguageIdentifier")

    @property
    def caption_abstract(self) -> Optional[str]:
        return self._string("Caption/Abstract")

    @property
    def headline(self) -> Optional[str]:
        return self._string("Headline")

    @property
    def credit_line(self) -> Optional[str]:
        return self._string("Credit")

    @property
    def star_rating(self) -> Optional[str]:
        return self._string("StarRating")

    @property
    def scene_codes(self) -> Optional[List[Scene]]:
        """
        Scene types covered by the image.

        Unknown codes are dropped; None when no known code remains.
        """
        values = self._store.get_string_array("Scene")
        if values is None:
            return None
        scenes = [s for s in (Scene.decode(v) for v in values) if s is not None]
        return scenes or None

    # Copyright

    @property
    def copyright_notice(self) -> Optional[str]:
        return self._string("CopyrightNotice")

    @property
    def rights_usage_terms(self) -> Optional[str]:
        return self._string("RightsUsageTerms")

    # Release information

    @property
    def release_date(self) -> Optional[datetime]:
        """Earliest date the provider intends the image to be used."""
        return self._date("ReleaseDate", "ReleaseTime")

    @property
    def expiration_date(self) -> Optional[datetime]:
        """Latest date the provider intends the image to be used."""
        return self._date("ExpirationDate", "ExpirationTime")

    @property
    def special_instructions(self) -> Optional[str]:
        return self._string("SpecialInstructions")

    @property
    def action_advised(self) -> Optional[str]:
        return self._string("ActionAdvised")

    @property
    def reference_service(self) -> Optional[str]:
        return self._string("ReferenceService")

    @property
    def reference_date(self) -> Optional[str]:
        return self._string("ReferenceDate")

    @property
    def reference_number(self) -> Optional[str]:
        return self._string("ReferenceNumber")

    @property
    def creation_date(self) -> Optional[datetime]:
        """Date the intellectual content of the image was created."""
        return self._date("DateCreated", "TimeCreated")

    @property
    def digital_creation_date(self) -> Optional[datetime]:
        """Date the digital representation of the image was created."""
        return self._date("DigitalCreationDate", "DigitalCreationTime")

    # Personnel

    @property
    def byline(self) -> Optional[List[str]]:
        """Names of the creators of the image."""
        return self._store.get_string_array("Byline")

    @property
    def byline_title(self) -> Optional[str]:
        return self._string("BylineTitle")

    @property
    def source(self) -> Optional[str]:
        return self._string("Source")

    @property
    def contact(self) -> Optional[str]:
        return self._string("Contact")

    @property
    def writer_editor(self) -> Optional[str]:
        return self._string("Writer/Editor")

    @property
    def creator_contact_info(self) -> Optional[Dict[str, str]]:
        """
        The creator's contact details, keyed by contact field code.

        Keys are matched case-insensitively; unknown keys and non-text
        values are dropped. None when nothing remains.
        """
        info = self._store.get_mapping("CreatorContactInfo")
        if info is None:
            return None
        result: Dict[str, str] = {}
        for raw_key in info:
            key = CreatorContactKey.decode(raw_key)
            value = info.get_string(raw_key)
            if key is None or value is None:
                continue
            result[key.code] = value
        return result or None

    # Location data

    @property
    def city(self) -> Optional[str]:
        return self._string("City")

    @property
    def sub_location(self) -> Optional[str]:
        return self._string("SubLocation")

    @property
    def province_state(self) -> Optional[str]:
        return self._string("Province/State")

    @property
    def country_code(self) -> Optional[str]:
        """ISO 3166 country code of the location shown."""
        return self._string("Country/PrimaryLocationCode")

    @property
    def country(self) -> Optional[str]:
        return self._string("Country/PrimaryLocationName")

    @property
    def original_transmission_reference(self) -> Optional[str]:
        return self._string("OriginalTransmissionReference")

    # Software

    @property
    def originating_program(self) -> Optional[str]:
        return self._string("OriginatingProgram")

    @property
    def program_version(self) -> Optional[str]:
        return self._string("ProgramVersion")

    # Object details

    @property
    def object_type(self) -> Optional[str]:
        return self._string("ObjectTypeReference")

    @property
    def object_attribute(self) -> Optional[str]:
        return self._string("ObjectAttributeReference")

    @property
    def object_name(self) -> Optional[str]:
        return self._string("ObjectName")
