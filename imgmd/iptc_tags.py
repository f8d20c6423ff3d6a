# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
IPTC tag definitions

IPTC-IIM Application Record (record 2) datasets and the IPTC Core / Adobe
XMP properties that carry the same information, mapped to the property
keys of the "{IPTC}" mapping.

Copyright 2025 DNAi inc.
"""

IPTC_APPLICATION_RECORD = 2

# IIM 4.2 record 2 dataset number -> property key
IIM_DATASETS = {
    3: "ObjectTypeReference",
    4: "ObjectAttributeReference",
    5: "ObjectName",
    7: "EditStatus",
    8: "EditorialUpdate",
    10: "Urgency",
    12: "SubjectReference",
    15: "Category",
    20: "SupplementalCategory",
    22: "FixtureIdentifier",
    25: "Keywords",
    26: "ContentLocationCode",
    27: "ContentLocationName",
    30: "ReleaseDate",
    35: "ReleaseTime",
    37: "ExpirationDate",
    38: "ExpirationTime",
    40: "SpecialInstructions",
    42: "ActionAdvised",
    45: "ReferenceService",
    47: "ReferenceDate",
    50: "ReferenceNumber",
    55: "DateCreated",
    60: "TimeCreated",
    62: "DigitalCreationDate",
    63: "DigitalCreationTime",
    65: "OriginatingProgram",
    70: "ProgramVersion",
    75: "ObjectCycle",
    80: "Byline",
    85: "BylineTitle",
    90: "City",
    92: "SubLocation",
    95: "Province/State",
    100: "Country/PrimaryLocationCode",
    101: "Country/PrimaryLocationName",
    103: "OriginalTransmissionReference",
    105: "Headline",
    110: "Credit",
    115: "Source",
    116: "CopyrightNotice",
    118: "Contact",
    120: "Caption/Abstract",
    122: "Writer/Editor",
    130: "ImageType",
    131: "ImageOrientation",
    135: "LanguageIdentifier",
}

# Keys whose values are always lists; every other key keeps its first value
LIST_KEYS = {"Keywords", "Byline", "Scene"}

# XMP property -> {IPTC} key. IIM values win when both are present.
XMP_IPTC_TAGS = {
    "Iptc4xmpCore:Scene": "Scene",
    "Iptc4xmpCore:CreatorContactInfo": "CreatorContactInfo",
    "Iptc4xmpCore:Location": "SubLocation",
    "Iptc4xmpCore:CountryCode": "Country/PrimaryLocationCode",
    "Iptc4xmpCore:IntellectualGenre": "ObjectAttributeReference",
    "xmpRights:UsageTerms": "RightsUsageTerms",
    "xmp:Rating": "StarRating",
    "dc:subject": "Keywords",
    "dc:creator": "Byline",
    "dc:description": "Caption/Abstract",
    "dc:rights": "CopyrightNotice",
    "dc:title": "ObjectName",
    "photoshop:AuthorsPosition": "BylineTitle",
    "photoshop:CaptionWriter": "Writer/Editor",
    "photoshop:Category": "Category",
    "photoshop:City": "City",
    "photoshop:Country": "Country/PrimaryLocationName",
    "photoshop:Credit": "Credit",
    "photoshop:Headline": "Headline",
    "photoshop:Instructions": "SpecialInstructions",
    "photoshop:Source": "Source",
    "photoshop:State": "Province/State",
    "photoshop:SupplementalCategories": "SupplementalCategory",
    "photoshop:TransmissionReference": "OriginalTransmissionReference",
    "photoshop:Urgency": "Urgency",
}
