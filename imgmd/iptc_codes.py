# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
IPTC coded values

Scene codes from the IPTC NewsCodes "scene" vocabulary
(https://cv.iptc.org/newscodes/scene) and the keys of the IPTC Core
CreatorContactInfo structure.

Copyright 2025 DNAi inc.
"""

from typing import Any, Dict, Optional

from imgmd.coded_value import CodedValue
from imgmd.localization import localize


class Scene(CodedValue):
    """
    Type of scene covered by an item.

    Members carry a short label and a longer definition.
    """

    def __new__(cls, code: str, label: str, definition: str):
        obj = object.__new__(cls)
        obj._value_ = code
        obj._label = label
        obj._definition = definition
        return obj

    HEADSHOT = ("010100", "headshot",
                "A head only view of a person (or animal/s) or persons as in a montage.")
    HALF_LENGTH = ("010200", "half-length",
                   "A torso and head view of a person or persons.")
    FULL_LENGTH = ("010300", "full-length",
                   "A view from head to toe of a person or persons.")
    PROFILE = ("010400", "profile",
               "A view of a person from the side.")
    REAR_VIEW = ("010500", "rear view",
                 "A view of a person or persons from the rear.")
    SINGLE = ("010600", "single",
              "A view of only one person, object or animal.")
    COUPLE = ("010700", "couple",
              "A view of two people who are in a personal relationship, for example "
              "engaged, married or in a romantic partnership.")
    TWO = ("010800", "two",
           "A view of two people.")
    GROUP = ("010900", "group",
             "A view of more than two people.")
    GENERAL_VIEW = ("011000", "general view",
                    "An overall view of the subject and its surrounds.")
    PANORAMIC_VIEW = ("011100", "panoramic view",
                      "A panoramic or wide angle view of a subject and its surrounds.")
    AERIAL_VIEW = ("011200", "aerial view",
                   "A view taken from above.")
    UNDER_WATER = ("011300", "under-water",
                   "A photo taken under water.")
    NIGHT_SCENE = ("011400", "night scene",
                   "A photo taken during darkness.")
    SATELLITE = ("011500", "satellite",
                 "A photo taken from a satellite in orbit.")
    EXTERIOR_VIEW = ("011600", "exterior view",
                     "A photo that shows the exterior of a building or other object.")
    INTERIOR_VIEW = ("011700", "interior view",
                     "A scene or view of the interior of a building or other object.")
    CLOSE_UP = ("011800", "close-up",
                "A view of, or part of a person/object taken at close range in order to "
                "emphasize detail or accentuate mood. Macro photography.")
    ACTION = ("011900", "action",
              "Subject in motion such as children jumping, horse running.")
    PERFORMING = ("012000", "performing",
                  "Subject or subjects on a stage performing to an audience.")
    POSING = ("012100", "posing",
              "Subject or subjects posing such as a 'victory' pose or other stance "
              "that symbolizes leadership.")
    SYMBOLIC = ("012200", "symbolic",
                "A posed picture symbolizing an event - two rings for marriage.")
    OFF_BEAT = ("012300", "off-beat",
                "An attractive, perhaps fun picture of everyday events - dog with "
                "sunglasses, people cooling off in the fountain.")
    MOVIE_SCENE = ("012400", "movie scene",
                   "Photos taken during the shooting of a movie or TV production.")

    @property
    def definition(self) -> str:
        return localize(self._definition)


class CreatorContactKey(CodedValue):
    """
    Field of the creator's contact information.

    Incoming keys are matched without regard to case; the label describes
    which part of the contact record the key holds.
    """
    ADDRESS = ("CiAdrExtadr", "The address portion of the contact information.")
    CITY = ("CiAdrCity", "The city portion of the contact information.")
    COUNTRY = ("CiAdrCtry", "The country or region portion of the contact information.")
    EMAILS = ("CiEmailWork", "Email addresses for the contact.")
    PHONES = ("CiTelWork", "Phone numbers for the contact.")
    POSTAL_CODE = ("CiAdrPcode", "The postal code portion of the contact.")
    STATE_PROVINCE = ("CiAdrRegion", "The state or province of the contact.")
    WEB_URLS = ("CiUrlWork", "Web addresses for the contact.")

    @classmethod
    def _missing_(cls, value: Any) -> Optional["CreatorContactKey"]:
        if isinstance(value, str):
            return _CONTACT_KEYS_BY_LOWER.get(value.lower())
        return None


_CONTACT_KEYS_BY_LOWER: Dict[str, CreatorContactKey] = {
    member.value.lower(): member for member in CreatorContactKey
}
