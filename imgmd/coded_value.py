# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Base enumeration for standardized metadata codes

EXIF, IPTC and TIFF encode closed sets of states as small integers or
short strings. Each enumeration in imgmd binds every variant to its raw
code and a display label, and decodes raw values without raising.

Copyright 2025 DNAi inc.
"""

from enum import Enum
from typing import Any, Optional, TypeVar

from imgmd.localization import localize

C = TypeVar("C", bound="CodedValue")


class CodedValue(Enum):
    """
    Enumeration whose members are declared as ``(code, label)`` pairs.

    The member value is the raw code; the label is what serialization shows.
    """

    def __new__(cls, code: Any, label: str):
        obj = object.__new__(cls)
        obj._value_ = code
        obj._label = label
        return obj

    @classmethod
    def decode(cls: type[C], code: Any) -> Optional[C]:
        """
        Map a raw code to its variant.

        Args:
            code: Raw value read from the property mapping

        Returns:
            The matching variant, or None for unknown, missing or boolean codes
        """
        if code is None or isinstance(code, bool):
            return None
        try:
            return cls(code)
        except ValueError:
            return None

    @property
    def code(self) -> Any:
        return self._value_

    @property
    def label(self) -> str:
        return localize(self._label)
