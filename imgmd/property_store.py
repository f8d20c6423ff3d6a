# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Typed, total access to a decoded image property mapping.

Every decoder reads its raw values through a PropertyStore. Lookups never
raise: a missing key or a value of the wrong type yields None.

Copyright 2025 DNAi inc.
"""

import copy
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional


class PropertyStore(Mapping):
    """
    Immutable view over a property mapping with type-checked getters.

    Booleans are never accepted where a number is expected. Integers are
    widened to float by the double getters. Array getters require every
    element to have the requested type.
    """

    def __init__(self, properties: Optional[Mapping[str, Any]] = None):
        self._properties = MappingProxyType(dict(properties or {}))

    def __getitem__(self, key: str) -> Any:
        return self._properties[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"PropertyStore({dict(self._properties)!r})"

    @property
    def raw(self) -> Dict[str, Any]:
        """Deep copy of the underlying mapping as plain dicts."""
        return _unwrap(self._properties)

    def get_string(self, key: str) -> Optional[str]:
        value = self._properties.get(key)
        return value if isinstance(value, str) else None

    def get_int(self, key: str) -> Optional[int]:
        value = self._properties.get(key)
        return value if _is_int(value) else None

    def get_double(self, key: str) -> Optional[float]:
        value = self._properties.get(key)
        return float(value) if _is_number(value) else None

    def get_bool(self, key: str) -> Optional[bool]:
        value = self._properties.get(key)
        return value if isinstance(value, bool) else None

    def get_int_array(self, key: str) -> Optional[List[int]]:
        values = self._sequence(key)
        if values is None or not all(_is_int(v) for v in values):
            return None
        return list(values)

    def get_double_array(self, key: str) -> Optional[List[float]]:
        values = self._sequence(key)
        if values is None or not all(_is_number(v) for v in values):
            return None
        return [float(v) for v in values]

    def get_string_array(self, key: str) -> Optional[List[str]]:
        values = self._sequence(key)
        if values is None or not all(isinstance(v, str) for v in values):
            return None
        return list(values)

    def get_mapping(self, key: str) -> Optional["PropertyStore"]:
        """
        Get a nested mapping as its own store.

        Args:
            key: Property key of the nested dictionary

        Returns:
            A PropertyStore over the nested mapping, or None
        """
        value = self._properties.get(key)
        if isinstance(value, PropertyStore):
            return value
        if isinstance(value, Mapping):
            return PropertyStore(value)
        return None

    def get_version_string(self, key: str) -> Optional[str]:
        """
        Join an integer component array into a dotted version string.

        [2, 3, 2] becomes "2.3.2".
        """
        components = self.get_int_array(key)
        if not components:
            return None
        return ".".join(str(c) for c in components)

    def _sequence(self, key: str) -> Optional[List[Any]]:
        value = self._properties.get(key)
        if isinstance(value, (list, tuple)):
            return list(value)
        return None


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _unwrap(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _unwrap(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_unwrap(v) for v in value]
    return copy.deepcopy(value)
