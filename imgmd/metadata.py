# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Common base for metadata views

A view is a read-only projection over one property mapping. Subclasses
declare a FIELDS catalogue of (output name, attribute) pairs; the base
class turns that catalogue into the structured projection and JSON text,
and provides the raw debug dump.

Copyright 2025 DNAi inc.
"""

import json
import pprint
from datetime import datetime
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from imgmd.coded_value import CodedValue
from imgmd.date_formatter import format_timestamp
from imgmd.property_store import PropertyStore

JSON_INDENT = 2


class Metadata:
    """
    Base class for all metadata views.

    Attributes:
        FIELDS: Output name and attribute name of every serialized field
    """

    FIELDS: Tuple[Tuple[str, str], ...] = ()

    def __init__(self, properties: Union[PropertyStore, Mapping[str, Any], None] = None):
        if isinstance(properties, PropertyStore):
            self._store = properties
        else:
            self._store = PropertyStore(properties)

    @property
    def properties(self) -> PropertyStore:
        """The untouched property mapping this view reads from."""
        return self._store

    def to_dict(self) -> Dict[str, Any]:
        """
        Build the structured projection of this view.

        Enum values become their labels, dates become ISO-8601 UTC text
        and absent fields are left out.

        Returns:
            Dictionary keyed by the FIELDS output names
        """
        result: Dict[str, Any] = {}
        for name, attribute in self.FIELDS:
            value = serialize_value(getattr(self, attribute))
            if value is not None:
                result[name] = value
        return result

    def to_json(self, indent: Optional[int] = JSON_INDENT) -> str:
        return to_json(self.to_dict(), indent=indent)

    def debug_description(self) -> str:
        """Dump the raw property mapping without any decoding."""
        return pprint.pformat(self._store.raw, width=100, sort_dicts=True)

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._store)} properties)"


def serialize_value(value: Any) -> Any:
    """
    Convert one decoded field value into its JSON-ready form.

    Args:
        value: Decoded value (enum, datetime, view, collection or scalar)

    Returns:
        A JSON-compatible value, or None if the value is absent
    """
    if value is None:
        return None
    if isinstance(value, CodedValue):
        return value.label
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, Metadata):
        return value.to_dict()
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    if isinstance(value, Mapping):
        items = {str(k): serialize_value(v) for k, v in value.items()}
        return {k: v for k, v in items.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [v for v in (serialize_value(item) for item in value) if v is not None]
    return value


def to_json(data: Any, indent: Optional[int] = JSON_INDENT) -> str:
    """Pretty-print a projection with lexicographically sorted keys."""
    return json.dumps(data, indent=indent, sort_keys=True, ensure_ascii=False)


def dump_json(items: Iterable[Any], indent: Optional[int] = JSON_INDENT) -> str:
    """
    Serialize one or more views.

    A single item is emitted as one object; several are wrapped in an array.
    """
    projections = [serialize_value(item) for item in items]
    if len(projections) == 1:
        return to_json(projections[0], indent=indent)
    return to_json(projections, indent=indent)
