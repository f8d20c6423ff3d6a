# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
XMP (Extensible Metadata Platform) parser

This module parses the XMP packet handed back by the image decoder into a
flat dictionary keyed by "prefix:Name". Only the namespaces that feed the
EXIF auxiliary and IPTC Core properties are kept.

Copyright 2025 DNAi inc.
"""

import logging
import re
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional, Union

from imgmd.exceptions import MetadataReadError

logger = logging.getLogger(__name__)

RDF_NS = 'http://www.w3.org/1999/02/22-rdf-syntax-ns#'
XML_LANG = '{http://www.w3.org/XML/1998/namespace}lang'

NAMESPACES = {
    'rdf': RDF_NS,
    'xmp': 'http://ns.adobe.com/xap/1.0/',
    'xmpRights': 'http://ns.adobe.com/xap/1.0/rights/',
    'dc': 'http://purl.org/dc/elements/1.1/',
    'photoshop': 'http://ns.adobe.com/photoshop/1.0/',
    'aux': 'http://ns.adobe.com/exif/1.0/aux/',
    'exifEX': 'http://cipa.jp/exif/1.0/',
    'Iptc4xmpCore': 'http://iptc.org/std/Iptc4xmpCore/1.0/xmlns/',
    'Iptc4xmpExt': 'http://iptc.org/std/Iptc4xmpExt/2008-02-29/',
}

PREFIXES = {uri: prefix for prefix, uri in NAMESPACES.items()}

XPACKET_PATTERN = re.compile(r'<\?xpacket[^>]*\?>', flags=re.IGNORECASE)


class XMPParser:
    """
    Parser for an XMP packet.

    Simple properties become strings, rdf:Bag and rdf:Seq become lists,
    rdf:Alt becomes its x-default (or first) entry, and structures become
    dictionaries keyed by field name without prefix.
    """

    def __init__(self, packet: Union[bytes, str]):
        """
        Initialize XMP parser.

        Args:
            packet: XMP packet, raw bytes or already-decoded text
        """
        self.packet = packet

    def read(self) -> Dict[str, Any]:
        """
        Parse the packet.

        Returns:
            Dictionary of XMP properties keyed by "prefix:Name"

        Raises:
            MetadataReadError: If the packet is not well-formed XML
        """
        try:
            return self._parse_xmp_packet(self.packet)
        except ET.ParseError as e:
            raise MetadataReadError(f"Failed to read XMP metadata: {str(e)}") from e

    def _parse_xmp_packet(self, xmp_data: Union[bytes, str]) -> Dict[str, Any]:
        if isinstance(xmp_data, bytes):
            try:
                xmp_str = xmp_data.decode('utf-8')
            except UnicodeDecodeError:
                xmp_str = xmp_data.decode('latin-1', errors='ignore')
        else:
            xmp_str = str(xmp_data)

        # Remove xpacket wrappers and stray NULs to keep XML well-formed
        xmp_str = XPACKET_PATTERN.sub('', xmp_str).strip().strip('\x00')
        if not xmp_str:
            return {}

        root = ET.fromstring(xmp_str)
        rdf = root if root.tag == f'{{{RDF_NS}}}RDF' else root.find(f'.//{{{RDF_NS}}}RDF')
        if rdf is None:
            logger.debug("XMP packet has no rdf:RDF element")
            return {}

        metadata: Dict[str, Any] = {}
        for description in rdf.findall(f'{{{RDF_NS}}}Description'):
            for attr_name, attr_value in description.attrib.items():
                key = _qualified_name(attr_name)
                if key is not None:
                    metadata[key] = attr_value.strip()
            for child in description:
                key = _qualified_name(child.tag)
                if key is None:
                    continue
                value = _element_value(child)
                if value is not None:
                    metadata[key] = value
        return metadata


def _qualified_name(tag: str) -> Optional[str]:
    """Map "{uri}Name" to "prefix:Name"; None for rdf and unknown namespaces."""
    if not tag.startswith('{'):
        return None
    uri, _, local = tag[1:].partition('}')
    prefix = PREFIXES.get(uri)
    if prefix is None or prefix == 'rdf':
        return None
    return f'{prefix}:{local}'


def _local_name(tag: str) -> str:
    return tag.rpartition('}')[2]


def _element_value(element: ET.Element) -> Any:
    if element.get(f'{{{RDF_NS}}}parseType') == 'Resource':
        return _struct_value(element)

    children = list(element)
    if not children:
        if _field_attributes(element):
            return _struct_value(element)
        return (element.text or '').strip()

    container = children[0]
    tag = _local_name(container.tag)
    if tag in ('Bag', 'Seq'):
        return _list_value(container)
    if tag == 'Alt':
        return _alt_value(container)
    if tag == 'Description':
        return _struct_value(container)
    return _struct_value(element)


def _field_attributes(element: ET.Element) -> Dict[str, str]:
    return {
        _local_name(name): value.strip()
        for name, value in element.attrib.items()
        if not name.startswith(f'{{{RDF_NS}}}') and name != XML_LANG
    }


def _struct_value(element: ET.Element) -> Dict[str, Any]:
    fields: Dict[str, Any] = dict(_field_attributes(element))
    for child in element:
        value = _element_value(child)
        if value is not None:
            fields[_local_name(child.tag)] = value
    return fields


def _list_value(container: ET.Element) -> List[Any]:
    return [_element_value(li) for li in container.findall(f'{{{RDF_NS}}}li')]


def _alt_value(container: ET.Element) -> Optional[str]:
    items = container.findall(f'{{{RDF_NS}}}li')
    if not items:
        return None
    for li in items:
        if li.get(XML_LANG) == 'x-default':
            return (li.text or '').strip()
    return (items[0].text or '').strip()
