import io
import struct
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

import pytest
from PIL import Image

XMP_HEADER = b"http://ns.adobe.com/xap/1.0/\x00"

EXIF_IFD = 0x8769
GPS_IFD = 0x8825

SAMPLE_XMP = """<?xpacket begin="﻿" id="W5M0MpCehiHzreSzNTczkc9d"?>
<x:xmpmeta xmlns:x="adobe:ns:meta/">
 <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">
  <rdf:Description rdf:about=""
    xmlns:aux="http://ns.adobe.com/exif/1.0/aux/"
    xmlns:xmp="http://ns.adobe.com/xap/1.0/"
    xmlns:xmpRights="http://ns.adobe.com/xap/1.0/rights/"
    xmlns:dc="http://purl.org/dc/elements/1.1/"
    xmlns:Iptc4xmpCore="http://iptc.org/std/Iptc4xmpCore/1.0/xmlns/"
    aux:SerialNumber="0123456789"
    aux:Lens="EF24-70mm f/2.8L II USM"
    aux:Firmware="1.1.3"
    xmp:Rating="4">
   <xmpRights:UsageTerms>
    <rdf:Alt>
     <rdf:li xml:lang="x-default">Editorial use only</rdf:li>
    </rdf:Alt>
   </xmpRights:UsageTerms>
   <dc:subject>
    <rdf:Bag>
     <rdf:li>ignored</rdf:li>
    </rdf:Bag>
   </dc:subject>
   <Iptc4xmpCore:Scene>
    <rdf:Bag>
     <rdf:li>010100</rdf:li>
     <rdf:li>999999</rdf:li>
     <rdf:li>011900</rdf:li>
    </rdf:Bag>
   </Iptc4xmpCore:Scene>
   <Iptc4xmpCore:CreatorContactInfo rdf:parseType="Resource">
    <Iptc4xmpCore:CiAdrCity>Chicago</Iptc4xmpCore:CiAdrCity>
    <Iptc4xmpCore:CiEmailWork>photo@example.com</Iptc4xmpCore:CiEmailWork>
   </Iptc4xmpCore:CreatorContactInfo>
  </rdf:Description>
 </rdf:RDF>
</x:xmpmeta>
<?xpacket end="w"?>"""


def app_segment(marker: int, payload: bytes) -> bytes:
    return bytes([0xFF, marker]) + struct.pack(">H", len(payload) + 2) + payload


def iim_block(datasets: Sequence[Tuple[int, str]]) -> bytes:
    """IPTC-IIM application record datasets."""
    data = b""
    for number, value in datasets:
        encoded = value.encode("utf-8")
        data += b"\x1c\x02" + bytes([number]) + struct.pack(">H", len(encoded)) + encoded
    return data


def photoshop_segment(iim: bytes) -> bytes:
    resource = b"8BIM" + struct.pack(">H", 0x0404) + b"\x00\x00" + struct.pack(">I", len(iim)) + iim
    if len(iim) % 2:
        resource += b"\x00"
    return app_segment(0xED, b"Photoshop 3.0\x00" + resource)


def build_jpeg(
    exif: Optional[Image.Exif] = None,
    iptc: Optional[Sequence[Tuple[int, str]]] = None,
    xmp: Optional[str] = None,
    size: Tuple[int, int] = (32, 24),
    dpi: Optional[Tuple[int, int]] = None,
) -> bytes:
    buf = io.BytesIO()
    save_kwargs: Dict[str, object] = {"format": "JPEG"}
    if exif is not None:
        save_kwargs["exif"] = exif
    if dpi is not None:
        save_kwargs["dpi"] = dpi
    Image.new("RGB", size, (200, 120, 40)).save(buf, **save_kwargs)
    data = buf.getvalue()

    extra = b""
    if xmp is not None:
        extra += app_segment(0xE1, XMP_HEADER + xmp.encode("utf-8"))
    if iptc is not None:
        extra += photoshop_segment(iim_block(iptc))
    return data[:2] + extra + data[2:]


def camera_exif() -> Image.Exif:
    exif = Image.Exif()
    exif[0x010F] = "Canon"
    exif[0x0110] = "Canon EOS 5D Mark IV"
    exif[0x0112] = 6
    exif[0x0131] = "Adobe Lightroom"
    exif[0x0132] = "2023:04:02 09:30:00"
    exif[0x013B] = "Jane Photographer"
    exif[EXIF_IFD] = {
        0x829A: 0.004,
        0x829D: 2.8,
        0x8822: 3,
        0x8827: 200,
        0x9000: b"0232",
        0x9003: "2023:04:01 12:00:00",
        0x9011: "+02:00",
        0x9207: 5,
        0x920A: 50.0,
        0xA000: b"0100",
        0xA403: 1,
        0xA434: "EF50mm f/1.8 STM",
    }
    exif[GPS_IFD] = {
        1: "N",
        2: (37.0, 46.0, 30.12),
        3: "W",
        4: (122.0, 25.0, 9.84),
        5: b"\x00",
        6: 16.5,
        7: (12.0, 30.0, 5.0),
        29: "2023:04:01",
    }
    return exif


@pytest.fixture
def jpeg_factory(tmp_path: Path) -> Callable[..., Path]:
    """Write a JPEG into tmp_path and return its path."""

    def factory(name: str = "photo.jpg", **kwargs) -> Path:
        path = tmp_path / name
        path.write_bytes(build_jpeg(**kwargs))
        return path

    return factory


@pytest.fixture
def camera_jpeg(jpeg_factory) -> Path:
    """A JPEG carrying EXIF, GPS, IPTC and XMP metadata."""
    iptc: List[Tuple[int, str]] = [
        (5, "Sunset"),
        (25, "beach"),
        (25, ""),
        (25, "sunset"),
        (55, "20230401"),
        (60, "120000"),
        (80, "Jane Photographer"),
        (90, "San Francisco"),
        (101, "United States"),
        (105, "Golden hour"),
        (116, "(c) 2023 Jane Photographer"),
    ]
    return jpeg_factory(
        "camera.jpg",
        exif=camera_exif(),
        iptc=iptc,
        xmp=SAMPLE_XMP,
        size=(64, 48),
        dpi=(300, 300),
    )


@pytest.fixture
def plain_png(tmp_path: Path) -> Path:
    path = tmp_path / "plain.png"
    Image.new("RGBA", (10, 8), (0, 0, 0, 0)).save(path)
    return path


def write_bytes(path: Path, data: Union[bytes, str]) -> Path:
    path.write_bytes(data.encode("utf-8") if isinstance(data, str) else data)
    return path
