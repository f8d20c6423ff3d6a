# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Command-line interface for imgmd

Prints the metadata of one or more image files as JSON.

Copyright 2025 DNAi inc.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from imgmd import __version__
from imgmd.config import load_config
from imgmd.exceptions import ImgmdError
from imgmd.image_metadata import ImageMetadata
from imgmd.logging_setup import setup_logging
from imgmd.metadata import dump_json
from imgmd.metadata_options import MetadataOptions

logger = logging.getLogger(__name__)

FAMILIES = ("exif", "iptc", "tiff", "gps")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imgmd",
        description="Extract image metadata. Outputs metadata from the supplied image files as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # All metadata of one image
  imgmd photo.jpg

  # Several images, without GPS data
  imgmd --no-gps a.jpg b.png

  # Image properties only
  imgmd -b photo.jpg

  # Raw property mapping
  imgmd -d photo.jpg
        """,
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="Image file paths.")
    parser.add_argument("-b", "--basic", action="store_true",
                        help="Basic. Don't include other metadata.")
    parser.add_argument("-e", "--exif", action=argparse.BooleanOptionalAction, default=None,
                        help="Include EXIF metadata.")
    parser.add_argument("-g", "--gps", action=argparse.BooleanOptionalAction, default=None,
                        help="Include GPS metadata.")
    parser.add_argument("-i", "--iptc", action=argparse.BooleanOptionalAction, default=None,
                        help="Include IPTC metadata.")
    parser.add_argument("-t", "--tiff", action=argparse.BooleanOptionalAction, default=None,
                        help="Include TIFF metadata.")
    parser.add_argument("-d", "--debug", action="store_true",
                        help="Show the raw metadata.")
    parser.add_argument("-c", "--config", type=Path, default=None,
                        help="Configuration file (TOML).")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log progress to stderr (-vv for debug output).")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_options(args: argparse.Namespace, config: Dict[str, Any]) -> MetadataOptions:
    """Combine config defaults with command-line flags."""
    if args.basic:
        return MetadataOptions.NONE
    include = config.get("include", {})
    flags = {}
    for family in FAMILIES:
        flag = getattr(args, family)
        flags[family] = bool(include.get(family, True)) if flag is None else flag
    return MetadataOptions.from_flags(**flags)


def _log_level(args: argparse.Namespace, config: Dict[str, Any]) -> str:
    if args.verbose >= 2:
        return "DEBUG"
    if args.verbose == 1:
        return "INFO"
    return str(config.get("logging", {}).get("level", "warning"))


def render(metadata_list: List[ImageMetadata], debug: bool = False, indent: int = 2) -> str:
    """
    Render the metadata of all images.

    Args:
        metadata_list: One entry per image, in command-line order
        debug: Dump the raw property mappings instead of the JSON projection
        indent: JSON indentation

    Returns:
        A single object for one image, an array for several
    """
    if debug:
        return "\n".join(m.debug_description() for m in metadata_list)
    return dump_json(metadata_list, indent=indent)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (ImgmdError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(_log_level(args, config))
    options = resolve_options(args, config)

    metadata_list = []
    for file in args.files:
        try:
            metadata_list.append(ImageMetadata.from_url(Path(file), options))
        except ImgmdError as e:
            logger.info("Aborting at %s", file)
            print(f"Error: {e.message}", file=sys.stderr)
            return 1
        logger.info("Read metadata of %s", file)

    indent = config.get("output", {}).get("indent", 2)
    print(render(metadata_list, debug=args.debug, indent=indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
