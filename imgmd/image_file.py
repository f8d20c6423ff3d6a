# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Image file descriptor

Resolves a local path or file URL into an ImageFile carrying its name,
size and content type. Construction either succeeds completely or raises
an ImageFileError naming the file.

Copyright 2025 DNAi inc.
"""

import logging
import mimetypes
import os
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Dict, Iterator, Optional, Union
from urllib.parse import urlparse
from urllib.request import url2pathname

from imgmd.exceptions import ImageFileError, ImageFileErrorCode
from imgmd.value_formatter import format_byte_count

logger = logging.getLogger(__name__)

FILE_SCHEME = "file"


class ImageFile:
    """
    A local image file.

    Example:
        >>> image_file = ImageFile("photos/hang-in.jpg")
        >>> image_file.filename
        'hang-in.jpg'
    """

    def __init__(self, url: Union[str, Path]):
        """
        Resolve and inspect an image file.

        Args:
            url: Local path, or a URL with the file scheme

        Raises:
            ImageFileError: INVALID_URL for non-file URLs, ACCESS_DENIED when
                the file cannot be read, NO_SUCH_FILE when it does not exist,
                INVALID_CONTENT_TYPE when it is not an image, UNKNOWN for any
                other I/O failure
        """
        self._path = _resolve_path(url)
        self._url = self._path.as_uri()
        self._file_size: Optional[int] = None
        self._content_type: Optional[str] = None

        with _scoped_access(self._path, self._url) as fh:
            try:
                self._file_size = os.fstat(fh.fileno()).st_size
            except OSError as e:
                raise ImageFileError(self._url, ImageFileErrorCode.UNKNOWN, e) from e

        content_type, _ = mimetypes.guess_type(self._path.name)
        if content_type is None or not content_type.startswith("image/"):
            raise ImageFileError(self._url, ImageFileErrorCode.INVALID_CONTENT_TYPE)
        self._content_type = content_type
        logger.debug("Resolved %s (%s, %s bytes)", self._url, content_type, self._file_size)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "ImageFile":
        return cls(Path(path))

    @property
    def url(self) -> str:
        """The file URL, e.g. "file:///photos/hang-in.jpg"."""
        return self._url

    @property
    def path(self) -> str:
        return str(self._path)

    @property
    def filename(self) -> str:
        return self._path.name

    @property
    def basename(self) -> str:
        """Filename without its extension."""
        return self._path.stem

    @property
    def file_size(self) -> Optional[int]:
        return self._file_size

    @property
    def formatted_file_size(self) -> Optional[str]:
        return format_byte_count(self._file_size)

    @property
    def content_type(self) -> Optional[str]:
        """MIME type, e.g. "image/jpeg"."""
        return self._content_type

    def to_dict(self) -> Dict[str, str]:
        result = {
            "basename": self.basename,
            "filename": self.filename,
            "path": self.path,
        }
        if self.content_type is not None:
            result["contentType"] = self.content_type
        if self.formatted_file_size is not None:
            result["fileSize"] = self.formatted_file_size
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageFile):
            return NotImplemented
        return self._url == other._url

    def __hash__(self) -> int:
        return hash(self._url)

    def __str__(self) -> str:
        return self._url

    def __repr__(self) -> str:
        return f"ImageFile({self._url!r})"


def _resolve_path(url: Union[str, Path]) -> Path:
    """
    Turn a path or file URL into an absolute path.

    Raises:
        ImageFileError: INVALID_URL for a "scheme://" URL whose scheme is
            not file, or a file URL naming a remote host
    """
    if isinstance(url, Path):
        return url.absolute()

    parsed = urlparse(url)
    scheme = parsed.scheme.lower()
    # A filename such as "shot:1.jpg" parses with a scheme too; only file:
    # and "scheme://" strings are URLs. Single letters are drive letters.
    if scheme == FILE_SCHEME or (len(scheme) > 1 and url[len(scheme):].startswith("://")):
        if scheme != FILE_SCHEME:
            raise ImageFileError(url, ImageFileErrorCode.INVALID_URL)
        if parsed.netloc not in ("", "localhost"):
            raise ImageFileError(url, ImageFileErrorCode.INVALID_URL)
        return Path(url2pathname(parsed.path)).absolute()
    return Path(url).absolute()


@contextmanager
def _scoped_access(path: Path, url: str) -> Iterator[BinaryIO]:
    """
    Hold read access to a file for the duration of the block.

    Access is released on every exit path.
    """
    try:
        fh = open(path, "rb")
    except FileNotFoundError as e:
        raise ImageFileError(url, ImageFileErrorCode.NO_SUCH_FILE, e) from e
    except PermissionError as e:
        raise ImageFileError(url, ImageFileErrorCode.ACCESS_DENIED, e) from e
    except OSError as e:
        raise ImageFileError(url, ImageFileErrorCode.UNKNOWN, e) from e
    try:
        yield fh
    finally:
        fh.close()
        logger.debug("Released %s", url)
