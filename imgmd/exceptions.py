# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for imgmd

This module defines the error hierarchy raised while opening image files
and extracting their property mappings. Field accessors on the metadata
views never raise; only construction does.

Copyright 2025 DNAi inc.
"""

from enum import IntEnum
from typing import Optional

from imgmd.localization import localize


class ImgmdError(Exception):
    """
    Base exception for all imgmd errors.

    All imgmd exceptions inherit from this class, allowing
    catch-all error handling for any imgmd-related errors.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class ImageFileErrorCode(IntEnum):
    """Failure classes for opening an image file."""
    ACCESS_DENIED = 0
    INVALID_CONTENT_TYPE = 1
    INVALID_URL = 2
    NO_SUCH_FILE = 3
    UNKNOWN = 4


class ImageFileError(ImgmdError):
    """
    Raised when an image file cannot be resolved or opened.

    Every instance is attributable to exactly one URL. Two errors compare
    equal when they carry the same code and URL, unless the code is
    UNKNOWN: opaque failures are never considered equal to each other.
    """

    def __init__(
        self,
        url: str,
        code: ImageFileErrorCode = ImageFileErrorCode.UNKNOWN,
        underlying_error: Optional[BaseException] = None,
    ):
        """
        Initialize the error.

        Args:
            url: URL (or path) of the file that failed
            code: Failure class
            underlying_error: The OS-level error that triggered this one, if any
        """
        self.url = url
        self.code = code
        self.underlying_error = underlying_error
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.code == ImageFileErrorCode.ACCESS_DENIED:
            return localize("Cannot access {url}").format(url=self.url)
        if self.code == ImageFileErrorCode.INVALID_URL:
            return localize("{url} is not a file URL.").format(url=self.url)
        if self.code == ImageFileErrorCode.INVALID_CONTENT_TYPE:
            return localize("Invalid content type.")
        if self.code == ImageFileErrorCode.NO_SUCH_FILE:
            return localize(
                "The file '{url}' couldn't be opened because it doesn't exist."
            ).format(url=self.url)
        if self.underlying_error is not None:
            return str(self.underlying_error)
        return localize("An unknown error occurred.")

    @property
    def recovery_suggestion(self) -> Optional[str]:
        """Short hint on how the user can avoid the failure, if one applies."""
        if self.code == ImageFileErrorCode.ACCESS_DENIED:
            return localize("Please select a file you have permission to access.")
        if self.code == ImageFileErrorCode.INVALID_URL:
            return localize("Please select a valid file.")
        if self.code == ImageFileErrorCode.INVALID_CONTENT_TYPE:
            return localize("Please select an image file.")
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageFileError):
            return NotImplemented
        if self.code == ImageFileErrorCode.UNKNOWN and other.code == ImageFileErrorCode.UNKNOWN:
            return False
        return self.url == other.url and self.code == other.code

    def __hash__(self) -> int:
        if self.code == ImageFileErrorCode.UNKNOWN:
            return id(self)
        return hash((self.url, self.code))

    def __repr__(self) -> str:
        return f"ImageFileError({self.url!r}, code={self.code.name})"


class MetadataError(ImgmdError):
    """
    Raised when a property mapping cannot be extracted from an image.
    """
    pass


class InvalidImageSource(MetadataError):
    """Raised when the decoder does not recognize the input as an image."""

    def __init__(self, message: str = ""):
        super().__init__(message or localize("Failed to read image source."))


class InvalidImageProperties(MetadataError):
    """Raised when no property mapping is available at index 0."""

    def __init__(self, message: str = ""):
        super().__init__(message or localize("Failed to read image properties."))


class KeyNotFound(MetadataError):
    """
    Raised by call sites that require a property and find it absent.

    Attributes:
        key: The missing property key
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(localize("key not found '{key}'.").format(key=key))


class MetadataReadError(ImgmdError):
    """
    Raised when an embedded metadata packet cannot be parsed.

    The decoder adapter logs and skips such packets; the error never
    escapes a field accessor.
    """
    pass


class ConfigError(ImgmdError, ValueError):
    """
    Raised when a configuration file is malformed.
    """
    pass
