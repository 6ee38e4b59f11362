# ABOUTME: Typed error taxonomy shared by the archive reader and the library store.
# ABOUTME: Each failure carries an ErrorKind so callers can branch without parsing messages.

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure categories surfaced by Gihon."""

    IO = "io"
    ARCHIVE = "archive"
    NOT_FOUND = "not_found"
    INVALID_NAME = "invalid_name"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    UNSUPPORTED_FORMAT = "unsupported_format"
    SERIALIZATION = "serialization"


class GihonError(Exception):
    """Base class for all errors raised by Gihon."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StorageIOError(GihonError):
    """Raised when a file cannot be opened, read, written, or copied."""

    kind = ErrorKind.IO


class ArchiveError(GihonError):
    """Raised when an archive container is malformed."""

    kind = ErrorKind.ARCHIVE


class NotFoundError(GihonError):
    """Raised when a metadata descriptor, title, or source file is absent."""

    kind = ErrorKind.NOT_FOUND


class InvalidNameError(GihonError):
    """Raised when a file name has no usable stem."""

    kind = ErrorKind.INVALID_NAME


class IndexOutOfRangeError(GihonError):
    """Raised when a page index is beyond the archive's page count."""

    kind = ErrorKind.INDEX_OUT_OF_RANGE


class UnsupportedFormatError(GihonError):
    """Raised for file extensions or image types Gihon does not handle."""

    kind = ErrorKind.UNSUPPORTED_FORMAT


class SerializationError(GihonError):
    """Raised when metadata or configuration cannot be encoded or decoded."""

    kind = ErrorKind.SERIALIZATION
