# ABOUTME: Public API for the Gihon on-disk comic library.
# ABOUTME: Exports the LibraryStore and the file-layout constants it uses.

from gihon.library.store import (
    ACCEPTED_EXTENSIONS,
    COVER_EXTENSIONS,
    METADATA_FILE_NAME,
    LibraryStore,
)

__all__ = [
    "ACCEPTED_EXTENSIONS",
    "COVER_EXTENSIONS",
    "METADATA_FILE_NAME",
    "LibraryStore",
]
