# ABOUTME: Metadata package for comic metadata parsing, storage, and representation.
# ABOUTME: Exports the ComicMetadata dataclass used throughout Gihon.

from gihon.metadata.comicinfo import parse_comic_info
from gihon.metadata.serialization import metadata_from_json, metadata_to_json
from gihon.metadata.types import ComicMetadata

__all__ = [
    "ComicMetadata",
    "metadata_from_json",
    "metadata_to_json",
    "parse_comic_info",
]
