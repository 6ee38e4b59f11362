# ABOUTME: Comic archive (CBZ / ZIP) reading: ComicInfo metadata, cover, and pages.
# ABOUTME: Stateless functions over an archive path; every call reopens the file.

import contextlib
import logging
import zipfile
import zlib
from collections.abc import Iterator
from pathlib import Path

from gihon.errors import (
    ArchiveError,
    IndexOutOfRangeError,
    NotFoundError,
    StorageIOError,
)
from gihon.formats.datauri import encode_data_uri, mime_type_for_name
from gihon.metadata.comicinfo import parse_comic_info
from gihon.metadata.types import ComicMetadata

logger = logging.getLogger(__name__)

COMIC_INFO_SUFFIX = "comicinfo.xml"
IMAGE_SUFFIXES: tuple[str, ...] = (".jpg", ".png")


@contextlib.contextmanager
def _open_archive(path: Path) -> Iterator[zipfile.ZipFile]:
    """Open a ZIP-compatible archive, translating failures into Gihon errors.

    Errors raised while reading entries inside the with-block are translated
    the same way: damaged compressed data and encrypted entries are malformed
    archives here. The archive handle is closed on every exit path.
    """
    try:
        with zipfile.ZipFile(path) as archive:
            yield archive
    except (zipfile.BadZipFile, zlib.error, NotImplementedError, EOFError, RuntimeError) as exc:
        raise ArchiveError(f"Malformed archive: {path}: {exc}") from exc
    except OSError as exc:
        raise StorageIOError(f"Failed to read archive: {path}: {exc}") from exc


def _is_image(name: str) -> bool:
    return name.lower().endswith(IMAGE_SUFFIXES)


def _sorted_image_entries(archive: zipfile.ZipFile) -> list[zipfile.ZipInfo]:
    """Image entries ordered by lower-cased name (the page order)."""
    entries = [info for info in archive.infolist() if _is_image(info.filename)]
    return sorted(entries, key=lambda info: info.filename.lower())


def read_comic_metadata(path: Path) -> ComicMetadata:
    """Read ComicInfo metadata from a comic archive.

    Scans entries in archive order and parses the first one whose lower-cased
    name ends with "comicinfo.xml".

    Args:
        path: Path to the archive.

    Returns:
        ComicMetadata with "" for any field the descriptor lacks.

    Raises:
        NotFoundError: If the archive has no ComicInfo descriptor.
        ArchiveError: If the archive is malformed.
        StorageIOError: If the file cannot be opened or read.
    """
    with _open_archive(path) as archive:
        for info in archive.infolist():
            if info.filename.lower().endswith(COMIC_INFO_SUFFIX):
                raw = archive.read(info)
                contents = raw.decode("utf-8-sig", errors="replace")
                if "\ufffd" in contents:
                    logger.warning(
                        "ComicInfo in %s is not valid UTF-8; undecodable bytes replaced",
                        path,
                    )
                return parse_comic_info(contents)

    raise NotFoundError(f"ComicInfo.xml not found in {path}")


def extract_cover_image(path: Path) -> str | None:
    """Return the first image in archive order as a data URI.

    Archive order is used as-is, so the cover may differ from page 0.

    Returns:
        A data:image/jpeg or data:image/png URI, or None if the archive has no images.
    """
    with _open_archive(path) as archive:
        for info in archive.infolist():
            name = info.filename.lower()
            if _is_image(name):
                mime_type = "image/png" if name.endswith(".png") else "image/jpeg"
                return encode_data_uri(archive.read(info), mime_type)
    return None



def list_images(path: Path) -> list[str]:
    """List image entry names sorted by lower-cased name.

    This ordering defines page order and is stable across calls.
    """
    with _open_archive(path) as archive:
        return [info.filename for info in _sorted_image_entries(archive)]


def page_count(path: Path) -> int:
    """Number of pages (image entries) in the archive."""
    return len(list_images(path))


def _page_entry(archive: zipfile.ZipFile, path: Path, index: int) -> zipfile.ZipInfo:
    entries = _sorted_image_entries(archive)
    if index < 0 or index >= len(entries):
        raise IndexOutOfRangeError(
            f"Image index {index} out of range ({len(entries)} pages) in {path}"
        )
    return entries[index]


def read_image_bytes(path: Path, index: int) -> bytes:
    """Read the raw bytes of the page at index in sorted page order.

    Raises:
        IndexOutOfRangeError: If index is negative or not below the page count.
    """
    with _open_archive(path) as archive:
        return archive.read(_page_entry(archive, path, index))


def load_image_by_index(path: Path, index: int) -> str:
    """Load the page at index as a data URI typed from the entry's extension.

    Raises:
        IndexOutOfRangeError: If index is negative or not below the page count.
    """
    with _open_archive(path) as archive:
        entry = _page_entry(archive, path, index)
        return encode_data_uri(archive.read(entry), mime_type_for_name(entry.filename))


def load_images(path: Path) -> list[str]:
    """Load every page, in page order, as data URIs."""
    with _open_archive(path) as archive:
        return [
            encode_data_uri(archive.read(entry), mime_type_for_name(entry.filename))
            for entry in _sorted_image_entries(archive)
        ]
