# ABOUTME: Shared pytest fixtures for Gihon tests.
# ABOUTME: Builds comic archives (valid, descriptor-less, corrupt) and an empty library.

import struct
import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

from gihon.library.store import LibraryStore
from tests.fixtures.comics import (
    BATMAN_COMIC_INFO,
    JPEG_BYTES,
    SAGA_COMIC_INFO,
    SAGA_PAGES,
)

MakeCbz = Callable[..., Path]


@pytest.fixture
def make_cbz(tmp_path: Path) -> MakeCbz:
    """Factory that writes a ZIP archive with entries in the given order."""

    def _make(
        name: str,
        entries: list[tuple[str, bytes | str]],
        directory: Path | None = None,
    ) -> Path:
        target_dir = directory or tmp_path / "sources"
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        with zipfile.ZipFile(path, "w") as zf:
            for entry_name, data in entries:
                zf.writestr(entry_name, data)
        return path

    return _make


@pytest.fixture
def batman_cbz(make_cbz: MakeCbz) -> Path:
    """Batman01.cbz with a two-tag ComicInfo.xml and a single JPEG page."""
    return make_cbz(
        "Batman01.cbz",
        [
            ("ComicInfo.xml", BATMAN_COMIC_INFO),
            ("page1.jpg", JPEG_BYTES),
        ],
    )


@pytest.fixture
def saga_cbz(make_cbz: MakeCbz) -> Path:
    """Saga01.cbz with full metadata and pages stored out of reading order.

    Archive order: ComicInfo.xml, pages/003.jpg, pages/001.PNG, pages/002.jpg,
    notes.txt. The first image in archive order is pages/003.jpg.
    """
    return make_cbz(
        "Saga01.cbz",
        [
            ("ComicInfo.xml", SAGA_COMIC_INFO),
            *SAGA_PAGES,
            ("notes.txt", "not an image"),
        ],
    )


@pytest.fixture
def no_info_cbz(make_cbz: MakeCbz) -> Path:
    """An archive with pages but no ComicInfo descriptor."""
    return make_cbz(
        "Untagged.cbz",
        [("001.jpg", JPEG_BYTES), ("002.jpg", JPEG_BYTES)],
    )


@pytest.fixture
def corrupt_cbz(tmp_path: Path) -> Path:
    """A file with a .cbz extension that is not a ZIP container."""
    path = tmp_path / "sources" / "Broken.cbz"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("this is not a zip file")
    return path


@pytest.fixture
def damaged_cbz(tmp_path: Path) -> Path:
    """A valid ZIP whose deflated ComicInfo stream has been overwritten with junk."""
    path = tmp_path / "sources" / "Damaged.cbz"
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("ComicInfo.xml", SAGA_COMIC_INFO * 20)
        zf.writestr("001.jpg", JPEG_BYTES)

    data = bytearray(path.read_bytes())
    # Local header: 30 fixed bytes, then the name and extra field.
    name_len, extra_len = struct.unpack("<HH", data[26:30])
    start = 30 + name_len + extra_len
    data[start:start + 10] = b"\xff" * 10
    path.write_bytes(bytes(data))
    return path


@pytest.fixture
def encrypted_cbz(tmp_path: Path) -> Path:
    """A ZIP whose only entry is flagged as encrypted."""
    path = tmp_path / "sources" / "Locked.cbz"
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("001.jpg", JPEG_BYTES)

    data = bytearray(path.read_bytes())
    # Set bit 0 of the general purpose flags in the local and central headers.
    data[6] |= 0x01
    central = data.rfind(b"PK\x01\x02")
    data[central + 8] |= 0x01
    path.write_bytes(bytes(data))
    return path


@pytest.fixture
def library_root(tmp_path: Path) -> Path:
    """Location of a library that does not exist yet."""
    return tmp_path / "library" / "comics"


@pytest.fixture
def store(library_root: Path) -> LibraryStore:
    """A LibraryStore over an empty, not-yet-created root."""
    return LibraryStore(library_root)
