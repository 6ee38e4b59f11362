# ABOUTME: On-disk comic library: one folder per title holding the archive and side-files.
# ABOUTME: Ingests archives, derives metadata.json and cover files, and serves lookups.

import logging
import shutil
from pathlib import Path

from gihon.errors import (
    InvalidNameError,
    NotFoundError,
    StorageIOError,
    UnsupportedFormatError,
)
from gihon.formats import cbz
from gihon.formats.datauri import (
    decode_data_uri,
    encode_data_uri,
    extension_for_mime_type,
    mime_type_for_name,
)
from gihon.metadata.serialization import metadata_from_json, metadata_to_json
from gihon.metadata.types import ComicMetadata

logger = logging.getLogger(__name__)

ACCEPTED_EXTENSIONS: frozenset[str] = frozenset({".cbz", ".cbr", ".zip", ".rar"})

# Only .cbz archives are listed, whatever ingest accepted
LISTED_EXTENSION = ".cbz"

METADATA_FILE_NAME = "metadata.json"
COVER_STEM = "cover"
# Probe order for stored covers
COVER_EXTENSIONS: tuple[str, ...] = ("jpg", "jpeg", "png", "webp")


class LibraryStore:
    """A comic library rooted at a single directory.

    Layout: <root>/<title_key>/{<archive>, metadata.json, cover.<ext>}, where
    the title key is the archive's file-name stem. The archive is the source
    of truth; metadata.json and the cover are derived and may be missing.

    The store holds no state besides its root. Every call goes back to the
    filesystem, and no locking is done between concurrent callers.
    """

    def __init__(self, root: Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        """The library root directory (created on first ingest or listing)."""
        return self._root

    @staticmethod
    def title_key(name: str) -> str:
        """Derive the title key (file-name stem) from a title or file name.

        Raises:
            InvalidNameError: If the name has no usable stem.
        """
        stem = Path(name).stem
        if not stem or stem in (".", ".."):
            raise InvalidNameError(f"Invalid file name: {name!r}")
        return stem

    def _title_dir(self, name: str) -> Path:
        return self._root / self.title_key(name)

    def _ensure_root(self) -> None:
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageIOError(f"Cannot create library directory {self._root}: {exc}") from exc

    def resolve_full_path(self, name: str) -> Path:
        """Return <root>/<title_key>/<file name> for a title or file name.

        Raises:
            InvalidNameError: If the name has no usable stem.
        """
        file_name = Path(name).name
        return self._title_dir(name) / file_name

    def _stored_archive(self, name: str) -> Path:
        """Resolve a title to its stored archive, which must exist."""
        path = self.resolve_full_path(name)
        if not path.is_file():
            raise NotFoundError(f"Comic not found in library: {name}")
        return path

    # -- ingestion -----------------------------------------------------------

    def ingest(self, source_path: Path) -> Path:
        """Copy an archive into the library and derive its side-files.

        The copy overwrites any existing archive with the same file name. If
        metadata extraction fails the copied archive is kept without a
        metadata.json; nothing is rolled back. A missing cover is not an error.

        Args:
            source_path: Archive to ingest (.cbz, .cbr, .zip or .rar).

        Returns:
            Path of the archive copy inside the library.

        Raises:
            NotFoundError: If the source file does not exist, or has no ComicInfo.
            UnsupportedFormatError: If the extension is not accepted, or the
                cover is neither JPEG nor PNG.
            InvalidNameError: If the file name has no usable stem.
            ArchiveError: If the copied archive is malformed.
            StorageIOError: If copying or writing side-files fails.
        """
        source = Path(source_path)
        logger.info("Adding file: %s", source)

        if not source.exists():
            raise NotFoundError(f"File not found: {source}")
        if source.suffix.lower() not in ACCEPTED_EXTENSIONS:
            raise UnsupportedFormatError(f"Unsupported file format: {source}")

        folder = self._root / self.title_key(source.name)
        destination = folder / source.name

        self._ensure_root()
        try:
            folder.mkdir(exist_ok=True)
        except OSError as exc:
            raise StorageIOError(f"Cannot create title folder {folder}: {exc}") from exc

        self._warn_on_collision(folder, destination)

        try:
            shutil.copyfile(source, destination)
        except OSError as exc:
            raise StorageIOError(f"Failed to copy {source} to {destination}: {exc}") from exc

        # Side-files from an earlier copy no longer describe this archive
        self._remove_side_files(folder)

        metadata = cbz.read_comic_metadata(destination)
        self._write_metadata(folder, metadata)

        cover = cbz.extract_cover_image(destination)
        if cover is not None:
            self._write_cover(folder, cover)
        else:
            logger.info("No cover image found in %s", destination)

        logger.info("File added successfully: %s", destination)
        return destination

    def _warn_on_collision(self, folder: Path, destination: Path) -> None:
        if destination.exists():
            logger.warning("Replacing existing archive %s", destination)
        for entry in folder.iterdir():
            if (
                entry.is_file()
                and entry != destination
                and entry.suffix.lower() in ACCEPTED_EXTENSIONS
            ):
                logger.warning(
                    "Title folder %s already holds %s; %s will share its side-files",
                    folder, entry.name, destination.name,
                )

    def _remove_side_files(self, folder: Path) -> None:
        stale = [folder / METADATA_FILE_NAME]
        stale += [folder / f"{COVER_STEM}.{ext}" for ext in COVER_EXTENSIONS]
        for path in stale:
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                raise StorageIOError(f"Cannot remove stale file {path}: {exc}") from exc

    def _write_metadata(self, folder: Path, metadata: ComicMetadata) -> None:
        metadata_path = folder / METADATA_FILE_NAME
        try:
            metadata_path.write_text(metadata_to_json(metadata), encoding="utf-8")
        except OSError as exc:
            raise StorageIOError(f"Failed to write metadata {metadata_path}: {exc}") from exc

    def _write_cover(self, folder: Path, cover_uri: str) -> Path:
        mime_type, data = decode_data_uri(cover_uri)
        extension = extension_for_mime_type(mime_type)
        cover_path = folder / f"{COVER_STEM}.{extension}"
        try:
            cover_path.write_bytes(data)
        except OSError as exc:
            raise StorageIOError(f"Failed to write cover {cover_path}: {exc}") from exc
        return cover_path

    # -- lookups -------------------------------------------------------------

    def list_titles(self) -> list[str]:
        """List archive file names in the library.

        Looks at .cbz files directly under the root and one level down inside
        title folders. Order follows directory enumeration and is not sorted.
        """
        logger.info("Listing files in %s", self._root)
        self._ensure_root()

        titles: list[str] = []
        try:
            for entry in self._root.iterdir():
                if entry.is_file() and entry.suffix == LISTED_EXTENSION:
                    titles.append(entry.name)
                elif entry.is_dir():
                    for sub_entry in entry.iterdir():
                        if sub_entry.is_file() and sub_entry.suffix == LISTED_EXTENSION:
                            titles.append(sub_entry.name)
        except OSError as exc:
            raise StorageIOError(f"Error listing files in {self._root}: {exc}") from exc

        logger.info("Listed %d files", len(titles))
        return titles

    def get_metadata(self, name: str) -> ComicMetadata:
        """Return a title's metadata, preferring the stored metadata.json.

        Falls back to parsing the archive when the side-file is missing. The
        fallback result is not written back.

        Raises:
            NotFoundError: If the title is not in the library, or the archive
                has no ComicInfo on the fallback path.
            SerializationError: If metadata.json cannot be parsed.
        """
        logger.info("Getting metadata for: %s", name)
        metadata_path = self._title_dir(name) / METADATA_FILE_NAME

        if metadata_path.is_file():
            try:
                text = metadata_path.read_text(encoding="utf-8")
            except OSError as exc:
                raise StorageIOError(f"Failed to read metadata: {exc}") from exc
            return metadata_from_json(text)

        archive = self._stored_archive(name)
        logger.warning("No %s for %s; reading archive directly", METADATA_FILE_NAME, name)
        return cbz.read_comic_metadata(archive)

    def read_comic_info(self, name: str) -> ComicMetadata:
        """Parse a stored archive's ComicInfo, ignoring metadata.json."""
        logger.info("Reading comic info from: %s", name)
        return cbz.read_comic_metadata(self._stored_archive(name))

    def get_cover_image(self, name: str) -> str | None:
        """Return the stored cover as a data URI, or None if there is none.

        Probes cover.jpg, cover.jpeg, cover.png, cover.webp in that order and
        never falls back to extracting from the archive.
        """
        logger.info("Getting cover image for: %s", name)
        folder = self._title_dir(name)

        for ext in COVER_EXTENSIONS:
            cover_path = folder / f"{COVER_STEM}.{ext}"
            if cover_path.is_file():
                try:
                    data = cover_path.read_bytes()
                except OSError as exc:
                    raise StorageIOError(f"Failed to read cover image: {exc}") from exc
                return encode_data_uri(data, mime_type_for_name(cover_path.name))

        return None

    def load_page(self, name: str, index: int) -> str:
        """Load one page of a stored title as a data URI."""
        logger.info("Loading image index %d from: %s", index, name)
        return cbz.load_image_by_index(self._stored_archive(name), index)

    def load_pages(self, name: str) -> list[str]:
        """Load every page of a stored title as data URIs."""
        logger.info("Loading all images from: %s", name)
        return cbz.load_images(self._stored_archive(name))

    def page_count(self, name: str) -> int:
        """Number of pages in a stored title."""
        logger.info("Getting page count for: %s", name)
        return cbz.page_count(self._stored_archive(name))

    # -- mutation ------------------------------------------------------------

    def delete_file(self, name: str) -> None:
        """Remove a title's folder (archive, metadata, cover) from the library.

        A bare archive directly under the root is removed as well.

        Raises:
            NotFoundError: If nothing is stored under that name.
        """
        logger.info("Deleting file: %s", name)
        folder = self._title_dir(name)
        loose_file = self._root / Path(name).name

        if not folder.is_dir() and not loose_file.is_file():
            raise NotFoundError(f"Comic not found in library: {name}")

        try:
            if folder.is_dir():
                shutil.rmtree(folder)
            if loose_file.is_file():
                loose_file.unlink()
        except OSError as exc:
            raise StorageIOError(f"Failed to delete {name}: {exc}") from exc

    def edit_metadata(self, name: str, metadata: ComicMetadata) -> None:
        """Overwrite a title's metadata.json with the given record.

        Raises:
            NotFoundError: If the title has no folder in the library.
        """
        logger.info("Editing metadata for: %s", name)
        folder = self._title_dir(name)
        if not folder.is_dir():
            raise NotFoundError(f"Comic not found in library: {name}")
        self._write_metadata(folder, metadata)
