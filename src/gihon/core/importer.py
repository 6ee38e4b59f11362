# ABOUTME: Batch import pipeline for adding many comic archives to the library.
# ABOUTME: Finds accepted archives under a directory and ingests each one, collecting errors.

from dataclasses import dataclass, field
from pathlib import Path

from gihon.errors import GihonError
from gihon.library.store import ACCEPTED_EXTENSIONS, LibraryStore


@dataclass
class ImportResult:
    """Summary of an import operation."""

    added: int = 0
    errors: int = 0
    added_paths: list[Path] = field(default_factory=list)
    error_details: list[tuple[Path, str]] = field(default_factory=list)


def find_archives(directory: Path) -> list[Path]:
    """Recursively find files with an accepted comic archive extension."""
    return sorted(
        path
        for path in directory.rglob("*")
        if path.is_file() and path.suffix.lower() in ACCEPTED_EXTENSIONS
    )


def import_comics(paths: list[Path], store: LibraryStore) -> ImportResult:
    """Ingest comic archives into the library.

    A failing archive is recorded in the result and does not stop the batch.
    Whatever the failed ingest already copied stays in the library.

    Args:
        paths: Archive files to ingest.
        store: The library to add them to.

    Returns:
        ImportResult with counts of added and failed files.
    """
    result = ImportResult()

    for archive_path in paths:
        try:
            stored = store.ingest(archive_path)
        except GihonError as exc:
            result.errors += 1
            result.error_details.append((archive_path, str(exc)))
            continue

        result.added += 1
        result.added_paths.append(stored)

    return result
