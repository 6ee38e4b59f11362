# ABOUTME: Unit tests for the batch import pipeline.
# ABOUTME: Validates archive discovery and per-file error collection.

from pathlib import Path

from gihon.core.importer import find_archives, import_comics
from gihon.library.store import LibraryStore


class TestFindArchives:
    """Tests for find_archives."""

    def test_finds_accepted_extensions_recursively(self, tmp_path: Path) -> None:
        (tmp_path / "sub").mkdir()
        for name in ("a.cbz", "b.CBR", "sub/c.zip", "sub/d.rar", "e.txt", "f.epub"):
            (tmp_path / name).write_bytes(b"x")

        found = [p.relative_to(tmp_path).as_posix() for p in find_archives(tmp_path)]
        assert found == ["a.cbz", "b.CBR", "sub/c.zip", "sub/d.rar"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert find_archives(tmp_path) == []


class TestImportComics:
    """Tests for import_comics."""

    def test_adds_valid_archives(
        self, store: LibraryStore, batman_cbz: Path, saga_cbz: Path,
    ) -> None:
        result = import_comics([batman_cbz, saga_cbz], store)
        assert result.added == 2
        assert result.errors == 0
        assert [p.name for p in result.added_paths] == ["Batman01.cbz", "Saga01.cbz"]

    def test_records_errors_and_continues(
        self, store: LibraryStore, corrupt_cbz: Path, no_info_cbz: Path, batman_cbz: Path,
    ) -> None:
        result = import_comics([corrupt_cbz, no_info_cbz, batman_cbz], store)
        assert result.added == 1
        assert result.errors == 2
        assert [path for path, _ in result.error_details] == [corrupt_cbz, no_info_cbz]
        assert "ComicInfo.xml not found" in result.error_details[1][1]
        assert "Batman01.cbz" in store.list_titles()
