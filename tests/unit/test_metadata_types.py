# ABOUTME: Unit tests for the ComicMetadata dataclass.
# ABOUTME: Validates defaults, equality, and convenience properties.

from gihon.metadata import ComicMetadata


class TestComicMetadata:
    """Tests for ComicMetadata dataclass."""

    def test_defaults_are_empty_strings(self) -> None:
        meta = ComicMetadata()
        assert meta.title == ""
        assert meta.series == ""
        assert meta.writer == ""
        assert meta.summary == ""
        assert meta.year == ""
        assert meta.is_empty is True

    def test_full_construction(self) -> None:
        meta = ComicMetadata(
            title="Watchmen",
            series="Watchmen",
            writer="Alan Moore",
            summary="Who watches the watchmen?",
            year="1986",
        )
        assert meta.writer == "Alan Moore"
        assert meta.is_empty is False

    def test_equality_is_by_value(self) -> None:
        assert ComicMetadata(title="A", year="1") == ComicMetadata(title="A", year="1")
        assert ComicMetadata(title="A") != ComicMetadata(title="B")

    def test_display_title_falls_back_to_series(self) -> None:
        assert ComicMetadata(title="Issue 1", series="Saga").display_title == "Issue 1"
        assert ComicMetadata(series="Saga").display_title == "Saga"
