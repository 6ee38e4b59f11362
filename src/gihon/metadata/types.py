# ABOUTME: Core metadata data structure for comic archives.
# ABOUTME: ComicMetadata is what the archive reader produces and metadata.json stores.

from dataclasses import dataclass


@dataclass
class ComicMetadata:
    """Descriptive metadata for a single comic archive.

    A flat record with no cross-field rules. Every field is free text and
    defaults to an empty string when the source descriptor omits it; the year
    stays a string because real descriptors carry values like "1989?" or "".
    """

    title: str = ""
    series: str = ""
    writer: str = ""
    summary: str = ""
    year: str = ""

    @property
    def display_title(self) -> str:
        """Title for display, falling back to the series name."""
        return self.title or self.series

    @property
    def is_empty(self) -> bool:
        """Whether every field is blank."""
        return not any((self.title, self.series, self.writer, self.summary, self.year))
