# ABOUTME: Tolerant ComicInfo.xml reader based on first-occurrence tag scanning.
# ABOUTME: Not a structural XML parse, so malformed or partial descriptors still yield fields.

from gihon.metadata.types import ComicMetadata

# Descriptor tag -> ComicMetadata field
COMIC_INFO_TAGS: dict[str, str] = {
    "Title": "title",
    "Series": "series",
    "Writer": "writer",
    "Summary": "summary",
    "Year": "year",
}


def _extract_tag_value(contents: str, tag: str) -> str:
    """Return the trimmed text between the first <tag> and the first </tag>.

    Both markers are located independently anywhere in the document. A missing
    marker, or a closing marker that precedes the opening one, yields "".
    """
    start_tag = f"<{tag}>"
    end_tag = f"</{tag}>"

    start = contents.find(start_tag)
    end = contents.find(end_tag)
    if start == -1 or end == -1:
        return ""

    start += len(start_tag)
    if end < start:
        return ""
    return contents[start:end].strip()


def parse_comic_info(contents: str) -> ComicMetadata:
    """Build a ComicMetadata from the text of a ComicInfo.xml descriptor.

    Args:
        contents: Decoded descriptor text.

    Returns:
        ComicMetadata with trimmed values for present tags and "" for the rest.
    """
    values = {
        field_name: _extract_tag_value(contents, tag)
        for tag, field_name in COMIC_INFO_TAGS.items()
    }
    return ComicMetadata(**values)
