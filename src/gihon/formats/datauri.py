# ABOUTME: Base64 data URI encoding for images crossing the library boundary.
# ABOUTME: Maps file extensions to image MIME types and back.

import base64
import binascii

from gihon.errors import SerializationError, UnsupportedFormatError

_MIME_BY_EXTENSION: dict[str, str] = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "webp": "image/webp",
}

# Cover files are only ever written as jpg or png
_EXTENSION_BY_MIME: dict[str, str] = {
    "image/jpeg": "jpg",
    "image/png": "png",
}


def mime_type_for_name(name: str) -> str:
    """Infer an image MIME type from a file or entry name.

    Anything that is not png or webp is treated as JPEG.
    """
    extension = name.rsplit(".", 1)[-1].lower() if "." in name else ""
    return _MIME_BY_EXTENSION.get(extension, "image/jpeg")


def extension_for_mime_type(mime_type: str) -> str:
    """Return the cover file extension for a MIME type.

    Raises:
        UnsupportedFormatError: If the type is not image/jpeg or image/png.
    """
    try:
        return _EXTENSION_BY_MIME[mime_type]
    except KeyError:
        raise UnsupportedFormatError(f"Unsupported image format: {mime_type}") from None


def encode_data_uri(data: bytes, mime_type: str) -> str:
    """Encode raw image bytes as a data:<mime>;base64,<payload> URI."""
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


def decode_data_uri(uri: str) -> tuple[str, bytes]:
    """Split a base64 data URI into its MIME type and decoded bytes.

    Raises:
        SerializationError: If the URI is not a base64 data URI.
    """
    header, sep, payload = uri.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise SerializationError("Invalid image data: not a base64 data URI")

    mime_type = header[len("data:"):-len(";base64")]
    try:
        data = base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise SerializationError(f"Invalid image data: {exc}") from exc
    return mime_type, data
