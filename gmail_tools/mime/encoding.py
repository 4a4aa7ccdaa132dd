import base64
import binascii
from typing import Iterable, Union

from gmail_tools.errors import MalformedStructure


CRLF = "\r\n"


def serialize_lines(lines: Iterable[str]) -> str:
    """
    Joins header and body lines into a raw message with CRLF line endings.
    """
    return CRLF.join(lines)


def encode_raw(raw: Union[str, bytes]) -> str:
    """
    Encodes a raw RFC 5322 message as unpadded URL-safe base64, the form the Gmail API expects.
    """
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_raw(encoded: Union[str, bytes]) -> bytes:
    """
    Inverse of encode_raw. Accepts the standard alphabet as well and restores missing padding.
    """
    if isinstance(encoded, bytes):
        try:
            encoded = encoded.decode("ascii")
        except UnicodeDecodeError as e:
            raise MalformedStructure(f"Body data is not valid base64: {e}") from e

    encoded = encoded.strip().replace("+", "-").replace("/", "_").rstrip("=")
    padding = (-len(encoded)) % 4
    try:
        return base64.urlsafe_b64decode(encoded + "=" * padding)
    except (binascii.Error, ValueError) as e:
        raise MalformedStructure(f"Body data is not valid base64: {e}") from e


def decode_text(encoded: Union[str, bytes]) -> str:
    """Decodes a base64 part body to UTF-8 text."""
    return decode_raw(encoded).decode("utf-8", errors="replace")
