from typing import Optional

from gmail_tools.mime.body import assemble_body, assemble_with_attachments
from gmail_tools.mime.encoding import CRLF, encode_raw, serialize_lines
from gmail_tools.mime.files import LocalFileStore, local_file_store
from gmail_tools.mime.headers import build_headers
from gmail_tools.models.request import MessageSpec


def build_raw_message(
    spec: MessageSpec,
    file_store: LocalFileStore = local_file_store,
    boundary: Optional[str] = None,
    strict: Optional[bool] = None,
) -> bytes:
    """
    Builds the complete RFC 5322 message for a send or draft request.

    Recipients are validated while the headers are built, so an invalid address fails
    before any body content or attachment is touched.
    """
    headers = build_headers(spec)

    if spec.has_attachments:
        body = assemble_with_attachments(spec, file_store=file_store)
        return (serialize_lines(headers) + CRLF).encode("utf-8") + body

    lines = headers + assemble_body(spec, boundary=boundary, strict=strict)
    return serialize_lines(lines).encode("utf-8")


def encode_message(
    spec: MessageSpec,
    file_store: LocalFileStore = local_file_store,
    boundary: Optional[str] = None,
    strict: Optional[bool] = None,
) -> str:
    """Builds the message and returns it in the base64url form the Gmail API takes as 'raw'."""
    return encode_raw(
        build_raw_message(spec, file_store=file_store, boundary=boundary, strict=strict)
    )
