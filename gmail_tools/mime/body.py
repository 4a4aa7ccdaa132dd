import mimetypes
import re
import secrets
from email import policy
from email.message import MIMEPart
from typing import List, Optional, Tuple

from gmail_tools.config import CFG
from gmail_tools.errors import AttachmentNotFound
from gmail_tools.mime.encoding import CRLF
from gmail_tools.mime.files import LocalFileStore, local_file_store
from gmail_tools.models.request import MessageSpec
from gmail_tools.utils.logger import logger


TEXT_PLAIN = "text/plain"
TEXT_HTML = "text/html"
MULTIPART_ALTERNATIVE = "multipart/alternative"
DEFAULT_ATTACHMENT_TYPE = "application/octet-stream"
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def resolve_mime_type(spec: MessageSpec, strict: Optional[bool] = None) -> str:
    """
    Works out the content type of a message body without attachments.

    An htmlBody combined with anything other than an explicit text/plain is upgraded to
    multipart/alternative so both renderings are sent. With strict=True an explicit
    text/html is kept as a single HTML part instead.
    """
    if strict is None:
        strict = CFG.strict_mime_type

    mime_type = spec.mime_type or TEXT_PLAIN
    if spec.html_body and mime_type != TEXT_PLAIN:
        if not (strict and mime_type == TEXT_HTML):
            mime_type = MULTIPART_ALTERNATIVE
    return mime_type


def generate_boundary(prefix: Optional[str] = None) -> str:
    """Random boundary token, unique per message."""
    return f"{prefix if prefix is not None else CFG.boundary_prefix}{secrets.token_hex(16)}"


def _text_part(content_type: str, content: str) -> List[str]:
    return [
        f"Content-Type: {content_type}; charset=UTF-8",
        "Content-Transfer-Encoding: 7bit",
        "",
        LINE_BREAK.sub(CRLF, content),
    ]


def assemble_body(
    spec: MessageSpec,
    boundary: Optional[str] = None,
    strict: Optional[bool] = None,
) -> List[str]:
    """
    Builds the Content-Type header and body lines of a message without attachments.
    """
    mime_type = resolve_mime_type(spec, strict=strict)

    if mime_type == MULTIPART_ALTERNATIVE:
        boundary = boundary or generate_boundary()
        lines = [
            f'Content-Type: {MULTIPART_ALTERNATIVE}; boundary="{boundary}"',
            "",
            f"--{boundary}",
        ]
        lines += _text_part(TEXT_PLAIN, spec.body)
        lines += ["", f"--{boundary}"]
        lines += _text_part(TEXT_HTML, spec.html_body or spec.body)
        lines += ["", f"--{boundary}--"]
        return lines

    if mime_type == TEXT_HTML:
        return _text_part(TEXT_HTML, spec.html_body or spec.body)

    return _text_part(TEXT_PLAIN, spec.body)


def guess_attachment_type(filename: str) -> Tuple[str, str]:
    """
    Sniffs the content type of an attachment from its file name.
    """
    mime_type, _ = mimetypes.guess_type(filename)
    maintype, _, subtype = (mime_type or DEFAULT_ATTACHMENT_TYPE).partition("/")
    return maintype, subtype


def assemble_with_attachments(
    spec: MessageSpec, file_store: LocalFileStore = local_file_store
) -> bytes:
    """
    Builds a multipart/mixed body holding the text (and HTML) content followed by one part per attachment.

    Every attachment path is checked before any part is built, so a missing file never
    leaves a half-assembled message behind.
    """
    paths = list(spec.attachments or [])
    for path in paths:
        if not file_store.exists(path):
            raise AttachmentNotFound(path)

    container = MIMEPart(policy=policy.SMTP)
    container.set_content(spec.body)
    if spec.html_body:
        container.add_alternative(spec.html_body, subtype="html")

    for path in paths:
        filename = file_store.base_name(path)
        maintype, subtype = guess_attachment_type(filename)
        data = file_store.read_bytes(path)

        logger.info(f"Attaching {filename} ({maintype}/{subtype}, {len(data)} bytes)")
        container.add_attachment(
            data, maintype=maintype, subtype=subtype, filename=filename
        )

    return container.as_bytes(policy=policy.SMTP)
