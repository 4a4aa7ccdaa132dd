from typing import List, Optional

from gmail_tools.config import CFG
from gmail_tools.errors import MalformedStructure
from gmail_tools.mime.encoding import decode_text
from gmail_tools.models.gmail import EmailAttachment, EmailContent, MessagePart, PartKind


DEFAULT_ATTACHMENT_TYPE = "application/octet-stream"


def _check_depth(depth: int, max_depth: int) -> None:
    if depth > max_depth:
        raise MalformedStructure(
            f"MIME part tree is nested deeper than {max_depth} levels"
        )


def extract_content(part: MessagePart, max_depth: Optional[int] = None) -> EmailContent:
    """
    Recursively collects the plain text and HTML bodies of a MIME part tree.

    Leaves are visited in pre-order and their bodies concatenated, so a message with several
    text/plain parts yields all of them in order. Leaves of any other type are skipped.
    """
    content = EmailContent()
    _extract(part, content, 0, CFG.max_part_depth if max_depth is None else max_depth)
    return content


def _extract(part: MessagePart, content: EmailContent, depth: int, max_depth: int) -> None:
    _check_depth(depth, max_depth)

    if part.kind is PartKind.CONTENT:
        decoded = decode_text(part.body.data)
        if part.mime_type == "text/plain":
            content.text += decoded
        elif part.mime_type == "text/html":
            content.html += decoded

    for child in part.parts or []:
        _extract(child, content, depth + 1, max_depth)


def collect_attachments(
    part: MessagePart, max_depth: Optional[int] = None
) -> List[EmailAttachment]:
    """
    Flattens every attachment reference of a MIME part tree, in the order they are found.
    """
    attachments: List[EmailAttachment] = []
    _collect(part, attachments, 0, CFG.max_part_depth if max_depth is None else max_depth)
    return attachments


def _collect(
    part: MessagePart, attachments: List[EmailAttachment], depth: int, max_depth: int
) -> None:
    _check_depth(depth, max_depth)

    if part.kind is PartKind.REFERENCE:
        attachment_id = part.body.attachment_id
        attachments.append(
            EmailAttachment(
                id=attachment_id,
                filename=part.filename or f"attachment-{attachment_id}",
                mime_type=part.mime_type or DEFAULT_ATTACHMENT_TYPE,
                size=part.body.size or 0,
            )
        )

    # Children are visited even when this node was itself an attachment
    for child in part.parts or []:
        _collect(child, attachments, depth + 1, max_depth)
