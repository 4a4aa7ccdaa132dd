from pathlib import Path
from typing import Any, Dict, Optional

from gmail_tools.errors import NoAttachmentData
from gmail_tools.mime.encoding import decode_raw
from gmail_tools.models.request import DownloadAttachmentRequest
from gmail_tools.services.gmail import GmailTransport, get_gmail_transport
from gmail_tools.tools.result import text_result
from gmail_tools.utils.logger import logger


def email_attachment_download(
    args: Dict[str, Any], transport: Optional[GmailTransport] = None
):
    """
    Downloads an attachment, returning its decoded content and optionally writing it to disk.
    """
    request = DownloadAttachmentRequest.model_validate(args)

    transport = transport or get_gmail_transport(request.access_token)
    response = transport.get_attachment(request.message_id, request.attachment_id)

    data = response.get("data")
    if not data:
        raise NoAttachmentData(request.message_id, request.attachment_id)

    content = decode_raw(data)
    if request.save_path:
        Path(request.save_path).write_bytes(content)
        logger.info(
            f"Saved attachment {request.attachment_id} ({len(content)} bytes) to {request.save_path}"
        )

    text = content.decode("utf-8", errors="replace")
    structured = {
        "messageId": request.message_id,
        "attachmentId": request.attachment_id,
        "size": response.get("size", len(content)),
        "savedTo": request.save_path,
        "data": text,
    }
    return text_result(text, structured)
