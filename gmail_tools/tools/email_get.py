from typing import Any, Dict, List, Optional

from gmail_tools.mime.decoder import collect_attachments, extract_content
from gmail_tools.models.gmail import EmailAttachment, EmailMessage, MessagePart
from gmail_tools.models.request import ReadEmailRequest
from gmail_tools.services.gmail import GmailTransport, get_gmail_transport
from gmail_tools.tools.result import text_result


HTML_ONLY_NOTE = (
    "[Note: This email is HTML-formatted. Plain text version not available.]\n\n"
)


def _format_attachments(attachments: List[EmailAttachment]) -> str:
    if not attachments:
        return ""

    lines = [
        f"- {a.filename} ({a.mime_type}, {round(a.size / 1024)} KB, ID: {a.id})"
        for a in attachments
    ]
    return f"\n\nAttachments ({len(attachments)}):\n" + "\n".join(lines)


def format_message(email: EmailMessage) -> str:
    """
    Renders a decoded message as a readable header block followed by its body.
    """
    text, html = email.content.text, email.content.html
    note = HTML_ONLY_NOTE if not text and html else ""
    body = text or html or ""

    return (
        f"Thread ID: {email.thread_id}\n"
        f"Subject: {email.subject}\n"
        f"From: {email.sender}\n"
        f"To: {email.to}\n"
        f"Date: {email.date}\n\n"
        f"{note}{body}{_format_attachments(email.attachments)}"
    )


def decode_message(message: Dict[str, Any]) -> EmailMessage:
    """
    Decodes a Gmail API message in 'full' format into headers, readable content and attachments.
    """
    payload = MessagePart.model_validate(message.get("payload") or {})

    return EmailMessage(
        id=message.get("id", ""),
        thread_id=message.get("threadId", ""),
        subject=payload.header("subject"),
        sender=payload.header("from"),
        to=payload.header("to"),
        date=payload.header("date"),
        content=extract_content(payload),
        attachments=collect_attachments(payload),
    )


def email_get(args: Dict[str, Any], transport: Optional[GmailTransport] = None):
    """
    Retrieves a single email and decodes its body and attachment list.
    """
    request = ReadEmailRequest.model_validate(args)

    transport = transport or get_gmail_transport(request.access_token)
    message = transport.get_message(request.message_id)
    email = decode_message(message)

    return text_result(format_message(email), email.model_dump(by_alias=True))
