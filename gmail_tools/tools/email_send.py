from typing import Any, Dict, Optional

from gmail_tools.mime.message import encode_message
from gmail_tools.models.request import SendEmailRequest
from gmail_tools.services.gmail import GmailTransport, get_gmail_transport
from gmail_tools.tools.result import text_result


def email_send(args: Dict[str, Any], transport: Optional[GmailTransport] = None):
    """
    Sends a new email. Replies are threaded by their In-Reply-To and References headers.
    """
    request = SendEmailRequest.model_validate(args)

    # Encoding fails on bad recipients or missing attachments before Gmail is contacted
    raw = encode_message(request)

    transport = transport or get_gmail_transport(request.access_token)
    sent = transport.send_message(raw)

    return text_result(f"Email sent successfully with ID: {sent.get('id')}", sent)
