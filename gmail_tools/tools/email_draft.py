from typing import Any, Dict, Optional

from gmail_tools.mime.message import encode_message
from gmail_tools.models.request import SendEmailRequest
from gmail_tools.services.gmail import GmailTransport, get_gmail_transport
from gmail_tools.tools.result import text_result


def email_draft(args: Dict[str, Any], transport: Optional[GmailTransport] = None):
    """
    Saves a new email as a draft. The threadId is attached to the draft message, not its headers.
    """
    request = SendEmailRequest.model_validate(args)
    raw = encode_message(request)

    transport = transport or get_gmail_transport(request.access_token)
    draft = transport.create_draft(raw, thread_id=request.thread_id)

    return text_result(
        f"Email draft created successfully with ID: {draft.get('id')}", draft
    )
