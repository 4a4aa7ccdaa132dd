import json
from typing import Any, Dict, Optional

from gmail_tools.config import CFG
from gmail_tools.models.request import ListEmailsRequest
from gmail_tools.services.gmail import GmailTransport, get_gmail_transport
from gmail_tools.tools.result import text_result


def email_list(args: Dict[str, Any], transport: Optional[GmailTransport] = None):
    """
    Lists message and thread IDs matching a Gmail search query.
    """
    request = ListEmailsRequest.model_validate(args)

    transport = transport or get_gmail_transport(request.access_token)
    messages = transport.list_messages(
        request.query, request.max_results or CFG.default_max_results
    )

    structured = [m.model_dump(by_alias=True) for m in messages]
    return text_result(json.dumps(structured), structured)
