from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Type

from pydantic import BaseModel

from gmail_tools.errors import ToolNotFound
from gmail_tools.models.request import (
    DownloadAttachmentRequest,
    ListEmailsRequest,
    ReadEmailRequest,
    SendEmailRequest,
)
from gmail_tools.tools.email_attachment_download import email_attachment_download
from gmail_tools.tools.email_draft import email_draft
from gmail_tools.tools.email_get import email_get
from gmail_tools.tools.email_list import email_list
from gmail_tools.tools.email_send import email_send


@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    schema: Type[BaseModel]
    handler: Callable[[Dict[str, Any]], Dict[str, Any]]

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.schema.model_json_schema(by_alias=True),
        }


TOOLS: List[Tool] = [
    Tool(
        name="send_email",
        description="Sends a new email",
        schema=SendEmailRequest,
        handler=email_send,
    ),
    Tool(
        name="draft_email",
        description="Draft a new email",
        schema=SendEmailRequest,
        handler=email_draft,
    ),
    Tool(
        name="read_email",
        description="Retrieves the content of a specific email",
        schema=ReadEmailRequest,
        handler=email_get,
    ),
    Tool(
        name="list_emails",
        description="Lists emails while filtering using Gmail search syntax",
        schema=ListEmailsRequest,
        handler=email_list,
    ),
    Tool(
        name="download_attachment",
        description="Downloads an email attachment, optionally saving it to a local path",
        schema=DownloadAttachmentRequest,
        handler=email_attachment_download,
    ),
]


def find_tool(name: str) -> Tool:
    tool = next((t for t in TOOLS if t.name == name), None)
    if tool is None:
        raise ToolNotFound(name)
    return tool
