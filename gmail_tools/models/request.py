from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Literal, Optional


MimeType = Literal["text/plain", "text/html", "multipart/alternative"]


class MessageSpec(BaseModel):
    """Represents an outbound message to be sent or saved as a draft."""

    model_config = ConfigDict(populate_by_name=True)

    to: List[str] = Field(..., description="List of recipient email addresses")
    subject: str = Field(..., description="Email subject")
    body: str = Field(
        ...,
        description="Email body content (used for text/plain or when htmlBody not provided)",
    )
    html_body: Optional[str] = Field(
        None, alias="htmlBody", description="HTML version of the email body"
    )
    mime_type: MimeType = Field(
        "text/plain", alias="mimeType", description="Email content type"
    )
    cc: Optional[List[str]] = Field(None, description="List of CC recipients")
    bcc: Optional[List[str]] = Field(None, description="List of BCC recipients")
    thread_id: Optional[str] = Field(
        None, alias="threadId", description="Thread ID to reply to"
    )
    in_reply_to: Optional[str] = Field(
        None,
        alias="inReplyTo",
        pattern=r"^[^\r\n]*$",
        description="Message ID being replied to",
    )
    attachments: Optional[List[str]] = Field(
        None, description="List of file paths to attach to the email"
    )

    @property
    def has_attachments(self) -> bool:
        return bool(self.attachments)


class AuthorizedRequest(BaseModel):
    """Base for tool arguments that carry the caller's OAuth2 access token."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(..., description="OAuth2 access token")


class SendEmailRequest(MessageSpec, AuthorizedRequest):
    """Arguments of the send_email and draft_email tools."""

    pass


class ReadEmailRequest(AuthorizedRequest):
    """Arguments of the read_email tool."""

    message_id: str = Field(
        ..., alias="messageId", description="ID of the email message to retrieve"
    )


class ListEmailsRequest(AuthorizedRequest):
    """Arguments of the list_emails tool."""

    query: str = Field(
        ..., description="Gmail search query (e.g., 'from:example@gmail.com')"
    )
    max_results: Optional[int] = Field(
        None, alias="maxResults", description="Maximum number of results to return"
    )


class DownloadAttachmentRequest(AuthorizedRequest):
    """Arguments of the download_attachment tool."""

    message_id: str = Field(
        ...,
        alias="messageId",
        description="ID of the email message containing the attachment",
    )
    attachment_id: str = Field(
        ..., alias="attachmentId", description="ID of the attachment to download"
    )
    save_path: Optional[str] = Field(
        None,
        alias="savePath",
        description="Optional local path where the decoded attachment is written",
    )


class ToolCall(BaseModel):
    """Represents a request to run a single tool."""

    name: str
    arguments: Dict[str, Any] = {}
