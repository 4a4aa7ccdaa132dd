from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class PartKind(str, Enum):
    CONTENT = "content"
    REFERENCE = "reference"
    BRANCH = "branch"
    EMPTY = "empty"


class PartHeader(BaseModel):
    """Represents a single header of a MIME part."""

    name: str
    value: str = ""


class PartBody(BaseModel):
    """Represents the body of a MIME part, either inlined or stored as an attachment."""

    model_config = ConfigDict(populate_by_name=True)

    data: Optional[str] = None
    attachment_id: Optional[str] = Field(None, alias="attachmentId")
    size: Optional[int] = None


class MessagePart(BaseModel):
    """Represents a node of the MIME part tree returned by the Gmail API 'full' format."""

    model_config = ConfigDict(populate_by_name=True)

    part_id: Optional[str] = Field(None, alias="partId")
    mime_type: Optional[str] = Field(None, alias="mimeType")
    filename: Optional[str] = None
    headers: List[PartHeader] = []
    body: Optional[PartBody] = None
    parts: Optional[List["MessagePart"]] = None

    @property
    def kind(self) -> PartKind:
        # Leaf roles win over children on malformed nodes, children are still walked
        if self.body is not None and self.body.attachment_id:
            return PartKind.REFERENCE
        if self.body is not None and self.body.data:
            return PartKind.CONTENT
        if self.parts:
            return PartKind.BRANCH
        return PartKind.EMPTY

    def header(self, name: str) -> str:
        """Case-insensitive header lookup, empty string when missing."""
        name = name.lower()
        return next((h.value for h in self.headers if h.name.lower() == name), "")


MessagePart.model_rebuild()


class EmailAttachment(BaseModel):
    """Represents an attachment referenced from a message, without its content."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    filename: str
    mime_type: str = Field("application/octet-stream", alias="mimeType")
    size: int = 0


class EmailContent(BaseModel):
    """Represents the readable contents of a message."""

    text: str = ""
    html: str = ""


class ListedMessage(BaseModel):
    """Represents a message reference returned by a mailbox listing."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    thread_id: Optional[str] = Field(None, alias="threadId")


class EmailMessage(BaseModel):
    """Represents a complete email message along with its decoded contents."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    thread_id: str = Field("", alias="threadId")
    subject: str = ""
    sender: str = Field("", alias="from")
    to: str = ""
    date: str = ""
    content: EmailContent
    attachments: List[EmailAttachment] = []
