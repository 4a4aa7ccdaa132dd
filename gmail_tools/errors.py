class GmailToolError(Exception):
    """Base class for failures reported back to the tool caller."""

    pass


class InvalidAddress(GmailToolError):
    """Raised when a recipient address does not look like an email address."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Recipient email address is invalid: {address}")


class AttachmentNotFound(GmailToolError):
    """Raised when a file requested as an attachment does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File does not exist: {path}")


class TransportFailure(GmailToolError):
    """Raised when the Gmail API answers a request with a non-success status."""

    def __init__(self, operation: str, status_text: str):
        self.operation = operation
        self.status_text = status_text
        super().__init__(f"Failed to {operation}: {status_text}")


class NoAttachmentData(GmailToolError):
    """Raised when an attachment download returns an empty payload."""

    def __init__(self, message_id: str, attachment_id: str):
        self.message_id = message_id
        self.attachment_id = attachment_id
        super().__init__(
            f"No attachment data received for attachment {attachment_id} of message {message_id}"
        )


class MalformedStructure(GmailToolError):
    """Raised when a MIME part tree cannot be decoded."""

    pass


class ToolNotFound(GmailToolError):
    """Raised when a tool call names a tool that is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tool not found: {name}")
