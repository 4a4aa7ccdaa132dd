from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from gmail_tools.models.gmail import ListedMessage
from gmail_tools.utils.logger import logger
from gmail_tools.config import CFG
from gmail_tools.errors import TransportFailure
from typing import Any, Dict, List, Optional


# Scopes needed for reading, drafting and sending
SCOPES = [
    "https://www.googleapis.com/auth/gmail.readonly",
    "https://www.googleapis.com/auth/gmail.send",
    "https://www.googleapis.com/auth/gmail.compose",
]

#######################
### Setup Functions ###
#######################


def get_gmail_service(access_token: str) -> build:
    """
    Builds the Gmail API service client from an OAuth2 access token supplied by the caller.
    """
    try:
        credentials = Credentials(token=access_token, scopes=SCOPES)
        return build("gmail", "v1", credentials=credentials, cache_discovery=False)

    except Exception as e:
        logger.error(f"Error building Gmail service: {e}")
        raise


def _status_text(error: HttpError) -> str:
    status = getattr(error.resp, "status", None)
    reason = getattr(error, "reason", "") or str(error)
    return f"{status} {reason}" if status else reason


class GmailTransport:
    """
    Thin wrapper over the Gmail API calls the tools need. Non-success responses raise TransportFailure.
    """

    def __init__(self, service: Any, user_id: Optional[str] = None):
        self.service = service
        self.user_id = user_id or CFG.user_id

    @classmethod
    def from_access_token(cls, access_token: str) -> "GmailTransport":
        return cls(get_gmail_service(access_token))

    def _execute(self, operation: str, request) -> Dict[str, Any]:
        try:
            return request.execute()
        except HttpError as error:
            status_text = _status_text(error)
            logger.error(f"Gmail API error while trying to {operation}: {status_text}")
            raise TransportFailure(operation, status_text) from error

    #####################
    ### Email Sending ###
    #####################

    def send_message(self, raw: str) -> Dict[str, Any]:
        request = (
            self.service.users()
            .messages()
            .send(userId=self.user_id, body={"raw": raw})
        )
        sent = self._execute("send email", request)
        logger.info(f"Email sent successfully with ID: {sent.get('id')}")
        return sent

    def create_draft(self, raw: str, thread_id: Optional[str] = None) -> Dict[str, Any]:
        message: Dict[str, Any] = {"raw": raw}
        if thread_id:
            message["threadId"] = thread_id

        request = (
            self.service.users()
            .drafts()
            .create(userId=self.user_id, body={"message": message})
        )
        draft = self._execute("create draft", request)
        logger.info(f"Email draft created successfully with ID: {draft.get('id')}")
        return draft

    #####################
    ### Email Reading ###
    #####################

    def get_message(self, message_id: str) -> Dict[str, Any]:
        request = (
            self.service.users()
            .messages()
            .get(userId=self.user_id, id=message_id, format="full")
        )
        return self._execute("retrieve email", request)

    def get_attachment(self, message_id: str, attachment_id: str) -> Dict[str, Any]:
        request = (
            self.service.users()
            .messages()
            .attachments()
            .get(userId=self.user_id, messageId=message_id, id=attachment_id)
        )
        return self._execute("download attachment", request)

    def list_messages(self, query: str, max_results: int) -> List[ListedMessage]:
        request = (
            self.service.users()
            .messages()
            .list(userId=self.user_id, q=query, maxResults=max_results)
        )
        response = self._execute("retrieve emails", request)
        return [ListedMessage.model_validate(m) for m in response.get("messages", [])]


def get_gmail_transport(access_token: str) -> GmailTransport:
    return GmailTransport.from_access_token(access_token)
