"""
Tests for the tool handlers, with the Gmail transport mocked out.
"""

import base64
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from gmail_tools.errors import AttachmentNotFound, InvalidAddress, NoAttachmentData
from gmail_tools.mime.encoding import decode_raw, encode_raw
from gmail_tools.models.gmail import ListedMessage
from gmail_tools.services.gmail import GmailTransport
from gmail_tools.tools import email_send as email_send_module
from gmail_tools.tools.email_attachment_download import email_attachment_download
from gmail_tools.tools.email_draft import email_draft
from gmail_tools.tools.email_get import decode_message, email_get
from gmail_tools.tools.email_list import email_list
from gmail_tools.tools.email_send import email_send


def b64(text: str) -> str:
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode().rstrip("=")


@pytest.fixture
def transport():
    return MagicMock(spec=GmailTransport)


def send_args(**overrides):
    args = {
        "access_token": "token",
        "to": ["alice@example.com"],
        "subject": "Quarterly report",
        "body": "Numbers attached.",
    }
    args.update(overrides)
    return args


FULL_MESSAGE = {
    "id": "msg-1",
    "threadId": "thread-1",
    "payload": {
        "mimeType": "multipart/mixed",
        "headers": [
            {"name": "Subject", "value": "Report"},
            {"name": "From", "value": "Bob <bob@example.com>"},
            {"name": "To", "value": "alice@example.com"},
            {"name": "Date", "value": "Mon, 1 Jan 2024 10:00:00 +0000"},
        ],
        "parts": [
            {
                "mimeType": "multipart/alternative",
                "parts": [
                    {"mimeType": "text/plain", "body": {"data": b64("Hi Alice")}},
                    {"mimeType": "text/html", "body": {"data": b64("<p>Hi Alice</p>")}},
                ],
            },
            {
                "mimeType": "application/pdf",
                "filename": "report.pdf",
                "body": {"attachmentId": "att-1", "size": 2048},
            },
        ],
    },
}


class TestSendEmail:
    def test_sends_encoded_message(self, transport):
        transport.send_message.return_value = {"id": "sent-1", "threadId": "thread-9"}

        result = email_send(send_args(threadId="thread-9"), transport=transport)

        raw, = transport.send_message.call_args.args
        assert transport.send_message.call_args.kwargs == {}
        assert b"thread-9" not in decode_raw(raw)
        assert b"Subject: Quarterly report\r\n" in decode_raw(raw)
        assert result["isError"] is False
        assert result["content"][0]["text"] == "Email sent successfully with ID: sent-1"

    def test_invalid_address_never_reaches_transport(self, transport, monkeypatch):
        factory = MagicMock()
        monkeypatch.setattr(email_send_module, "get_gmail_transport", factory)

        with pytest.raises(InvalidAddress):
            email_send(send_args(to=["bad-address"]))

        factory.assert_not_called()

        with pytest.raises(InvalidAddress):
            email_send(send_args(to=["bad-address"]), transport=transport)

        transport.send_message.assert_not_called()

    def test_missing_attachment_never_reaches_transport(self, transport, tmp_path):
        missing = str(tmp_path / "missing.pdf")

        with pytest.raises(AttachmentNotFound):
            email_send(send_args(attachments=[missing]), transport=transport)

        transport.send_message.assert_not_called()

    def test_unknown_mime_type_is_rejected(self, transport):
        with pytest.raises(ValidationError):
            email_send(send_args(mimeType="application/json"), transport=transport)

    def test_access_token_is_required(self, transport):
        args = send_args()
        del args["access_token"]

        with pytest.raises(ValidationError):
            email_send(args, transport=transport)


class TestDraftEmail:
    def test_creates_draft_in_thread(self, transport):
        transport.create_draft.return_value = {"id": "draft-1"}

        result = email_draft(
            send_args(threadId="thread-1", inReplyTo="<orig@example.com>"),
            transport=transport,
        )

        raw, = transport.create_draft.call_args.args
        assert transport.create_draft.call_args.kwargs == {"thread_id": "thread-1"}
        assert b"In-Reply-To: <orig@example.com>\r\n" in decode_raw(raw)
        assert result["content"][0]["text"] == "Email draft created successfully with ID: draft-1"

    def test_draft_with_attachment(self, transport, tmp_path):
        notes = tmp_path / "notes.txt"
        notes.write_text("remember the milk")
        transport.create_draft.return_value = {"id": "draft-2"}

        email_draft(send_args(attachments=[str(notes)]), transport=transport)

        raw, = transport.create_draft.call_args.args
        assert b'filename="notes.txt"' in decode_raw(raw)


class TestReadEmail:
    def test_decode_message(self):
        email = decode_message(FULL_MESSAGE)

        assert email.subject == "Report"
        assert email.sender == "Bob <bob@example.com>"
        assert email.content.text == "Hi Alice"
        assert email.content.html == "<p>Hi Alice</p>"
        assert [a.filename for a in email.attachments] == ["report.pdf"]

    def test_read_email_summary(self, transport):
        transport.get_message.return_value = FULL_MESSAGE

        result = email_get({"access_token": "token", "messageId": "msg-1"}, transport=transport)

        transport.get_message.assert_called_once_with("msg-1")
        text = result["content"][0]["text"]
        assert text.startswith("Thread ID: thread-1\nSubject: Report\nFrom: Bob <bob@example.com>\n")
        assert "Hi Alice" in text
        assert "[Note:" not in text
        assert "Attachments (1):\n- report.pdf (application/pdf, 2 KB, ID: att-1)" in text

        structured = result["structuredContent"]
        assert structured["threadId"] == "thread-1"
        assert structured["from"] == "Bob <bob@example.com>"
        assert structured["attachments"][0]["mimeType"] == "application/pdf"

    def test_html_only_message_gets_note(self, transport):
        transport.get_message.return_value = {
            "id": "msg-2",
            "payload": {"mimeType": "text/html", "body": {"data": b64("<p>Only HTML</p>")}},
        }

        result = email_get({"access_token": "token", "messageId": "msg-2"}, transport=transport)

        text = result["content"][0]["text"]
        assert "[Note: This email is HTML-formatted. Plain text version not available.]" in text
        assert "<p>Only HTML</p>" in text
        assert "Attachments" not in text

    def test_message_without_payload(self, transport):
        transport.get_message.return_value = {"id": "msg-3"}

        result = email_get({"access_token": "token", "messageId": "msg-3"}, transport=transport)

        assert result["structuredContent"]["content"] == {"text": "", "html": ""}


class TestListEmails:
    def test_lists_with_default_max_results(self, transport):
        transport.list_messages.return_value = [
            ListedMessage(id="m1", threadId="t1"),
            ListedMessage(id="m2", threadId="t1"),
        ]

        result = email_list({"access_token": "token", "query": "from:bob@example.com"}, transport=transport)

        transport.list_messages.assert_called_once_with("from:bob@example.com", 10)
        assert result["structuredContent"] == [
            {"id": "m1", "threadId": "t1"},
            {"id": "m2", "threadId": "t1"},
        ]

    def test_explicit_max_results(self, transport):
        transport.list_messages.return_value = []

        result = email_list(
            {"access_token": "token", "query": "is:unread", "maxResults": 3}, transport=transport
        )

        transport.list_messages.assert_called_once_with("is:unread", 3)
        assert result["content"][0]["text"] == "[]"


class TestDownloadAttachment:
    def test_returns_decoded_content(self, transport):
        transport.get_attachment.return_value = {"data": encode_raw(b"hello world"), "size": 11}

        result = email_attachment_download(
            {"access_token": "token", "messageId": "msg-1", "attachmentId": "att-1"},
            transport=transport,
        )

        transport.get_attachment.assert_called_once_with("msg-1", "att-1")
        assert result["content"][0]["text"] == "hello world"
        assert result["structuredContent"]["size"] == 11
        assert result["structuredContent"]["savedTo"] is None

    def test_saves_to_path(self, transport, tmp_path):
        payload = bytes(range(256))
        transport.get_attachment.return_value = {"data": encode_raw(payload), "size": 256}
        target = tmp_path / "download.bin"

        result = email_attachment_download(
            {
                "access_token": "token",
                "messageId": "msg-1",
                "attachmentId": "att-1",
                "savePath": str(target),
            },
            transport=transport,
        )

        assert target.read_bytes() == payload
        assert result["structuredContent"]["savedTo"] == str(target)

    @pytest.mark.parametrize("response", [{}, {"data": ""}, {"data": None, "size": 0}])
    def test_empty_payload(self, transport, response):
        transport.get_attachment.return_value = response

        with pytest.raises(NoAttachmentData) as exc_info:
            email_attachment_download(
                {"access_token": "token", "messageId": "msg-1", "attachmentId": "att-9"},
                transport=transport,
            )

        assert exc_info.value.attachment_id == "att-9"
