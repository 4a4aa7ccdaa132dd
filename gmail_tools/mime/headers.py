import base64
import re
from typing import Iterable, List, Optional

from gmail_tools.errors import InvalidAddress
from gmail_tools.models.request import MessageSpec


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
NON_ASCII_PATTERN = re.compile(r"[^\x00-\x7F]")

# The Gmail API replaces this with the authenticated account
SENDER_PLACEHOLDER = "me"


def is_valid_address(address: str) -> bool:
    return bool(EMAIL_PATTERN.match(address))


def validate_addresses(addresses: Optional[Iterable[str]]) -> None:
    """
    Raises InvalidAddress for the first address that does not look like local-part@domain.
    """
    for address in addresses or []:
        if not is_valid_address(address):
            raise InvalidAddress(address)


def validate_recipients(spec: MessageSpec) -> None:
    for addresses in (spec.to, spec.cc, spec.bcc):
        validate_addresses(addresses)


def encode_header_word(text: str) -> str:
    """
    Encodes a header value as a single RFC 2047 encoded word when it contains non-ASCII characters.
    """
    if NON_ASCII_PATTERN.search(text):
        encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
        return f"=?UTF-8?B?{encoded}?="
    return text


def build_headers(spec: MessageSpec) -> List[str]:
    """
    Builds the top-level header lines of an outbound message, validating every recipient first.
    """
    validate_recipients(spec)

    headers = [
        f"From: {SENDER_PLACEHOLDER}",
        f"To: {', '.join(spec.to)}",
    ]
    if spec.cc:
        headers.append(f"Cc: {', '.join(spec.cc)}")
    if spec.bcc:
        headers.append(f"Bcc: {', '.join(spec.bcc)}")

    headers.append(f"Subject: {encode_header_word(spec.subject)}")

    # Only the immediate parent is referenced, earlier thread ancestors are not chained
    if spec.in_reply_to:
        headers.append(f"In-Reply-To: {spec.in_reply_to}")
        headers.append(f"References: {spec.in_reply_to}")

    headers.append("MIME-Version: 1.0")
    return headers
