import json

from fastapi import APIRouter
from pydantic import ValidationError
from gmail_tools.errors import GmailToolError
from gmail_tools.models.request import ToolCall
from gmail_tools.tools.registry import TOOLS, find_tool
from gmail_tools.tools.result import error_result
from gmail_tools.utils.logger import logger


router = APIRouter()

# Arguments carry the caller's OAuth token, which never reaches the log
REDACTED_ARGUMENTS = {"access_token"}


def _loggable(call: ToolCall) -> str:
    arguments = {
        k: ("***" if k in REDACTED_ARGUMENTS else v) for k, v in call.arguments.items()
    }
    return json.dumps({"name": call.name, "arguments": arguments}, default=str)


@router.get("/tools")
async def list_tools():
    """
    Lists the available tools together with the JSON schema of their arguments.
    """
    return {"tools": [tool.describe() for tool in TOOLS]}


@router.post("/tools/call")
def call_tool(call: ToolCall):
    """
    Runs a single tool. Failures are returned as an error result rather than an HTTP error.
    """
    logger.info(f"Request: {_loggable(call)}")

    try:
        tool = find_tool(call.name)
        return tool.handler(call.arguments)

    except (GmailToolError, ValidationError) as e:
        logger.error(f"Error: {e}")
        return error_result(e)

    except Exception as e:
        logger.exception(f"Unexpected error running tool {call.name}: {e}")
        return error_result(e)
