from typing import Any, Dict, Optional


def text_result(text: str, structured: Optional[Any] = None) -> Dict[str, Any]:
    """
    Wraps a tool's output in the content envelope returned to the caller.
    """
    result: Dict[str, Any] = {
        "content": [{"type": "text", "text": text}],
        "isError": False,
    }
    if structured is not None:
        result["structuredContent"] = structured
    return result


def error_result(error: Exception) -> Dict[str, Any]:
    return {
        "content": [{"type": "text", "text": f"Error: {error}"}],
        "isError": True,
    }
