import logging
import sys
from typing import Optional

logger = logging.getLogger("gmail_tools")

formatter = logging.Formatter(
    fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

stream_handler = logging.StreamHandler(sys.stdout)
stream_handler.setFormatter(formatter)

logger.addHandler(stream_handler)
logger.setLevel(logging.INFO)


class LogSink:
    """
    Append-only log file attached to the package logger for the lifetime of the server.
    """

    def __init__(self, path: str):
        self.path = path
        self._handler: Optional[logging.FileHandler] = None

    @property
    def is_open(self) -> bool:
        return self._handler is not None

    def open(self) -> None:
        if self._handler is not None:
            return

        handler = logging.FileHandler(self.path, mode="a", encoding="utf-8")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        self._handler = handler

    def append(self, msg: str) -> None:
        if self._handler is None:
            raise RuntimeError(f"Log sink {self.path} is not open")
        logger.info(msg)

    def close(self) -> None:
        if self._handler is None:
            return

        logger.removeHandler(self._handler)
        self._handler.close()
        self._handler = None
