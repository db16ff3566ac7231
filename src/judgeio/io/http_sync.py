"""Synchronous HTTP byte cursor using requests."""

import requests
from typing import Optional

from ..core.errors import JudgeError
from .local import LocalByteCursor

HTTP_TIMEOUT = 60  # seconds


# Module-level session for connection pooling
_session = None


def _get_session():
    """Get or create the global requests session."""
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


class HTTPByteCursor:
    """Byte cursor over a remote file, downloaded once on construction."""

    def __init__(self, url: str):
        self.url = url
        self.content_length: Optional[int] = None
        self._session = _get_session()
        self._cursor = LocalByteCursor(self._fetch_content())

    def _fetch_content(self) -> bytes:
        """Download the entire body."""
        try:
            response = self._session.get(self.url, timeout=HTTP_TIMEOUT)
        except requests.RequestException as e:
            raise JudgeError.open_failure(self.url) from e
        if response.status_code >= 400:
            raise JudgeError.open_failure(f"{self.url} (status {response.status_code})")
        content = response.content
        self.content_length = len(content)
        return content

    @property
    def size(self) -> int:
        return self._cursor.size

    @property
    def bytes_consumed(self) -> int:
        return self._cursor.bytes_consumed

    def next_byte(self) -> int:
        return self._cursor.next_byte()

    def peek_is_eof(self) -> bool:
        return self._cursor.peek_is_eof()

    def push_back(self, byte: int) -> None:
        self._cursor.push_back(byte)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        # Session is shared, don't close it here
        self._cursor.close()


def open_http_cursor(url: str) -> HTTPByteCursor:
    """Create a synchronous HTTP byte cursor."""
    return HTTPByteCursor(url)
