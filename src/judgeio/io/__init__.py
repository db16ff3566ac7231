"""I/O layer for judgeio - delivers a single-byte cursor to the reader."""

# Re-export these for import convenience
from .base import ByteCursor
from .local import LocalByteCursor, open_local_cursor
from .http_sync import HTTPByteCursor, open_http_cursor


def open_cursor(source):
    """Factory function to create the appropriate ByteCursor for a source."""
    if isinstance(source, (bytes, bytearray, memoryview)) or hasattr(source, 'read'):
        return open_local_cursor(source)

    source_str = str(source)
    if source_str.startswith(('http://', 'https://')):
        return open_http_cursor(source_str)
    else:
        return open_local_cursor(source)


__all__ = [
    "ByteCursor", "LocalByteCursor", "HTTPByteCursor",
    "open_cursor", "open_local_cursor", "open_http_cursor",
]
