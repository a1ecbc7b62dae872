from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    MALFORMED_RESPONSE = "malformed_response"


class CatalogError(Exception):
    """Base class for failures raised while fetching the catalog."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TransportError(CatalogError):
    kind = ErrorKind.TRANSPORT


class HTTPStatusError(CatalogError):
    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        super().__init__(message or f"HTTP error! status: {status_code}")
        self.status_code = status_code


class MalformedResponseError(CatalogError):
    kind = ErrorKind.MALFORMED_RESPONSE
