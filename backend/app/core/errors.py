"""Error Hierarchy — typed, classified exceptions for every rejected operation.

Invariants:
    - Every error has a code (str), a kind (ErrorKind) and an http_status
    - ErrorKind is closed: BAD_REQUEST, NOT_FOUND, INTERNAL_ERROR
    - to_response() always produces {"message": <str>} — nothing else leaks
    - Query-parameter errors carry fixed messages, one per parameter

Design Decisions:
    - Single hierarchy with NewsApiError base: one global handler translates all
      of them, route handlers never re-classify
    - Query errors subclass BadRequestError: callers that only care about
      the kind catch the base, tests assert on the specific message
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced to HTTP clients."""
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


class NewsApiError(Exception):
    """Base exception for all classified failures."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: ErrorKind,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class BadRequestError(NewsApiError):
    """Malformed or mistyped input."""
    def __init__(self, message: str = "Bad Request", code: str = "BAD_REQUEST"):
        super().__init__(message, code, ErrorKind.BAD_REQUEST, 400)


class InvalidOrderQueryError(BadRequestError):
    """`order` is not asc/desc."""
    def __init__(self, order: str):
        super().__init__("Invalid order Query", "INVALID_ORDER_QUERY")
        self.order = order


class InvalidSortByQueryError(BadRequestError):
    """`sort_by` is not a sortable column."""
    def __init__(self, sort_by: str):
        super().__init__("Invalid sort_by Query", "INVALID_SORT_BY_QUERY")
        self.sort_by = sort_by


class InvalidTopicQueryError(BadRequestError):
    """`topic` does not match any existing topic slug."""
    def __init__(self, topic: str):
        super().__init__("Invalid topic Query", "INVALID_TOPIC_QUERY")
        self.topic = topic


class NotFoundError(NewsApiError):
    """Referenced entity does not exist."""
    def __init__(
        self,
        resource_type: str | None = None,
        resource_id: object = None,
        message: str = "Not Found",
    ):
        super().__init__(message, "NOT_FOUND", ErrorKind.NOT_FOUND, 404)
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalError(NewsApiError):
    """Unexpected failure, not otherwise classified."""
    def __init__(
        self, message: str = "Internal Server Error", code: str = "INTERNAL_ERROR",
    ):
        super().__init__(message, code, ErrorKind.INTERNAL_ERROR, 500)


class DatabaseError(InternalError):
    """Database operation failed. `operation` is kept for logs only."""
    def __init__(self, detail: str, operation: str):
        super().__init__(code="DATABASE_ERROR")
        self.detail = detail
        self.operation = operation
