"""
Application error taxonomy.

Store functions raise these at the point of detection; the handlers
registered in main.py translate them into HTTP responses.
"""

from typing import Any, List, Optional, Sequence, Union


class AppException(Exception):
    """Base error carrying the HTTP status the route layer should answer with."""

    status_code: int = 500

    def __init__(self, message: Union[str, List[str]], status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class BadRequestError(AppException):
    status_code = 400

    def __init__(self, message: Union[str, List[str]] = "Bad Request"):
        super().__init__(message)


class InvalidUpdateRequest(BadRequestError):
    """Partial update requested with no fields."""

    def __init__(self, message: str = "No data"):
        super().__init__(message)


class InvalidRangeError(BadRequestError):
    """A minimum filter bound exceeds its maximum."""


class DuplicateEntityError(BadRequestError):
    """Create collided with an existing key."""


class NotFoundError(AppException):
    status_code = 404

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)


class UnauthorizedError(AppException):
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


def format_validation_errors(errors: Sequence[dict]) -> List[str]:
    """
    Flatten pydantic error dicts into "field: message" strings.

    The "body"/"query" location prefix FastAPI adds is dropped.
    """
    messages = []
    for error in errors:
        loc: Sequence[Any] = [part for part in error.get("loc", ()) if part not in ("body", "query")]
        field = ".".join(str(part) for part in loc)
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return messages
