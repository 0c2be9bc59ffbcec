"""Error kinds raised by the catalog services.

Both are ``HTTPException`` subclasses so routers let them propagate and
FastAPI renders the status code and message directly.
"""

from fastapi import HTTPException


class NotFoundError(HTTPException):
    """The target entity, or an entity it references, does not exist or is not active."""

    def __init__(self, detail: str) -> None:
        super().__init__(status_code=404, detail=detail)


class InternalServerError(HTTPException):
    """Any other failure: store connectivity, constraint violations, I/O errors."""

    def __init__(self, detail: str) -> None:
        super().__init__(status_code=500, detail=detail)
