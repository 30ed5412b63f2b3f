"""Helper utilities shared across API route handlers."""

import logging

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


def http_error_from_value_error(exc: ValueError, *, not_found: str) -> HTTPException:
    """Translate a use-case ``ValueError`` into the matching HTTP error.

    ``not_found`` is the message the use case raises for a missing record; it
    maps to 404 and every other message to 400.
    """

    detail = str(exc)
    if detail == not_found:
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    logger.warning("Rejected request: %s", detail)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
