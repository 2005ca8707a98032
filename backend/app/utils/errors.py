from typing import Dict
from fastapi import HTTPException, status
import logging

logger = logging.getLogger(__name__)


def error_response(
    message: str,
    field_errors: Dict[str, str],
    code: int = status.HTTP_422_UNPROCESSABLE_ENTITY,
) -> HTTPException:
    """Return an HTTPException with a consistent structure and log details."""
    logger.error("%s %s", message, field_errors)
    detail = {"message": message, "field_errors": field_errors}
    return HTTPException(status_code=code, detail=detail)


class DomainError(Exception):
    """A rejection the caller can act on.

    Subclasses pin the offending field, a short machine code and the HTTP
    status routers should answer with.
    """

    field: str = "request"
    code: str = "invalid"
    status_code: int = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        if field is not None:
            self.field = field

    def to_http(self) -> HTTPException:
        return error_response(self.message, {self.field: self.code}, self.status_code)


class InvalidInput(DomainError):
    """Malformed input, rejected before any lookup runs."""


class ClientNotFound(DomainError):
    field = "client"
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class ServiceNotFound(DomainError):
    field = "service_ids"
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class ServiceCrossTenant(DomainError):
    field = "service_ids"
    code = "wrong_organization"
    status_code = status.HTTP_404_NOT_FOUND


class AssessmentNotFound(DomainError):
    field = "assessment_id"
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND
