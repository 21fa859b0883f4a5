"""
Domain exceptions and their translation to HTTP responses.

Services raise the exceptions defined here and never return error
values.  ``register_exception_handlers`` installs the FastAPI handlers
that translate each exception 1:1 into a status code and a JSON body.
Request validation failures are reported as a mapping of field name to
message, except for an unparseable birthdate which gets its own
``406 Not Acceptable`` response.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# Error type used by the birthdate parser in ``schemas.medical_record``.
BIRTHDATE_FORMAT_ERROR = "birthdate_format"
BIRTHDATE_FORMAT_MESSAGE = "Birthdate must be in the format MM/dd/yyyy"

# Wire field name to the label used in "<label> is mandatory".
MANDATORY_LABELS = {
    "firstName": "First name",
    "lastName": "Last name",
    "address": "Address",
    "city": "City",
    "zip": "Zipcode",
    "phone": "Phone number",
    "email": "Email",
    "birthdate": "Birthdate",
    "station": "Station",
}


class SafetyNetException(Exception):
    """Base exception for the SafetyNet Alerts API.

    Carries a human readable ``message``, a machine readable ``code``
    and the HTTP ``status_code`` it maps to.
    """

    def __init__(
        self,
        message: str,
        code: str = "SAFETYNET_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to API response dict."""
        return {"detail": self.message, "code": self.code}


class AlreadyExistsError(SafetyNetException):
    """Raised when creating an entity whose identity key is taken."""

    def __init__(self, message: str):
        super().__init__(message, code="ALREADY_EXISTS", status_code=status.HTTP_409_CONFLICT)


class NotFoundError(SafetyNetException):
    """Raised when a keyed lookup or a query matches nothing."""

    def __init__(self, message: str):
        super().__init__(message, code="NOT_FOUND", status_code=status.HTTP_404_NOT_FOUND)


class DataFileError(SafetyNetException):
    """Raised when the data document cannot be read or written.

    This is not a client error: it means the deployment is broken.
    """

    def __init__(self, message: str):
        super().__init__(message, code="DATA_FILE_ERROR")


# =============================================================================
# Exception Handlers
# =============================================================================

async def safetynet_exception_handler(request: Request, exc: SafetyNetException) -> JSONResponse:
    """Convert a domain exception to its JSON response."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def validation_errors_by_field(exc: RequestValidationError) -> Dict[str, str]:
    """Flatten pydantic errors into ``{field: message}``.

    The field is the last element of the error location, so body and
    query parameters are reported by their wire name.  When a field has
    several errors the first one wins.  A missing body field is reported
    as "<label> is mandatory", like a blank one.
    """
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[-1]) if loc else "request"
        if error.get("type") == "missing" and field in MANDATORY_LABELS:
            message = f"{MANDATORY_LABELS[field]} is mandatory"
        else:
            message = error.get("msg", "Invalid value")
        errors.setdefault(field, message)
    return errors


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors.

    A birthdate that does not parse as ``MM/dd/yyyy`` is reported as
    406 with a fixed message; everything else is a 400 with the
    field to message mapping.
    """
    if any(error.get("type") == BIRTHDATE_FORMAT_ERROR for error in exc.errors()):
        logger.error("Failed to parse date on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_406_NOT_ACCEPTABLE,
            content={"detail": BIRTHDATE_FORMAT_MESSAGE, "code": "BAD_DATE_FORMAT"},
        )
    errors = validation_errors_by_field(exc)
    logger.error("Validation failed : %s", errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to ``app``."""
    app.add_exception_handler(SafetyNetException, safetynet_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
