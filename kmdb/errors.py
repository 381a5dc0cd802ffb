import enum
import logging

from flask import Response
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ErrorKind(enum.Enum):
    NOT_FOUND = "not_found"
    DUPLICATE_RESOURCE = "duplicate_resource"
    VALIDATION_FAILED = "validation_failed"
    MALFORMED_DATE = "malformed_date"


class CatalogError(Exception):
    """Base class for every rejection the catalog services raise."""

    kind = None

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class NotFound(CatalogError):
    kind = ErrorKind.NOT_FOUND


class DuplicateResource(CatalogError):
    """Raised for duplicate creations and for deletes blocked by associations."""

    kind = ErrorKind.DUPLICATE_RESOURCE


class ValidationFailed(CatalogError):
    kind = ErrorKind.VALIDATION_FAILED

    @classmethod
    def from_messages(cls, messages):
        """Build one message out of marshmallow's field -> messages mapping."""
        parts = []
        for field, errors in _flatten(messages):
            parts.append(f"{field} - {errors}; ")
        return cls("Validation failed: " + "".join(parts))


class MalformedDate(CatalogError):
    kind = ErrorKind.MALFORMED_DATE


STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DUPLICATE_RESOURCE: 400,
    ErrorKind.VALIDATION_FAILED: 400,
    ErrorKind.MALFORMED_DATE: 400,
}


def _flatten(messages, prefix=""):
    # marshmallow nests dicts for list items and nested schemas
    if isinstance(messages, dict):
        for key, value in messages.items():
            name = f"{prefix}.{key}" if prefix else str(key)
            yield from _flatten(value, name)
    elif isinstance(messages, (list, tuple)):
        if all(isinstance(m, str) for m in messages):
            yield prefix, ", ".join(messages)
        else:
            for item in messages:
                yield from _flatten(item, prefix)
    else:
        yield prefix, str(messages)


def text_response(message, status):
    return Response(message, status=status, mimetype="text/plain")


def handle_catalog_error(error):
    status = STATUS_BY_KIND[error.kind]
    logger.info("%s rejected with %s: %s", error.kind.name, status, error.message)
    return text_response(error.message, status)


def handle_schema_error(error):
    return handle_catalog_error(ValidationFailed.from_messages(error.messages))


def handle_http_error(error):
    return text_response(error.description or error.name, error.code)


def handle_unexpected_error(error):
    logger.exception("Unexpected error while handling request")
    return text_response(f"An unexpected error occurred: {error}", 500)


def register_error_handlers(app):
    app.register_error_handler(CatalogError, handle_catalog_error)
    app.register_error_handler(ValidationError, handle_schema_error)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected_error)
