"""
Error taxonomy of the String Analyzer core.

Every error carries the HTTP status code the API layer answers with, so the
routes only have to raise and a single exception handler renders the body.
"""
from fastapi import status


class StringAnalyzerError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(StringAnalyzerError):
    """Missing/empty create payload or a malformed filter parameter."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class InvalidTypeError(StringAnalyzerError):
    """Payload field present but of the wrong type."""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_message = "Value must be a string"


class DuplicateIdentityError(StringAnalyzerError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "String already exists in the system"


class NotFoundError(StringAnalyzerError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "String does not exist in the system"


class QueryParseError(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Unable to parse natural language query"


class InternalError(StringAnalyzerError):
    pass
