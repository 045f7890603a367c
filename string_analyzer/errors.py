from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Failure conditions the service can report, independent of transport."""
    INVALID_INPUT = "invalid_input"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    INVALID_QUERY = "invalid_query"
    CONFLICTING_FILTERS = "conflicting_filters"
    STORAGE_FAILURE = "storage_failure"


class StringAnalyzerError(Exception):
    """Base error carrying an ErrorKind and a user-facing message"""
    kind = ErrorKind.INVALID_INPUT
    default_message = "Invalid request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message, "kind": self.kind.value}


class InvalidInput(StringAnalyzerError):
    kind = ErrorKind.INVALID_INPUT
    default_message = "Invalid request body or query parameters"


class AlreadyExists(StringAnalyzerError):
    kind = ErrorKind.ALREADY_EXISTS
    default_message = "String already exists in the system"


class NotFound(StringAnalyzerError):
    kind = ErrorKind.NOT_FOUND
    default_message = "String does not exist in the system"


class InvalidQuery(StringAnalyzerError):
    kind = ErrorKind.INVALID_QUERY
    default_message = "Unable to parse natural language query"


class ConflictingFilters(StringAnalyzerError):
    kind = ErrorKind.CONFLICTING_FILTERS
    default_message = "Query parsed but resulted in conflicting filters"


class StorageFailure(StringAnalyzerError):
    kind = ErrorKind.STORAGE_FAILURE
    default_message = "Storage operation failed"
