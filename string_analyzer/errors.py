from fastapi import status


class StringAnalyzerError(Exception):
    """Base error carrying an error kind and the HTTP status it maps to"""

    kind = "Error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message, "kind": self.kind}


class InvalidInputError(StringAnalyzerError):
    kind = "InvalidInput"
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(StringAnalyzerError):
    kind = "Conflict"
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(StringAnalyzerError):
    kind = "NotFound"
    status_code = status.HTTP_404_NOT_FOUND


class InvalidFilterError(StringAnalyzerError):
    kind = "InvalidFilter"
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictingFiltersError(StringAnalyzerError):
    kind = "ConflictingFilters"
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
