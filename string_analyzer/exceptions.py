from typing import Dict, Optional


class StringAnalyzerError(Exception):
    """Base error; ``status_code`` is what the HTTP layer answers with."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class DuplicateContent(StringAnalyzerError):
    status_code = 409
    message = "String already exists in the system"

    def __init__(self, string_id: str, message: Optional[str] = None):
        self.string_id = string_id
        super().__init__(message)


class NotFound(StringAnalyzerError):
    status_code = 404
    message = "String does not exist in the system"

    def __init__(self, string_id: str, message: Optional[str] = None):
        self.string_id = string_id
        super().__init__(message)


class InvalidFilterValue(StringAnalyzerError):
    status_code = 400
    message = "Invalid query parameter values or types"

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = errors
        super().__init__(message)


class UnparsableQuery(StringAnalyzerError):
    status_code = 400
    message = "Unable to parse natural language query"

    def __init__(self, query: str, message: Optional[str] = None):
        self.query = query
        super().__init__(message)
