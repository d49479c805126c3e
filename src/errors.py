from typing import List, Optional

# Each lookup failure knows the HTTP status it maps to
class MedicineLookupError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class InvalidInput(MedicineLookupError):
    status_code = 400


class ServiceUnavailable(MedicineLookupError):
    status_code = 503


class NotFound(MedicineLookupError):
    status_code = 404

    def __init__(self, message: str, query: str, suggestions: List[str]):
        super().__init__(message)
        self.query = query
        self.suggestions = list(suggestions)

    def to_dict(self) -> dict:
        return {"error": self.message, "suggestions": self.suggestions}


class UpstreamError(MedicineLookupError):
    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.details = details

    def to_dict(self) -> dict:
        return {"error": self.message, "details": self.details}
