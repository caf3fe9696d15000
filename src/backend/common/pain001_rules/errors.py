from __future__ import annotations


class Pain001Error(RuntimeError):
    status_code: int = 500
    message: str = "Internal error"

    def __init__(self, message: str | None = None, *, detail: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        self.detail = detail


class MissingUpload(Pain001Error):
    status_code = 400
    message = "No file uploaded"


class XmlParseError(Pain001Error):
    status_code = 500
    message = "Error parsing XML"


class InvalidValidateRequest(Pain001Error):
    status_code = 400
    message = "Invalid request data"


class MissingRequiredField(Pain001Error):
    """A rule-required field is absent; reported as an outcome, not a request failure."""

    status_code = 422
    message = "Missing required field"

    def __init__(self, *fields: str):
        super().__init__(f"Missing {' or '.join(fields)}" if fields else None)
        self.fields = fields
