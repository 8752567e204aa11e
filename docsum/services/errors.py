"""Summarizer error taxonomy. Each error carries the HTTP status and code it is reported with."""


class SummarizerError(Exception):
    """Base for errors raised while handling a summarize request."""

    status_code: int = 500
    error_code: str = "SUMMARIZATION_FAILED"

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class DocumentValidationError(SummarizerError):
    """Bad source type, missing/oversized/unsupported file, or empty/too-short document."""

    status_code = 400
    error_code = "INVALID_DOCUMENT"


class ExtractionError(SummarizerError):
    """The text extractor failed on an uploaded file."""

    status_code = 422
    error_code = "EXTRACTION_FAILED"


class ModelUnavailableError(SummarizerError):
    """A single model id is not available for this credential. Retried on the next candidate."""

    status_code = 502
    error_code = "MODEL_UNAVAILABLE"


class GenerationExhaustedError(SummarizerError):
    """Every model candidate soft-failed."""

    status_code = 502
    error_code = "NO_COMPATIBLE_MODEL"


class GenerationError(SummarizerError):
    """A fatal generation failure (quota, network, malformed request)."""

    status_code = 502
    error_code = "GENERATION_FAILED"
