"""Errors raised while analyzing a course document."""

from typing import List, Optional

DEFAULT_SUGGESTIONS = [
    "Ensure the file contains readable text content",
    "Try uploading a smaller file if the error persists",
    "Supported formats: PDF, DOCX, TXT",
]


class AnalysisError(Exception):
    """Base class for failures that end an analysis request."""

    status_code = 500

    def __init__(self, message: str, suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.suggestions = list(suggestions) if suggestions else list(DEFAULT_SUGGESTIONS)


class MissingInputError(AnalysisError):
    status_code = 400

    def __init__(self, message: str = "No file provided"):
        super().__init__(message, [
            "Attach a document in the 'file' field of the upload form",
            "Supported formats: PDF, DOCX, TXT",
        ])


class FileTooLargeError(AnalysisError):
    status_code = 413

    def __init__(self, size: int, limit: int):
        limit_mb = limit / 1024 / 1024
        super().__init__(
            f"File too large. Maximum size allowed is {limit_mb:g}MB.",
            [
                "Split the document into smaller parts",
                f"File size limit: {limit_mb:g}MB",
            ],
        )
        self.size = size
        self.limit = limit


class InsufficientTextError(AnalysisError):
    status_code = 422

    def __init__(self, extracted_length: int, minimum: int):
        super().__init__(
            "Could not extract sufficient text from file. "
            "Please ensure the file contains readable text content.",
        )
        self.extracted_length = extracted_length
        self.minimum = minimum


class ExtractionError(AnalysisError):
    """A format-specific extraction method failed; recovered by the reader."""


class TaxonomyUnavailableError(AnalysisError):
    """The skill library store could not be queried; recovered by the provider."""
