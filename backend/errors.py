class ResumeMatcherError(Exception):
    """Base class for errors the API reports back to the user."""


class MissingInputError(ResumeMatcherError):
    """Raised when the resume or the job description is blank."""


class UnsupportedDocumentError(ResumeMatcherError):
    """Raised when an upload is not a PDF."""


class DocumentReadError(ResumeMatcherError):
    """Raised when text could not be extracted from an uploaded PDF."""
