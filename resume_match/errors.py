"""
Errors and warnings raised by the parser and analyzer.

Hard failures subclass ValueError so callers can keep catching ValueError.
"""


class ResumeMatchError(ValueError):
    """Base class for parser and analyzer failures."""


class UnsupportedFormatError(ResumeMatchError):
    """The declared MIME type is not one we can decode."""

    def __init__(self, mime_type: str):
        self.mime_type = mime_type
        super().__init__(f"Unsupported document format: {mime_type!r}")


class DecodeError(ResumeMatchError):
    """The document bytes could not be turned into text."""


class DocumentTooLargeError(DecodeError):
    """The document exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Document is {size} bytes, limit is {limit} bytes")


class EmptyInputWarning(UserWarning):
    """An input text was empty; scores fall back to their defaults."""
