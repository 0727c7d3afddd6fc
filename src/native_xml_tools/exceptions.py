"""Custom exceptions for Native XML processing."""


class NativeXmlError(Exception):
    """Base exception for all Native XML processing errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class QueryError(NativeXmlError):
    """Raised when an XPath expression or its context node is rejected."""

    def __init__(self, message: str, expression: str, *args, **kwargs):
        self.expression = expression
        super().__init__(message, *args, **kwargs)


class MissingPublicationError(NativeXmlError):
    """Raised when an article has no publication matching its current_publication_id."""

    def __init__(self, message: str, publication_id: str | None = None, *args, **kwargs):
        self.publication_id = publication_id
        super().__init__(message, *args, **kwargs)


class MissingFileRevisionError(NativeXmlError):
    """Raised when a submission file declares a file_id with no matching <file> entry."""

    def __init__(
        self,
        message: str,
        submission_file_id: str | None = None,
        file_id: str | None = None,
        *args,
        **kwargs,
    ):
        self.submission_file_id = submission_file_id
        self.file_id = file_id
        super().__init__(message, *args, **kwargs)
