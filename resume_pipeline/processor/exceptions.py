class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class FatalInputError(ProcessorError):
    """Raised when a document has no usable bytes. Ends the pipeline for that document."""


class FileReadError(ProcessorError):
    """Raised when a file cannot be read from disk."""
