class CycloError(Exception):
    """Base class for every error raised by the analysis pipeline."""


class BadExtensionError(CycloError):
    """
    A file's extension does not map to a known language profile.

    The walker filters on the same extension set, so seeing this means the
    two filters disagree. It is recoverable per file.
    """

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"The file '{filename}' has a bad extension and could not be parsed")


class StatisticsUnavailableError(CycloError):
    """The line-statistics service had no count for a classified file."""

    def __init__(self, filename: str, language: str):
        self.filename = filename
        self.language = language
        super().__init__(f"No line statistics for '{filename}' as {language}")


class FilesystemFailureError(CycloError):
    """A file could not be opened or read while scanning it."""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Failed to read '{filename}': {reason}")


class ConsistencyViolationError(CycloError):
    """
    The accumulated node arrays are unusable (mismatched lengths, duplicate
    file labels, or nothing at all to visualize). Always fatal for the run.
    """


# Errors that only cost us the current file.
PER_FILE_ERRORS = (BadExtensionError, StatisticsUnavailableError, FilesystemFailureError)
