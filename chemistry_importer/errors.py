# chemistry_importer/errors.py
"""
Exceptions raised by the format recognizers, parsers and the dispatcher.
"""

from typing import List, Optional, Tuple


class ImporterError(Exception):
    """Base class for all importer errors."""


class ParseError(ImporterError, ValueError):
    """
    Raised by a parser when the content does not follow the format grammar.

    Args:
        reason: Human-readable description of the unmet expectation.
        line_number: 1-based line number in the source content, if known.
    """

    def __init__(self, reason: str, line_number: Optional[int] = None):
        self.reason = reason
        self.line_number = line_number
        super().__init__(reason)


class FormatNotRecognizedError(ImporterError):
    """
    Raised by the dispatcher when no registered format could import a file.

    Args:
        file_name: Name of the file that failed to import.
        attempts: (format name, failure reason) for every format whose parser ran.
        rejected: Names of the formats whose recognizer did not accept the file.
    """

    def __init__(self, file_name: str, attempts: List[Tuple[str, str]], rejected: List[str]):
        self.file_name = file_name
        self.attempts = list(attempts)
        self.rejected = list(rejected)
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.attempts:
            errors = "; ".join(f"{name}: {reason}" for name, reason in self.attempts)
            return f"No suitable parser found for file '{self.file_name}'. Errors: {errors}"
        tried = ", ".join(self.rejected) or "none"
        return (
            f"No suitable parser found for file '{self.file_name}'. "
            f"Not recognized as any of: {tried}"
        )
