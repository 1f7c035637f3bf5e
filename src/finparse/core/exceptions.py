"""Custom exception classes for statement imports.

Every failure of an import attempt is raised as a subclass of
StatementImportError. Each subclass maps to a code in errors.py.
None of them are retried internally; the caller decides.
"""

from typing import Any

from finparse.core.errors import get_error, get_user_message, is_retryable


class StatementImportError(Exception):
    """Base exception for all statement import errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "IMPORT_001")
        message: Technical description; also ``str(exc)``
        details: Additional context about the error (for logging)
    """

    default_code = "IMPORT_005"

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.error_code = error_code or self.default_code
        self.message = message if message is not None else get_error(self.error_code)["message"]
        self.details = details or {}
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        return get_user_message(self.error_code, self.message)

    @property
    def retry_allowed(self) -> bool:
        return is_retryable(self.error_code)


class UnsupportedFormatError(StatementImportError):
    """Raised when the selected file is not a PDF."""

    default_code = "IMPORT_001"


class EmptyFileError(StatementImportError):
    """Raised when the selected file has no content."""

    default_code = "IMPORT_002"


class FileReadError(StatementImportError):
    """Raised when the file could not be read after access was granted."""

    default_code = "IMPORT_003"


class AccessDeniedError(StatementImportError):
    """Raised when scoped read access to the file cannot be acquired."""

    default_code = "IMPORT_004"


class ParseError(StatementImportError):
    """Raised when the classification server answers with something unusable.

    Covers malformed HTTP, non-200 status codes and application-level
    errors reported inside a 200 response.
    """

    default_code = "IMPORT_005"


class NetworkError(StatementImportError):
    """Raised when the classification server cannot be reached or times out."""

    default_code = "IMPORT_006"
