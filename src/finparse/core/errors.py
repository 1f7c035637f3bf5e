"""Error codes and user-friendly messages.

This module defines the error catalog for statement imports.
Each error has:
- code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the import can be retried as-is
"""

# Error catalog for statement imports
ERROR_CATALOG: dict[str, dict] = {
    "IMPORT_001": {
        "code": "IMPORT_001",
        "message": "Unsupported file format",
        "user_message": "Unsupported file format. Please use PDF.",
        "suggestion": "Export the statement from your bank as a PDF file.",
        "retry_allowed": False,
    },
    "IMPORT_002": {
        "code": "IMPORT_002",
        "message": "The file is empty",
        "user_message": "The file appears to be empty.",
        "suggestion": "Try downloading the statement again from your bank.",
        "retry_allowed": False,
    },
    "IMPORT_003": {
        "code": "IMPORT_003",
        "message": "Could not read the file",
        "user_message": "Could not read the PDF file.",
        "suggestion": "Make sure the file is not open in another app and try again.",
        "retry_allowed": True,
    },
    "IMPORT_004": {
        "code": "IMPORT_004",
        "message": "Access to the file was denied",
        "user_message": "Access to the file was denied.",
        "suggestion": "Select the file again so the app can be granted access to it.",
        "retry_allowed": True,
    },
    "IMPORT_005": {
        "code": "IMPORT_005",
        "message": "Classification response could not be used",
        "user_message": "Parse error: {message}",
        "suggestion": "The statement could not be processed. Please try another file.",
        "retry_allowed": False,
    },
    "IMPORT_006": {
        "code": "IMPORT_006",
        "message": "Classification server unreachable",
        "user_message": "Network error: {message}",
        "suggestion": "Make sure the parser server is running and reachable, then try again.",
        "retry_allowed": True,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Unknown codes resolve to a generic definition instead of raising.
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Please try again.",
            "retry_allowed": True,
        }
    return ERROR_CATALOG[error_code]


def get_user_message(error_code: str, message: str = "") -> str:
    """Get user-facing message for an error code.

    Args:
        error_code: Error code from the catalog
        message: Detail substituted into templated messages

    Returns:
        User-friendly error message
    """
    return get_error(error_code)["user_message"].format(message=message)


def get_suggestion(error_code: str) -> str:
    """Get actionable suggestion for an error code."""
    return get_error(error_code)["suggestion"]


def is_retryable(error_code: str) -> bool:
    """Check if an error is retryable."""
    return get_error(error_code)["retry_allowed"]
