"""Statement import service.

This module turns a user-selected bank statement PDF into reviewable
transactions:
1. Check the file type
2. Acquire scoped file access and read the file
3. Upload it to the classification server (single attempt, no retry)
4. Decode the response and normalize its records
"""

import logging
import time
from pathlib import Path
from uuid import uuid4

import httpx

from finparse.config import Settings, get_settings
from finparse.core.exceptions import NetworkError, ParseError, UnsupportedFormatError
from finparse.parsers.normalize import normalize_response
from finparse.schemas.classify import ClassifyResponse
from finparse.schemas.transaction import ImportResult, ParsedTransaction
from finparse.services.file_access import FileAccess, LocalFileAccess, read_file

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSION = ".pdf"
PDF_CONTENT_TYPE = "application/pdf"
CLASSIFY_PATH = "/classify"


class StatementParserService:
    """Client for the statement classification API.

    The service holds no mutable state; concurrent imports are independent
    requests. When no ``client`` is given, a short-lived AsyncClient is
    opened per call.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
        file_access: FileAccess | None = None,
    ):
        """Initialize the service.

        Args:
            settings: Application settings (base URL, timeout)
            client: Shared HTTP client owned by the caller
            file_access: Provider for scoped file access
        """
        self.settings = settings or get_settings()
        self.client = client
        self.file_access = file_access or LocalFileAccess()

    @property
    def classify_url(self) -> str:
        return self.settings.classifier_base_url.rstrip("/") + CLASSIFY_PATH

    async def import_statement(self, path: str | Path) -> list[ParsedTransaction]:
        """Parse a statement PDF and return transactions ready for review.

        Args:
            path: Local path of the selected file

        Returns:
            Transactions sorted by date, most recent first

        Raises:
            UnsupportedFormatError: If the file is not a PDF
            AccessDeniedError: If scoped access cannot be acquired
            FileReadError: If the file cannot be read
            EmptyFileError: If the file has no content
            ParseError: If the server response is unusable
            NetworkError: If the server cannot be reached
        """
        result = await self.import_statement_result(path)
        return result.transactions

    async def import_statement_result(self, path: str | Path) -> ImportResult:
        """Like import_statement(), but returns bank, summary and drop count too."""
        path = Path(path)
        if path.suffix.lower() != SUPPORTED_EXTENSION:
            raise UnsupportedFormatError(details={"filename": path.name})

        with self.file_access.scoped(path) as scoped_path:
            pdf_bytes = read_file(scoped_path)

        return await self.classify_result(pdf_bytes, path.name)

    async def classify(self, pdf_bytes: bytes, filename: str) -> list[ParsedTransaction]:
        """Upload PDF bytes for classification and return the transactions."""
        result = await self.classify_result(pdf_bytes, filename)
        return result.transactions

    async def classify_result(self, pdf_bytes: bytes, filename: str) -> ImportResult:
        """Upload PDF bytes for classification.

        Args:
            pdf_bytes: Statement file content
            filename: Name sent with the multipart file part

        Returns:
            ImportResult with normalized transactions

        Raises:
            ParseError: On malformed HTTP, non-200 status or an ``error`` field
            NetworkError: On transport failure or timeout
            pydantic.ValidationError: If the body is not a valid response document
        """
        start_time = time.time()
        logger.info(
            "Uploading statement for classification",
            extra={"file_name": filename, "size_bytes": len(pdf_bytes)},
        )

        response = await self._post_statement(pdf_bytes, filename)

        if response.status_code != 200:
            logger.warning(
                "Classification server returned an error status",
                extra={"status_code": response.status_code},
            )
            raise ParseError(f"Server error: {response.status_code}")

        decoded = ClassifyResponse.model_validate_json(response.content)
        if decoded.error is not None:
            logger.warning("Classification server reported an error", extra={"server_error": decoded.error})
            raise ParseError(decoded.error)

        result = normalize_response(decoded)

        processing_time_ms = int((time.time() - start_time) * 1000)
        logger.info(
            "Classification complete",
            extra={
                "transactions_count": len(result.transactions),
                "dropped_count": result.dropped_count,
                "bank": result.bank,
                "processing_time_ms": processing_time_ms,
            },
        )
        return result

    async def _post_statement(self, pdf_bytes: bytes, filename: str) -> httpx.Response:
        """Send the multipart upload. One attempt, no retry."""
        # httpx takes the multipart boundary from the Content-Type header.
        boundary = str(uuid4())
        headers = {"Content-Type": f"multipart/form-data; boundary={boundary}"}
        files = {"file": (filename, pdf_bytes, PDF_CONTENT_TYPE)}
        timeout = httpx.Timeout(self.settings.classify_timeout_seconds)

        try:
            if self.client is not None:
                return await self.client.post(self.classify_url, headers=headers, files=files, timeout=timeout)
            async with httpx.AsyncClient(timeout=timeout) as client:
                return await client.post(self.classify_url, headers=headers, files=files)
        except httpx.ProtocolError as e:
            logger.error("Malformed response from classification server", extra={"error_type": type(e).__name__})
            raise ParseError("Invalid response") from e
        except httpx.TransportError as e:
            logger.error("Classification request failed", extra={"error_type": type(e).__name__})
            raise NetworkError(str(e) or type(e).__name__) from e
