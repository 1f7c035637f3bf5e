import json
from pathlib import Path

import httpx
import pytest

from finparse.config import Settings
from finparse.services.statement_parser import StatementParserService

PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n%%EOF\n"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings isolated from the developer's environment."""
    return Settings(_env_file=None, storage_path=tmp_path / "store.json")


@pytest.fixture
def pdf_file(tmp_path: Path) -> Path:
    path = tmp_path / "statement.pdf"
    path.write_bytes(PDF_BYTES)
    return path


class ClassifierStub:
    """Records requests and answers with a canned response."""

    def __init__(self, status_code: int = 200, body=None, exc: Exception | None = None):
        self.status_code = status_code
        self.body = {"transactions": []} if body is None else body
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, content=json.dumps(self.body).encode("utf-8"))


@pytest.fixture
def classifier() -> ClassifierStub:
    return ClassifierStub()


@pytest.fixture
async def http_client(classifier: ClassifierStub):
    async with httpx.AsyncClient(transport=httpx.MockTransport(classifier)) as client:
        yield client


@pytest.fixture
def service(settings: Settings, http_client: httpx.AsyncClient) -> StatementParserService:
    return StatementParserService(settings=settings, client=http_client)
