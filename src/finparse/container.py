"""Composition root.

Builds the application's services once and owns their lifecycle, so nothing
needs a process-wide singleton.
"""

import logging

import httpx

from finparse.config import Settings, get_settings
from finparse.core.logging import setup_logging
from finparse.db.store import JSONFileStore
from finparse.repositories.card import CardRepository
from finparse.repositories.category import CategoryRepository
from finparse.repositories.transaction import TransactionRepository
from finparse.schemas.transaction import ParsedTransaction
from finparse.services.file_access import FileAccess, LocalFileAccess
from finparse.services.review import ImportReviewSession
from finparse.services.statement_parser import StatementParserService

logger = logging.getLogger(__name__)


class AppContainer:
    """Wires settings, HTTP client, storage and services.

    Example:
        >>> async with AppContainer() as app:
        ...     parsed = await app.statement_parser.import_statement("march.pdf")
        ...     session = app.new_review_session(parsed)
        ...     app.commit_review(session)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
        file_access: FileAccess | None = None,
        configure_logging: bool = False,
    ):
        self.settings = settings or get_settings()
        if configure_logging:
            setup_logging(self.settings.log_level)

        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.classify_timeout_seconds)
        )
        self.store = JSONFileStore(self.settings.storage_path)
        self.transactions = TransactionRepository(self.store)
        self.cards = CardRepository(self.store)
        self.categories = CategoryRepository(self.store)
        self.statement_parser = StatementParserService(
            settings=self.settings,
            client=self.http_client,
            file_access=file_access or LocalFileAccess(),
        )
        logger.debug(
            "Container ready",
            extra={"app_env": self.settings.app_env, "classifier_url": self.settings.classifier_base_url},
        )

    def new_review_session(self, transactions: list[ParsedTransaction]) -> ImportReviewSession:
        return ImportReviewSession(transactions)

    def commit_review(self, session: ImportReviewSession) -> int:
        """Commit a review session, booking it to the selected card."""
        card = self.cards.selected_card
        return session.commit(self.transactions, card_id=card.id if card else None)

    async def aclose(self) -> None:
        """Close the HTTP client if this container created it."""
        if self._owns_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "AppContainer":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
