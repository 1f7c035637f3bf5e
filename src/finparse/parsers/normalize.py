"""Normalization of classification responses.

Converts the raw records of a ClassifyResponse into ParsedTransaction
objects. Parsing is lenient: a record without a usable date or amount is
dropped and counted, never raised.
"""

import logging
from datetime import date, datetime

from finparse.categorization import map_category
from finparse.schemas.classify import APITransaction, ClassifyResponse
from finparse.schemas.transaction import ImportResult, ParsedTransaction

logger = logging.getLogger(__name__)

# Tried in order; first match wins. strptime's %Y needs four digits, so a
# two-digit year only ever matches the last format. %y maps 69-99 to 19xx
# and 00-68 to 20xx.
DATE_FORMATS = ["%Y-%m-%d", "%d.%m.%Y", "%d.%m.%y"]

MAX_TITLE_LENGTH = 60
UNKNOWN_TITLE = "Unknown"


def parse_date(text: str) -> date | None:
    """Parse a statement date.

    Supported formats:
        - YYYY-MM-DD (2024-01-05)
        - DD.MM.YYYY (05.01.2024)
        - DD.MM.YY (05.01.24)

    Two-digit years use the fixed POSIX pivot of strptime: 69-99 become
    1969-1999 and 00-68 become 2000-2068. This is not a sliding window
    relative to today, so "05.01.50" is 2050-01-05.

    Args:
        text: Date string

    Returns:
        Parsed date, or None if no format matches
    """
    text = text.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def select_title(record: APITransaction) -> str:
    """Merchant, then details, then a placeholder; cut to MAX_TITLE_LENGTH.

    The limit counts code points, not user-perceived characters. A cut can
    separate a base character from its combining marks or split an emoji
    sequence at the boundary.
    """
    if record.merchant is not None:
        title = record.merchant
    elif record.details is not None:
        title = record.details
    else:
        title = UNKNOWN_TITLE
    return title[:MAX_TITLE_LENGTH]


def to_parsed_transaction(
    record: APITransaction, default_bank: str | None = None
) -> ParsedTransaction | None:
    """Convert one API record, or return None when it must be dropped."""
    if record.date is None or record.amount is None:
        return None

    parsed_date = parse_date(record.date)
    if parsed_date is None:
        return None

    return ParsedTransaction(
        date=parsed_date,
        title=select_title(record),
        amount=abs(record.amount),
        is_expense=record.amount < 0,
        category=map_category(record.category),
        bank=record.bank if record.bank is not None else default_bank,
        details=record.details,
    )


def sort_by_date_desc(transactions: list[ParsedTransaction]) -> list[ParsedTransaction]:
    """Most recent first. Same-date records keep their response order."""
    # sorted() is stable and reverse=True preserves the order of equal keys.
    return sorted(transactions, key=lambda t: t.date, reverse=True)


def normalize_response(response: ClassifyResponse) -> ImportResult:
    """Build an ImportResult from a successful classification response.

    Args:
        response: Decoded response with no ``error`` set

    Returns:
        ImportResult with sorted transactions and the number of dropped records
    """
    transactions: list[ParsedTransaction] = []
    dropped = 0

    for index, record in enumerate(response.transactions):
        parsed = to_parsed_transaction(record, default_bank=response.bank)
        if parsed is None:
            dropped += 1
            logger.debug(
                "Dropping classifier record without usable date or amount",
                extra={"index": index, "has_date": record.date is not None, "has_amount": record.amount is not None},
            )
            continue
        transactions.append(parsed)

    if dropped:
        logger.info(
            f"Dropped {dropped} of {len(response.transactions)} classifier records",
            extra={"dropped_count": dropped},
        )

    return ImportResult(
        transactions=sort_by_date_desc(transactions),
        bank=response.bank,
        summary=response.summary,
        dropped_count=dropped,
    )
