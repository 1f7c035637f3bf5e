"""Classify a statement PDF and print the parsed transactions as JSON.

Usage: python -m finparse <path_to_pdf>
"""

import asyncio
import json
import sys

from pydantic import ValidationError

from finparse.config import get_settings
from finparse.container import AppContainer
from finparse.core.errors import get_user_message
from finparse.core.exceptions import StatementImportError


async def import_pdf(pdf_path: str) -> dict:
    async with AppContainer(settings=get_settings(), configure_logging=True) as app:
        result = await app.statement_parser.import_statement_result(pdf_path)

    return {
        "bank": result.bank,
        "dropped_count": result.dropped_count,
        "transactions": [
            {
                "date": t.formatted_date,
                "title": t.title,
                "amount": t.formatted_amount,
                "category": t.category,
                "bank": t.bank,
            }
            for t in result.transactions
        ],
    }


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: python -m finparse <path_to_pdf>", file=sys.stderr)
        return 1

    try:
        result = asyncio.run(import_pdf(args[0]))
    except StatementImportError as e:
        print(f"Error: {e.user_message}", file=sys.stderr)
        return 1
    except ValidationError:
        # Undecodable classifier body
        message = get_user_message("IMPORT_005", "Invalid response")
        print(f"Error: {message}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
