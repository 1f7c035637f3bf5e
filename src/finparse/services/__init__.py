from finparse.services.review import ImportReviewSession
from finparse.services.statement_parser import StatementParserService

__all__ = ["ImportReviewSession", "StatementParserService"]
