"""Normalization of classifier output into reviewable transactions."""

from finparse.parsers.normalize import normalize_response, parse_date, to_parsed_transaction

__all__ = [
    "normalize_response",
    "parse_date",
    "to_parsed_transaction",
]
