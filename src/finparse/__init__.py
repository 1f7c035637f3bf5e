"""Bank statement import client and local transaction ledger."""

__version__ = "0.1.0"
