"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_store import LedgerSession, LedgerStorePort

__all__ = [
    "DatabaseEnginePort",
    "LedgerSession",
    "LedgerStorePort",
]
