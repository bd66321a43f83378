"""
Ledger services — modular organization of ledger operations.

Re-exports all public methods:
    from stockledger.services import StockQueries, StockTransactions
"""

from stockledger.services.queries import StockQueries
from stockledger.services.transactions import StockTransactions

__all__ = [
    'StockQueries',
    'StockTransactions',
]
