"""
Stockledger Models.

- Component: Inventory item holding the live balance
- Transaction: Immutable ledger of stock events
"""

from stockledger.models.component import Component
from stockledger.models.enums import TransactionType
from stockledger.models.transaction import Transaction

__all__ = [
    'TransactionType',
    'Component',
    'Transaction',
]
