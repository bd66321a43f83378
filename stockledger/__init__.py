"""
Django Stockledger — Append-only inventory ledger.

Every stock change is one Transaction (IN, OUT or ADJUST) written together
with the component's new balance, under a row lock.

Usage:
    from stockledger import ledger, StockError

    ledger.receive(component_id, team_id, 50)
    ledger.issue(component_id, team_id, 30)   # StockError if not enough
    ledger.list_transactions(component_id, team_id)
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'ledger':
        from stockledger.service import Ledger
        return Ledger
    elif name == 'StockError':
        from stockledger.exceptions import StockError
        return StockError
    elif name == 'Component':
        from stockledger.models.component import Component
        return Component
    elif name == 'Transaction':
        from stockledger.models.transaction import Transaction
        return Transaction
    elif name == 'TransactionType':
        from stockledger.models.enums import TransactionType
        return TransactionType
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'ledger',
    'StockError',
    'Component',
    'Transaction',
    'TransactionType',
]

__version__ = '0.1.0'
