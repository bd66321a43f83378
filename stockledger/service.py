"""
Ledger Service — The single public interface for all stock operations.

Usage:
    from stockledger import ledger, StockError

    ledger.receive(component.pk, team_id, 50)
    ledger.issue(component.pk, team_id, 30, reference_number='WO-17')
    ledger.adjust(component.pk, team_id, 0, notes='Yearly count')
    ledger.get_quantity(component.pk, team_id)  # 0
"""

from stockledger.services import StockQueries, StockTransactions
from stockledger.services.audit import verify


class Ledger(StockQueries, StockTransactions):
    """
    Single interface for all ledger operations.

    Parameter convention: (component_id, team_id, ...)
    Every read and write is scoped to the team.

    IMPORTANT: All state-changing methods use atomic transactions
    with row locking. See StockTransactions.apply.
    """

    apply_transaction = classmethod(StockTransactions.apply.__func__)
    verify = staticmethod(verify)
