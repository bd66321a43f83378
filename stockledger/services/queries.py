"""
Ledger queries — read-only operations.

All methods are classmethod on Ledger and use no locking.
"""

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db.models import QuerySet

from stockledger.adapters import get_component_store
from stockledger.exceptions import StockError
from stockledger.models.transaction import Transaction


class StockQueries:
    """Read-only ledger query methods."""

    @classmethod
    def get_quantity(cls, component_id, team_id) -> Decimal:
        """Live balance of a component. O(1) read, no lock."""
        return get_component_store().get_component(component_id, team_id).quantity

    @classmethod
    def list_transactions(cls, component_id, team_id) -> QuerySet:
        """
        Ledger of one component in commit order.

        Returns:
            Lazy QuerySet of Transaction ordered by (created_at, id).
            Re-iterating re-runs the query, so it always reflects the ledger.

        Raises:
            StockError('COMPONENT_NOT_FOUND'): Missing or other team
        """
        component = get_component_store().get_component(component_id, team_id)
        return (
            Transaction.objects
            .for_team(team_id)
            .filter(component_id=component.pk)
            .order_by('created_at', 'id')
        )

    @classmethod
    def list_team_transactions(cls, team_id) -> QuerySet:
        """
        Ledger of every component of a team, in commit order.

        A malformed team id matches nothing.
        """
        try:
            qs = Transaction.objects.for_team(team_id)
        except (ValueError, ValidationError):
            return Transaction.objects.none()
        return qs.select_related('component').order_by('created_at', 'id')

    @classmethod
    def get_transaction(cls, transaction_id, team_id) -> Transaction:
        """
        Single transaction, scoped to a team.

        Raises:
            StockError('TRANSACTION_NOT_FOUND'): Missing or other team
        """
        try:
            return (
                Transaction.objects
                .for_team(team_id)
                .select_related('component')
                .get(pk=transaction_id)
            )
        except (Transaction.DoesNotExist, ValueError, ValidationError):
            raise StockError(
                'TRANSACTION_NOT_FOUND',
                transaction_id=str(transaction_id),
            ) from None
