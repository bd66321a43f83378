"""
Component Store Protocol — Interface for the owner of live balances.

The ledger reads and writes Component.quantity only through this protocol,
inside the database transaction it opens.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from stockledger.models.component import Component


@runtime_checkable
class ComponentStore(Protocol):
    """
    Protocol for component lookup and balance writes.

    Implementations must scope every read and write by team_id and must
    take part in the caller's database transaction.
    """

    def get_component(self, component_id, team_id, *, lock: bool = False) -> Component:
        """
        Fetch a component owned by team_id.

        Args:
            component_id: Component identifier
            team_id: Tenant scope
            lock: Hold a row lock until the surrounding transaction ends

        Returns:
            Component

        Raises:
            StockError('COMPONENT_NOT_FOUND'): Missing, inactive or owned by another team
        """
        ...

    def set_component_quantity(
        self,
        component_id,
        team_id,
        new_quantity: Decimal,
        *,
        expected: Decimal | None = None,
    ) -> None:
        """
        Write a component's balance.

        Args:
            component_id: Component identifier
            team_id: Tenant scope
            new_quantity: New balance (>= 0)
            expected: When given, only write if the stored balance still equals it

        Raises:
            StockError('CONCURRENT_MODIFICATION'): Stored balance changed underneath
        """
        ...
