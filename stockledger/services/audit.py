"""
Ledger audit — check that balances and the ledger agree.

Usage:
    from stockledger.services.audit import verify_all

    # Run periodically (celery beat, cron) or via `manage.py verify_ledger`
    for check in verify_all(team_id=team):
        if not check.is_consistent:
            print(check.problems)

Auditing never writes. The ledger is append-only, so drift can only be
corrected by recording an ADJUST transaction.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator

from stockledger.adapters import get_component_store
from stockledger.models.component import Component
from stockledger.services.transactions import resulting_quantity

logger = logging.getLogger('stockledger')


@dataclass(frozen=True)
class LedgerCheck:
    """Outcome of auditing one component."""

    component_id: int
    quantity: Decimal
    ledger_quantity: Decimal | None  # quantity_after of the last transaction
    transactions: int
    problems: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_consistent(self) -> bool:
        return not self.problems


def _check(component: Component) -> LedgerCheck:
    problems = []
    previous_after = None
    count = 0

    for entry in component.transactions.order_by('created_at', 'id').iterator():
        count += 1
        expected = resulting_quantity(entry.type, entry.quantity_before, entry.quantity)
        if entry.quantity_after != expected:
            problems.append(
                f"#{entry.pk}: {entry.type} {entry.quantity} from {entry.quantity_before} "
                f"should end at {expected}, recorded {entry.quantity_after}"
            )
        if entry.quantity_after < 0:
            problems.append(f"#{entry.pk}: negative balance {entry.quantity_after}")
        if previous_after is not None and entry.quantity_before != previous_after:
            problems.append(
                f"#{entry.pk}: starts at {entry.quantity_before}, "
                f"previous transaction ended at {previous_after}"
            )
        previous_after = entry.quantity_after

    if previous_after is not None and previous_after != component.quantity:
        problems.append(
            f"balance {component.quantity} differs from ledger {previous_after}"
        )

    check = LedgerCheck(
        component_id=component.pk,
        quantity=component.quantity,
        ledger_quantity=previous_after,
        transactions=count,
        problems=tuple(problems),
    )
    if problems:
        logger.warning(
            "stock.verify.drift",
            extra={
                "component_id": component.pk,
                "quantity": str(component.quantity),
                "ledger_quantity": str(previous_after),
                "problems": len(problems),
            },
        )
    return check


def verify(component_id, team_id) -> LedgerCheck:
    """
    Audit one component.

    Checks:
    - every transaction's after matches its type applied to its before
    - every transaction starts where the previous one ended
    - the live balance equals the last transaction's after

    Raises:
        StockError('COMPONENT_NOT_FOUND'): Missing or other team
    """
    return _check(get_component_store().get_component(component_id, team_id))


def verify_all(team_id=None) -> Iterator[LedgerCheck]:
    """Audit every component (optionally of one team), active or not."""
    qs = Component.objects.all()
    if team_id is not None:
        qs = qs.for_team(team_id)

    for component in qs.order_by('pk').iterator():
        yield _check(component)
