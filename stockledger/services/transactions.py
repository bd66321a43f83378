"""
Stock transactions — state-changing operations (apply, receive, issue, adjust).

Every event runs under one transaction.atomic() block:
lock component row → compute balance → insert Transaction → write balance.
"""

import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.db import DatabaseError, transaction
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from stockledger.adapters import get_component_store
from stockledger.exceptions import StockError
from stockledger.models.enums import TransactionType
from stockledger.models.transaction import Transaction

logger = logging.getLogger('stockledger')

# Bounds of DecimalField(max_digits=12, decimal_places=3)
QUANTITY_QUANTUM = Decimal('0.001')
MAX_QUANTITY = Decimal('999999999.999')
COST_QUANTUM = Decimal('0.01')
MAX_UNIT_COST = Decimal('99999999.99')
REFERENCE_MAX_LENGTH = 100


def resulting_quantity(tx_type: TransactionType, before: Decimal, quantity: Decimal) -> Decimal:
    """
    Balance after applying an event to `before`.

    IN and OUT treat quantity as a delta, ADJUST as the new absolute balance.
    No bounds are checked here.
    """
    if tx_type == TransactionType.IN:
        return before + quantity
    if tx_type == TransactionType.OUT:
        return before - quantity
    return quantity


def _parse_type(value) -> TransactionType:
    if isinstance(value, str) and value in TransactionType.values:
        return TransactionType(value)
    raise StockError('INVALID_TYPE', type=str(value))


def _parse_amount(value, code: str, quantum: Decimal, maximum: Decimal) -> Decimal:
    """Coerce to Decimal; reject non-numeric, non-finite, negative or over-precise input."""
    if value is None or isinstance(value, bool):
        raise StockError(code, requested=str(value))
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise StockError(code, requested=str(value)) from None

    if not amount.is_finite() or amount < 0 or amount > maximum:
        raise StockError(code, requested=str(value))
    if amount != amount.quantize(quantum):
        raise StockError(code, requested=str(value))
    return amount


def _parse_date(value) -> datetime:
    if value is None:
        return timezone.now()
    if isinstance(value, str):
        parsed = parse_datetime(value)
        if parsed is None:
            raise StockError('INVALID_DATE', transaction_date=value)
        value = parsed
    if not isinstance(value, datetime):
        raise StockError('INVALID_DATE', transaction_date=str(value))
    if settings.USE_TZ and timezone.is_naive(value):
        value = timezone.make_aware(value)
    return value


class StockTransactions:
    """State-changing ledger methods."""

    @classmethod
    def apply(cls, component_id, team_id, type, quantity, *,
              reference_number=None, notes=None, unit_cost=None,
              transaction_date=None, user=None) -> Transaction:
        """
        Apply one stock event to a component and append it to the ledger.

        Args:
            component_id: Component to change, must belong to team_id
            team_id: Tenant scope
            type: 'IN', 'OUT' or 'ADJUST'
            quantity: Delta for IN/OUT, new absolute balance for ADJUST (>= 0)
            reference_number, notes: Free text, no effect on the balance
            unit_cost: Optional cost per unit (>= 0)
            transaction_date: Business date (datetime or ISO string), default now
            user: Recorded as created_by

        Returns:
            The persisted Transaction

        Raises:
            StockError('INVALID_TYPE' | 'INVALID_QUANTITY' | 'INVALID_UNIT_COST'
                       | 'INVALID_REFERENCE' | 'INVALID_DATE'): Bad input, no writes
            StockError('COMPONENT_NOT_FOUND'): Missing or other team, no writes
            StockError('INSUFFICIENT_QUANTITY'): OUT would go below zero, no writes
            StockError('CONCURRENT_MODIFICATION' | 'STORAGE_FAILURE'):
                Nothing committed; safe to retry from scratch

        Concurrency:
            - Runs under transaction.atomic()
            - Uses select_for_update() on the component row, so concurrent
              events on one component are serialized by the database
            - Balance write is a compare-and-set against the locked value
        """
        tx_type = _parse_type(type)
        quantity = _parse_amount(quantity, 'INVALID_QUANTITY', QUANTITY_QUANTUM, MAX_QUANTITY)
        if unit_cost is not None:
            unit_cost = _parse_amount(unit_cost, 'INVALID_UNIT_COST', COST_QUANTUM, MAX_UNIT_COST)
        reference_number = (reference_number or '').strip()
        if len(reference_number) > REFERENCE_MAX_LENGTH:
            raise StockError('INVALID_REFERENCE', length=len(reference_number))
        transaction_date = _parse_date(transaction_date)

        store = get_component_store()

        try:
            with transaction.atomic():
                component = store.get_component(component_id, team_id, lock=True)
                before = component.quantity
                after = resulting_quantity(tx_type, before, quantity)

                if after < 0:
                    raise StockError(
                        'INSUFFICIENT_QUANTITY',
                        available=before,
                        requested=quantity,
                    )
                if after > MAX_QUANTITY:
                    raise StockError('INVALID_QUANTITY', requested=quantity, available=before)

                entry = Transaction.objects.create(
                    component=component,
                    type=tx_type,
                    quantity=quantity,
                    quantity_before=before,
                    quantity_after=after,
                    unit_cost=unit_cost,
                    reference_number=reference_number,
                    notes=(notes or '').strip(),
                    transaction_date=transaction_date,
                    team_id=component.team_id,
                    created_by=user,
                    created_at=timezone.now(),
                )
                store.set_component_quantity(component.pk, team_id, after, expected=before)
        except DatabaseError as e:
            logger.error(
                "stock.storage_failure",
                extra={
                    "component_id": str(component_id),
                    "type": str(tx_type),
                    "qty": str(quantity),
                    "error": str(e),
                },
            )
            raise StockError('STORAGE_FAILURE', component_id=str(component_id)) from e

        logger.info(
            "stock.transaction",
            extra={
                "transaction_id": entry.pk,
                "component_id": entry.component_id,
                "team_id": str(entry.team_id),
                "type": str(tx_type),
                "qty": str(quantity),
                "before": str(before),
                "after": str(after),
            },
        )
        return entry

    @classmethod
    def receive(cls, component_id, team_id, quantity, **kwargs) -> Transaction:
        """Stock entry. Shortcut for apply(type='IN')."""
        return cls.apply(component_id, team_id, TransactionType.IN, quantity, **kwargs)

    @classmethod
    def issue(cls, component_id, team_id, quantity, **kwargs) -> Transaction:
        """
        Stock exit. Shortcut for apply(type='OUT').

        Raises:
            StockError('INSUFFICIENT_QUANTITY'): If quantity > current balance
        """
        return cls.apply(component_id, team_id, TransactionType.OUT, quantity, **kwargs)

    @classmethod
    def adjust(cls, component_id, team_id, new_quantity, **kwargs) -> Transaction:
        """
        Inventory count. Shortcut for apply(type='ADJUST').

        new_quantity is the counted balance, not a delta. Recorded even when
        it equals the current balance, so every count leaves a trace.
        """
        return cls.apply(component_id, team_id, TransactionType.ADJUST, new_quantity, **kwargs)
