"""
Django Component Store — ORM-backed implementation of ComponentStore.

Usage in settings.py (this is the default):
    STOCKLEDGER = {
        "COMPONENT_STORE": "stockledger.adapters.django_store.DjangoComponentStore",
    }

Must be called inside transaction.atomic() when lock=True: the row lock
(SELECT ... FOR UPDATE) is held until the surrounding transaction ends.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.utils import timezone

from stockledger.conf import stockledger_settings
from stockledger.exceptions import StockError
from stockledger.models.component import Component

logger = logging.getLogger(__name__)


class DjangoComponentStore:
    """Component store over the stockledger.Component table."""

    def get_component(self, component_id, team_id, *, lock: bool = False) -> Component:
        try:
            qs = Component.objects.for_team(team_id)
            if stockledger_settings.REQUIRE_ACTIVE_COMPONENT:
                qs = qs.active()
            if lock:
                qs = qs.select_for_update(nowait=stockledger_settings.LOCK_NOWAIT)
            return qs.get(pk=component_id)
        except (Component.DoesNotExist, ValueError, ValidationError):
            # Malformed ids are indistinguishable from foreign ones
            raise StockError(
                'COMPONENT_NOT_FOUND',
                component_id=str(component_id),
                team_id=str(team_id),
            ) from None

    def set_component_quantity(self, component_id, team_id, new_quantity: Decimal,
                               *, expected: Decimal | None = None) -> None:
        try:
            qs = Component.objects.for_team(team_id).filter(pk=component_id)
            if expected is not None:
                qs = qs.filter(quantity=expected)
        except (ValueError, ValidationError):
            raise StockError(
                'COMPONENT_NOT_FOUND',
                component_id=str(component_id),
                team_id=str(team_id),
            ) from None

        updated = qs.update(quantity=new_quantity, updated_at=timezone.now())
        if updated == 1:
            return

        if expected is not None:
            logger.warning(
                "stock.store.conflict",
                extra={
                    "component_id": str(component_id),
                    "expected": str(expected),
                },
            )
            raise StockError('CONCURRENT_MODIFICATION', component_id=str(component_id))
        raise StockError(
            'COMPONENT_NOT_FOUND',
            component_id=str(component_id),
            team_id=str(team_id),
        )
