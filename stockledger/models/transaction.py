"""
Transaction model — Immutable ledger of stock events.
"""

from decimal import Decimal

from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from stockledger.models.enums import TransactionType


class TransactionQuerySet(models.QuerySet):
    """Append-only queryset: bulk update() and delete() are refused."""

    def for_team(self, team_id):
        return self.filter(team_id=team_id)

    def update(self, **kwargs):
        raise ValueError(
            "Transactions are immutable. "
            "To correct a balance, record a new ADJUST transaction."
        )

    def delete(self):
        raise ValueError(
            "Transactions are immutable. "
            "To correct a balance, record a new ADJUST transaction."
        )

    delete.queryset_only = True


class Transaction(models.Model):
    """
    Immutable record of one stock-affecting event.

    Rules:
    - NEVER update() or delete()
    - quantity_before/quantity_after are captured once, never recomputed
    - Corrections are new ADJUST transactions

    Created only by the ledger, in the same database transaction
    that writes Component.quantity.
    """

    component = models.ForeignKey(
        'stockledger.Component',
        on_delete=models.PROTECT,
        related_name='transactions',
        verbose_name=_('Component'),
    )
    type = models.CharField(
        max_length=10,
        choices=TransactionType.choices,
        verbose_name=_('Type'),
    )
    quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        verbose_name=_('Quantity'),
        help_text=_('Delta for IN/OUT, new absolute balance for ADJUST'),
    )
    quantity_before = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        verbose_name=_('Quantity before'),
    )
    quantity_after = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        verbose_name=_('Quantity after'),
    )

    unit_cost = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name=_('Unit cost'),
    )
    reference_number = models.CharField(
        max_length=100,
        blank=True,
        default='',
        verbose_name=_('Reference number'),
        help_text=_('Ex: PO-1042, invoice number'),
    )
    notes = models.TextField(blank=True, default='', verbose_name=_('Notes'))
    transaction_date = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        verbose_name=_('Transaction date'),
    )

    team_id = models.UUIDField(db_index=True, verbose_name=_('Team'))
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
        verbose_name=_('Created by'),
    )
    created_at = models.DateTimeField(default=timezone.now, verbose_name=_('Created at'))

    objects = TransactionQuerySet.as_manager()

    class Meta:
        verbose_name = _('Transaction')
        verbose_name_plural = _('Transactions')
        ordering = ['created_at', 'id']
        constraints = [
            models.CheckConstraint(
                condition=Q(quantity__gte=0),
                name='stockledger_transaction_quantity_gte_0',
            ),
            models.CheckConstraint(
                condition=Q(quantity_before__gte=0),
                name='stockledger_transaction_before_gte_0',
            ),
            models.CheckConstraint(
                condition=Q(quantity_after__gte=0),
                name='stockledger_transaction_after_gte_0',
            ),
            models.CheckConstraint(
                condition=Q(type__in=TransactionType.values),
                name='stockledger_transaction_type_valid',
            ),
        ]
        indexes = [
            models.Index(fields=['component', 'created_at'], name='stockledger_compone_8d2f41_idx'),
            models.Index(fields=['team_id', 'created_at'], name='stockledger_team_id_a7e390_idx'),
        ]

    @property
    def delta(self) -> Decimal:
        """Signed change applied to the balance."""
        return self.quantity_after - self.quantity_before

    @property
    def total_value(self) -> Decimal | None:
        """quantity × unit_cost, when a cost was recorded."""
        if self.unit_cost is None:
            return None
        return self.quantity * self.unit_cost

    def save(self, *args, **kwargs):
        """Insert once; any later save is refused."""
        if not self._state.adding:
            raise ValueError(
                "Transactions are immutable. "
                "To correct a balance, record a new ADJUST transaction."
            )
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        """Prevent deletion — the ledger is append-only."""
        raise ValueError(
            "Transactions are immutable. "
            "To correct a balance, record a new ADJUST transaction."
        )

    def __str__(self) -> str:
        return f"{self.type} {self.quantity} | {self.quantity_before} → {self.quantity_after}"
