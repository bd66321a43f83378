"""
Component model — Inventory item with a live stock balance.
"""

from decimal import Decimal

from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _


class ComponentQuerySet(models.QuerySet):
    """QuerySet with tenant helpers for Component queries."""

    def for_team(self, team_id):
        """Filter components owned by a team."""
        return self.filter(team_id=team_id)

    def active(self):
        """Only components that have not been soft-deleted."""
        return self.filter(is_active=True)


class Component(models.Model):
    """
    An inventory item whose stock level is tracked.

    quantity is the live balance. It is written ONLY by the ledger
    (see stockledger.services.transactions), always together with a
    Transaction row inside one database transaction.
    """

    team_id = models.UUIDField(
        db_index=True,
        verbose_name=_('Team'),
    )
    name = models.CharField(
        max_length=200,
        verbose_name=_('Name'),
    )
    sku = models.CharField(
        max_length=100,
        blank=True,
        default='',
        verbose_name=_('SKU'),
    )
    unit = models.CharField(
        max_length=50,
        blank=True,
        default='',
        verbose_name=_('Unit'),
        help_text=_('Ex: pcs, kg, m'),
    )
    unit_cost = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name=_('Unit cost'),
    )

    quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        default=Decimal('0'),
        verbose_name=_('Quantity'),
    )

    is_active = models.BooleanField(default=True, verbose_name=_('Active'))
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ComponentQuerySet.as_manager()

    class Meta:
        verbose_name = _('Component')
        verbose_name_plural = _('Components')
        ordering = ['name']
        constraints = [
            models.CheckConstraint(
                condition=Q(quantity__gte=0),
                name='stockledger_component_quantity_gte_0',
            ),
            models.CheckConstraint(
                condition=Q(unit_cost__isnull=True) | Q(unit_cost__gte=0),
                name='stockledger_component_unit_cost_gte_0',
            ),
        ]
        indexes = [
            models.Index(fields=['team_id', 'is_active'], name='stockledger_team_id_5b1c0e_idx'),
        ]

    def __str__(self) -> str:
        sku = f" ({self.sku})" if self.sku else ""
        return f"{self.name}{sku}: {self.quantity}"
