"""
Tests for Stockledger models.
"""

from decimal import Decimal

import pytest
from django.contrib import admin
from django.db import IntegrityError, transaction

from stockledger import ledger
from stockledger.models import Component, Transaction


pytestmark = pytest.mark.django_db


class TestTransactionImmutability:
    """Ledger rows are append-only."""

    def test_save_existing_raises(self, component, team_id):
        """Saving an existing transaction is refused."""
        tx = ledger.receive(component.pk, team_id, 5)
        tx.quantity_after = Decimal('1')

        with pytest.raises(ValueError):
            tx.save()

        tx.refresh_from_db()
        assert tx.quantity_after == Decimal('105')

    def test_delete_raises(self, component, team_id):
        """Deleting a transaction is refused."""
        tx = ledger.receive(component.pk, team_id, 5)

        with pytest.raises(ValueError):
            tx.delete()

        assert Transaction.objects.filter(pk=tx.pk).exists()

    def test_queryset_update_raises(self, component, team_id):
        """Bulk update is refused."""
        ledger.receive(component.pk, team_id, 5)

        with pytest.raises(ValueError):
            Transaction.objects.filter(component=component).update(notes='edited')

    def test_queryset_delete_raises(self, component, team_id):
        """Bulk delete is refused."""
        ledger.receive(component.pk, team_id, 5)

        with pytest.raises(ValueError):
            Transaction.objects.all().delete()

        assert Transaction.objects.count() == 1


class TestConstraints:
    """Database-level guards."""

    def test_component_quantity_never_negative(self, component):
        """The balance column rejects negative values."""
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Component.objects.filter(pk=component.pk).update(quantity=Decimal('-1'))

    def test_transaction_after_never_negative(self, component, team_id):
        """The ledger column rejects negative balances."""
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Transaction.objects.create(
                    component=component,
                    type='OUT',
                    quantity=Decimal('101'),
                    quantity_before=Decimal('100'),
                    quantity_after=Decimal('-1'),
                    team_id=team_id,
                )


class TestComponent:
    """Component helpers."""

    def test_for_team(self, make_component, team_id, other_team_id):
        """for_team() only returns the team's components."""
        mine = make_component('1')
        make_component('1', team=other_team_id)

        assert list(Component.objects.for_team(team_id)) == [mine]

    def test_active(self, make_component):
        """active() hides soft-deleted components."""
        live = make_component('1', name='A')
        make_component('1', name='B', is_active=False)

        assert list(Component.objects.active()) == [live]

    def test_str(self, component):
        assert str(component) == 'M3 hex bolt (BOLT-M3): 100'

    def test_transaction_str(self, component, team_id):
        tx = ledger.issue(component.pk, team_id, 30)

        assert str(tx) == 'OUT 30 | 100.000 → 70.000'


class TestAdmin:
    """Admin registrations."""

    def test_transaction_admin_is_read_only(self):
        """Audit trail cannot be added, changed or deleted from the admin."""
        model_admin = admin.site._registry[Transaction]

        assert not model_admin.has_add_permission(None)
        assert not model_admin.has_change_permission(None)
        assert not model_admin.has_delete_permission(None)

    def test_component_quantity_read_only(self):
        """Balance is not editable from the admin."""
        model_admin = admin.site._registry[Component]

        assert 'quantity' in model_admin.readonly_fields

    def test_balance_display(self, component, team_id):
        model_admin = admin.site._registry[Transaction]
        tx = ledger.receive(component.pk, team_id, 1)

        assert model_admin.balance_display(tx) == '100.000 → 101.000'
