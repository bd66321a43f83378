"""
Stockledger Admin.

- Component: editable, except quantity (only the ledger writes it)
- Transaction: read-only audit trail (created_at, type, before → after)
"""

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from stockledger.models import Component, Transaction


# =========================================================================
# COMPONENT ADMIN
# =========================================================================

class TransactionInline(admin.TabularInline):
    """Latest ledger rows of a component — read-only."""

    model = Transaction
    fields = ['created_at', 'type', 'quantity', 'quantity_before', 'quantity_after',
              'reference_number', 'created_by']
    readonly_fields = fields
    ordering = ['-created_at', '-id']
    extra = 0
    max_num = 0
    can_delete = False
    show_change_link = True


@admin.register(Component)
class ComponentAdmin(admin.ModelAdmin):
    """Component admin — quantity changes only via the ledger."""

    list_display = ['name', 'sku', 'team_id', 'quantity', 'unit', 'is_active']
    list_filter = ['is_active']
    search_fields = ['name', 'sku']
    readonly_fields = ['quantity', 'created_at', 'updated_at']
    inlines = [TransactionInline]


# =========================================================================
# TRANSACTION ADMIN (read-only audit trail)
# =========================================================================

@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    """Transaction admin — read-only. Immutable audit trail."""

    list_display = ['created_at', 'component', 'type', 'quantity',
                    'balance_display', 'reference_number', 'created_by']
    list_filter = ['type', 'created_at']
    search_fields = ['reference_number', 'notes', 'component__name', 'component__sku']
    readonly_fields = ['component', 'type', 'quantity', 'quantity_before', 'quantity_after',
                       'unit_cost', 'reference_number', 'notes', 'transaction_date',
                       'team_id', 'created_by', 'created_at']
    date_hierarchy = 'created_at'
    list_select_related = ['component', 'created_by']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    @admin.display(description=_('Balance'))
    def balance_display(self, obj):
        return f"{obj.quantity_before} → {obj.quantity_after}"
