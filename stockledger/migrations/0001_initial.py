"""
Initial migration for Stockledger models.
"""

from decimal import Decimal
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    """Create Stockledger models: Component, Transaction."""

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Component',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('team_id', models.UUIDField(db_index=True, verbose_name='Team')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('sku', models.CharField(blank=True, default='', max_length=100, verbose_name='SKU')),
                ('unit', models.CharField(blank=True, default='', help_text='Ex: pcs, kg, m', max_length=50, verbose_name='Unit')),
                ('unit_cost', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, verbose_name='Unit cost')),
                ('quantity', models.DecimalField(decimal_places=3, default=Decimal('0'), max_digits=12, verbose_name='Quantity')),
                ('is_active', models.BooleanField(default=True, verbose_name='Active')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Component',
                'verbose_name_plural': 'Components',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['team_id', 'is_active'], name='stockledger_team_id_5b1c0e_idx')],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('quantity__gte', 0)), name='stockledger_component_quantity_gte_0'),
                    models.CheckConstraint(condition=models.Q(('unit_cost__isnull', True), ('unit_cost__gte', 0), _connector='OR'), name='stockledger_component_unit_cost_gte_0'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Transaction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(choices=[('IN', 'In'), ('OUT', 'Out'), ('ADJUST', 'Adjust')], max_length=10, verbose_name='Type')),
                ('quantity', models.DecimalField(decimal_places=3, help_text='Delta for IN/OUT, new absolute balance for ADJUST', max_digits=12, verbose_name='Quantity')),
                ('quantity_before', models.DecimalField(decimal_places=3, max_digits=12, verbose_name='Quantity before')),
                ('quantity_after', models.DecimalField(decimal_places=3, max_digits=12, verbose_name='Quantity after')),
                ('unit_cost', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, verbose_name='Unit cost')),
                ('reference_number', models.CharField(blank=True, default='', help_text='Ex: PO-1042, invoice number', max_length=100, verbose_name='Reference number')),
                ('notes', models.TextField(blank=True, default='', verbose_name='Notes')),
                ('transaction_date', models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='Transaction date')),
                ('team_id', models.UUIDField(db_index=True, verbose_name='Team')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Created at')),
                ('component', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='transactions', to='stockledger.component', verbose_name='Component')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Created by')),
            ],
            options={
                'verbose_name': 'Transaction',
                'verbose_name_plural': 'Transactions',
                'ordering': ['created_at', 'id'],
                'indexes': [
                    models.Index(fields=['component', 'created_at'], name='stockledger_compone_8d2f41_idx'),
                    models.Index(fields=['team_id', 'created_at'], name='stockledger_team_id_a7e390_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('quantity__gte', 0)), name='stockledger_transaction_quantity_gte_0'),
                    models.CheckConstraint(condition=models.Q(('quantity_before__gte', 0)), name='stockledger_transaction_before_gte_0'),
                    models.CheckConstraint(condition=models.Q(('quantity_after__gte', 0)), name='stockledger_transaction_after_gte_0'),
                    models.CheckConstraint(condition=models.Q(('type__in', ['IN', 'OUT', 'ADJUST'])), name='stockledger_transaction_type_valid'),
                ],
            },
        ),
    ]
