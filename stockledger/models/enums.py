"""
Enums for Stockledger models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class TransactionType(models.TextChoices):
    """
    Kind of stock-affecting event.

    IN:     Receipt. quantity is added to the balance.
    OUT:    Issue. quantity is subtracted; never below zero.
    ADJUST: Stock count. quantity IS the new balance, not a delta.
    """
    IN = 'IN', _('In')
    OUT = 'OUT', _('Out')
    ADJUST = 'ADJUST', _('Adjust')
