"""
Stockledger configuration.

Usage in settings.py:
    STOCKLEDGER = {
        "COMPONENT_STORE": "stockledger.adapters.django_store.DjangoComponentStore",
        "REQUIRE_ACTIVE_COMPONENT": True,
        "LOCK_NOWAIT": False,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class StockledgerSettings:
    """Stockledger configuration settings."""

    # Component store backend (dotted path)
    COMPONENT_STORE: str = "stockledger.adapters.django_store.DjangoComponentStore"

    # Inactive (soft-deleted) components are treated as missing
    REQUIRE_ACTIVE_COMPONENT: bool = True

    # Fail fast with STORAGE_FAILURE instead of waiting on a locked component row
    LOCK_NOWAIT: bool = False


def get_stockledger_settings() -> StockledgerSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "STOCKLEDGER", {})
    return StockledgerSettings(**{
        k: v for k, v in user_settings.items()
        if k in StockledgerSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_stockledger_settings(), name)


stockledger_settings = _LazySettings()
