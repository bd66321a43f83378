"""
Component store loader.

Loads the configured ComponentStore from settings.

Usage:
    from stockledger.adapters import get_component_store

    store = get_component_store()
    component = store.get_component(component_id, team_id)

Settings:
    STOCKLEDGER = {
        "COMPONENT_STORE": "stockledger.adapters.django_store.DjangoComponentStore",
    }

A blank or unimportable COMPONENT_STORE raises ImproperlyConfigured.
"""

from __future__ import annotations

import logging
import threading

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from stockledger.conf import stockledger_settings
from stockledger.protocols.store import ComponentStore

logger = logging.getLogger(__name__)


# Cached store instance
_lock = threading.Lock()
_component_store: ComponentStore | None = None


def get_component_store() -> ComponentStore:
    """
    Return the configured component store.

    Returns:
        ComponentStore instance

    Raises:
        ImproperlyConfigured: If COMPONENT_STORE is blank, fails to import
            or does not implement ComponentStore
    """
    global _component_store

    if _component_store is None:
        with _lock:
            if _component_store is None:  # double-checked
                store_path = stockledger_settings.COMPONENT_STORE

                if not store_path:
                    raise ImproperlyConfigured(
                        "STOCKLEDGER['COMPONENT_STORE'] must be configured. "
                        "Example: 'stockledger.adapters.django_store.DjangoComponentStore'"
                    )

                try:
                    store_class = import_string(store_path)
                except ImportError as e:
                    raise ImproperlyConfigured(
                        f"Failed to import component store '{store_path}': {e}"
                    ) from e

                store = store_class()
                if not isinstance(store, ComponentStore):
                    raise ImproperlyConfigured(
                        f"'{store_path}' does not implement ComponentStore"
                    )
                _component_store = store
                logger.debug("Loaded component store: %s", store_path)

    return _component_store


def reset_component_store() -> None:
    """Reset the cached store. Useful for testing."""
    global _component_store
    _component_store = None
