"""
Stockledger Adapters.

Implementations of protocols for external systems.
"""

from stockledger.adapters.loader import get_component_store, reset_component_store

__all__ = [
    "get_component_store",
    "reset_component_store",
]
