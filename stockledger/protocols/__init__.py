"""
Stockledger Protocols.

Defines interfaces for external system integration.
"""

from stockledger.protocols.store import ComponentStore

__all__ = [
    "ComponentStore",
]
