"""
Exceptions for Stockledger.

All errors are StockError with a structured code for programmatic handling.
Each code belongs to one kind (not_found, invalid_argument, insufficient_stock,
storage_failure), which decides whether a caller may retry.
"""

from decimal import Decimal
from typing import Any


class BaseError(Exception):
    """
    Exception carrying a machine-readable code, a message and context data.

    Subclasses provide ``_default_messages`` so callers only need the code.
    """

    _default_messages: dict[str, str] = {}

    def __init__(self, code: str, message: str | None = None, **data: Any):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.code!r}, {self.message!r})"


class StockError(BaseError):
    """
    Structured exception for ledger operations.

    Usage:
        try:
            ledger.issue(component_id, team_id, 10)
        except StockError as e:
            if e.code == 'INSUFFICIENT_QUANTITY':
                print(f"Only {e.available} in stock")
            elif e.is_retryable:
                ...  # run the whole operation again

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
    """

    NOT_FOUND = 'not_found'
    INVALID_ARGUMENT = 'invalid_argument'
    INSUFFICIENT_STOCK = 'insufficient_stock'
    STORAGE_FAILURE = 'storage_failure'

    _default_messages = {
        'COMPONENT_NOT_FOUND': 'Component not found or does not belong to this team',
        'TRANSACTION_NOT_FOUND': 'Transaction not found',
        'INVALID_TYPE': 'Invalid transaction type. Must be one of: IN, OUT, ADJUST',
        'INVALID_QUANTITY': 'Invalid quantity (must be a non-negative number)',
        'INVALID_UNIT_COST': 'Unit cost must be greater than or equal to 0',
        'INVALID_REFERENCE': 'Reference number must be at most 100 characters',
        'INVALID_DATE': 'Transaction date must be a valid ISO 8601 datetime',
        'INSUFFICIENT_QUANTITY': 'Insufficient stock',
        'CONCURRENT_MODIFICATION': 'Concurrent modification detected',
        'STORAGE_FAILURE': 'Stock transaction could not be committed',
    }

    _kinds = {
        'COMPONENT_NOT_FOUND': NOT_FOUND,
        'TRANSACTION_NOT_FOUND': NOT_FOUND,
        'INVALID_TYPE': INVALID_ARGUMENT,
        'INVALID_QUANTITY': INVALID_ARGUMENT,
        'INVALID_UNIT_COST': INVALID_ARGUMENT,
        'INVALID_REFERENCE': INVALID_ARGUMENT,
        'INVALID_DATE': INVALID_ARGUMENT,
        'INSUFFICIENT_QUANTITY': INSUFFICIENT_STOCK,
        'CONCURRENT_MODIFICATION': STORAGE_FAILURE,
        'STORAGE_FAILURE': STORAGE_FAILURE,
    }

    _status_codes = {
        NOT_FOUND: 404,
        INVALID_ARGUMENT: 400,
        INSUFFICIENT_STOCK: 409,
        STORAGE_FAILURE: 503,
    }

    @property
    def kind(self) -> str:
        """Error family; unknown codes count as invalid arguments."""
        return self._kinds.get(self.code, self.INVALID_ARGUMENT)

    @property
    def is_retryable(self) -> bool:
        """Only storage failures leave no state behind and may be retried as-is."""
        return self.kind == self.STORAGE_FAILURE

    @property
    def status_code(self) -> int:
        """HTTP status an outer layer should answer with."""
        return self._status_codes[self.kind]

    @property
    def available(self) -> Decimal:
        """Shortcut for data['available']."""
        return self.data.get('available', Decimal('0'))

    @property
    def requested(self) -> Decimal:
        """Shortcut for data['requested']."""
        return self.data.get('requested', Decimal('0'))

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'kind': self.kind,
            'message': self.message,
            'data': {
                k: str(v) if isinstance(v, Decimal) else v
                for k, v in self.data.items()
            }
        }
