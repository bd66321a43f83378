"""
Tests for StockError.
"""

from decimal import Decimal

import pytest

from stockledger import StockError


class TestStockError:
    """Codes map to kinds, retryability and status codes."""

    @pytest.mark.parametrize('code, kind, retryable, status', [
        ('COMPONENT_NOT_FOUND', StockError.NOT_FOUND, False, 404),
        ('TRANSACTION_NOT_FOUND', StockError.NOT_FOUND, False, 404),
        ('INVALID_TYPE', StockError.INVALID_ARGUMENT, False, 400),
        ('INVALID_QUANTITY', StockError.INVALID_ARGUMENT, False, 400),
        ('INSUFFICIENT_QUANTITY', StockError.INSUFFICIENT_STOCK, False, 409),
        ('CONCURRENT_MODIFICATION', StockError.STORAGE_FAILURE, True, 503),
        ('STORAGE_FAILURE', StockError.STORAGE_FAILURE, True, 503),
    ])
    def test_kinds(self, code, kind, retryable, status):
        error = StockError(code)

        assert error.kind == kind
        assert error.is_retryable is retryable
        assert error.status_code == status

    def test_default_message(self):
        assert StockError('INSUFFICIENT_QUANTITY').message == 'Insufficient stock'

    def test_custom_message(self):
        error = StockError('INSUFFICIENT_QUANTITY', 'Only 3 left')

        assert error.message == 'Only 3 left'
        assert str(error) == 'Only 3 left'

    def test_shortcuts(self):
        error = StockError('INSUFFICIENT_QUANTITY', available=Decimal('3'), requested=Decimal('5'))

        assert error.available == Decimal('3')
        assert error.requested == Decimal('5')

    def test_shortcut_defaults(self):
        error = StockError('INVALID_TYPE')

        assert error.available == Decimal('0')
        assert error.requested == Decimal('0')

    def test_as_dict(self):
        error = StockError('INSUFFICIENT_QUANTITY', available=Decimal('3'), component_id='9')

        assert error.as_dict() == {
            'code': 'INSUFFICIENT_QUANTITY',
            'kind': 'insufficient_stock',
            'message': 'Insufficient stock',
            'data': {'available': '3', 'component_id': '9'},
        }
