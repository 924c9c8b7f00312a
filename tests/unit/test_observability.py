"""Unit tests for tracing decorators and metrics helpers."""

from unittest.mock import MagicMock, patch

import pytest

from delish_dine.observability import metrics
from delish_dine.observability.decorators import traced


@pytest.mark.unit
class TestTraced:
    """Test suite for the traced decorator."""

    def test_sync_function(self) -> None:
        @traced("add")
        def add(a: int, b: int) -> int:
            return a + b

        assert add(2, 3) == 5
        assert add.__name__ == "add"

    @pytest.mark.asyncio
    async def test_async_function(self) -> None:
        @traced()
        async def double(value: int) -> int:
            return value * 2

        assert await double(4) == 8

    def test_exception_propagates(self) -> None:
        @traced("explode")
        def explode() -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            explode()

    @pytest.mark.asyncio
    async def test_async_exception_propagates(self) -> None:
        @traced("explode_async")
        async def explode() -> None:
            raise ValueError("bad")

        with pytest.raises(ValueError, match="bad"):
            await explode()


@pytest.mark.unit
class TestMetrics:
    """Test suite for metric helpers."""

    def test_record_created(self) -> None:
        with patch.object(metrics, "records_created_counter", MagicMock()) as counter:
            metrics.record_created("orders")

        counter.add.assert_called_once_with(1, {"collection": "orders"})

    def test_record_validation_failure_with_field(self) -> None:
        with patch.object(metrics, "validation_failure_counter", MagicMock()) as counter:
            metrics.record_validation_failure("contact", "email")
            metrics.record_validation_failure("orders")

        counter.add.assert_any_call(1, {"resource": "contact", "field": "email"})
        counter.add.assert_any_call(1, {"resource": "orders"})
