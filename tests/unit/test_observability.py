"""Unit tests for the tracing decorator."""

from unittest.mock import patch

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from little_lemon_menu.models.menu_models import MenuLoadResult, MenuSource
from little_lemon_menu.observability import traced


@pytest.mark.unit
class TestTraced:
    """Test suite for the traced decorator."""

    @pytest.fixture
    def exporter(self) -> InMemorySpanExporter:
        """Route spans from newly decorated functions to an in-memory exporter."""
        exporter = InMemorySpanExporter()
        provider = TracerProvider()
        provider.add_span_processor(SimpleSpanProcessor(exporter))

        with patch(
            "little_lemon_menu.observability.decorators.trace.get_tracer",
            side_effect=provider.get_tracer,
        ):
            yield exporter

    @pytest.mark.asyncio
    async def test_async_span_marks_success(self, exporter: InMemorySpanExporter) -> None:
        """Test that a menu load that returns normally produces a successful span."""

        @traced("load_menu")
        async def load_menu() -> MenuLoadResult:
            return MenuLoadResult(source=MenuSource.NONE, error_message="Could not load menu")

        result = await load_menu()

        spans = exporter.get_finished_spans()
        assert result.error_message == "Could not load menu"
        assert len(spans) == 1
        assert spans[0].name == "load_menu"
        assert spans[0].attributes["service.name"] == "little-lemon-menu"
        assert spans[0].attributes["function.name"] == "load_menu"
        assert spans[0].attributes["success"] is True

    @pytest.mark.asyncio
    async def test_async_exception_recorded_and_raised(self, exporter: InMemorySpanExporter) -> None:
        """Test that an exception is recorded on the span and still raised."""

        @traced("load_menu")
        async def load_menu() -> MenuLoadResult:
            raise RuntimeError("storage handle closed")

        with pytest.raises(RuntimeError):
            await load_menu()

        span = exporter.get_finished_spans()[0]
        assert span.attributes["success"] is False
        assert span.attributes["error.type"] == "RuntimeError"
        assert span.attributes["error.message"] == "storage handle closed"

    def test_sync_span_defaults_to_function_name(self, exporter: InMemorySpanExporter) -> None:
        """Test that plain functions are traced under their own name."""

        @traced()
        def count_categories(categories: list[str]) -> int:
            return len(set(categories))

        assert count_categories(["mains", "starters", "mains"]) == 2

        span = exporter.get_finished_spans()[0]
        assert span.name == "count_categories"
        assert "function.name" not in span.attributes
        assert span.attributes["success"] is True
