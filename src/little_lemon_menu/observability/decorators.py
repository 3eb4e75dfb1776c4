"""Tracing decorator for menu service operations.

Spans record `service.name`, the wrapped function name when an explicit span
name is given, and `success`. A raised exception is recorded on the span with
its type and message before propagating to the caller.
"""

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Span

F = TypeVar("F", bound=Callable[..., Any])


def _start_attributes(span: Span, service_name: str, span_name: str | None, func: Callable[..., Any]) -> None:
    span.set_attribute("service.name", service_name)
    if span_name:
        span.set_attribute("function.name", func.__name__)


def _record_failure(span: Span, e: Exception) -> None:
    span.set_attribute("success", False)
    span.set_attribute("error.type", type(e).__name__)
    span.set_attribute("error.message", str(e))
    span.record_exception(e)


def traced(span_name: str | None = None, service_name: str = "little-lemon-menu") -> Callable[[F], F]:
    """Decorator to add OpenTelemetry tracing to a function.

    Both plain and async functions are supported. Expected failures that a
    function reports through its return value (such as a menu load with
    an error_message) still count as success.

    Args:
        span_name: Name for the span (defaults to function name if not provided)
        service_name: Service name for span attributes

    Returns:
        Decorated function with tracing

    Example:
        @traced("load_menu")
        async def load_menu(self) -> MenuLoadResult:
            ...
    """

    def decorator(func: F) -> F:
        name = span_name or func.__name__
        tracer = trace.get_tracer(service_name)

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(name) as span:
                _start_attributes(span, service_name, span_name, func)
                try:
                    result = await func(*args, **kwargs)
                    span.set_attribute("success", True)
                    return result
                except Exception as e:
                    _record_failure(span, e)
                    raise

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(name) as span:
                _start_attributes(span, service_name, span_name, func)
                try:
                    result = func(*args, **kwargs)
                    span.set_attribute("success", True)
                    return result
                except Exception as e:
                    _record_failure(span, e)
                    raise

        if inspect.iscoroutinefunction(func):
            return async_wrapper  # type: ignore
        return sync_wrapper  # type: ignore

    return decorator
