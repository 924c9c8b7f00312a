"""OpenTelemetry tracing decorators."""

import asyncio
import contextlib
import functools
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Span

F = TypeVar("F", bound=Callable[..., Any])

SERVICE_NAME = "delish-dine"


@contextlib.contextmanager
def _operation_span(tracer: trace.Tracer, name: str, func_name: str) -> Iterator[Span]:
    """Open a span that records success or the raised exception."""
    with tracer.start_as_current_span(name) as span:
        span.set_attribute("service.name", SERVICE_NAME)
        span.set_attribute("function.name", func_name)
        try:
            yield span
        except Exception as e:
            span.set_attribute("success", False)
            span.set_attribute("error.type", type(e).__name__)
            span.set_attribute("error.message", str(e))
            span.record_exception(e)
            raise
        span.set_attribute("success", True)


def traced(span_name: str | None = None) -> Callable[[F], F]:
    """Decorator to add OpenTelemetry tracing to a function.

    Creates a new span for the decorated function with automatic error tracking.
    Async functions are supported.

    Args:
        span_name: Name for the span (defaults to function name if not provided)

    Returns:
        Decorated function with tracing

    Example:
        @traced("create_order")
        async def create_order(self, payload: dict) -> Order:
            ...
    """

    def decorator(func: F) -> F:
        name = span_name or func.__name__
        tracer = trace.get_tracer(SERVICE_NAME)

        if asyncio.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with _operation_span(tracer, name, func.__name__):
                    return await func(*args, **kwargs)

            return async_wrapper  # type: ignore

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with _operation_span(tracer, name, func.__name__):
                return func(*args, **kwargs)

        return sync_wrapper  # type: ignore

    return decorator
