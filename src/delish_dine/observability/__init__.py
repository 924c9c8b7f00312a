"""Logging, tracing and metrics for the restaurant service."""

from delish_dine.observability.config import configure_logging, setup_observability
from delish_dine.observability.decorators import traced

__all__ = ["setup_observability", "configure_logging", "traced"]
