"""Fault context propagation for structured logs.

The harness activates many faults across many nodes; every log line
emitted while a fault is being applied carries that fault's id and the
correlation id of the harness run, so logs from different hosts can be
joined afterwards.

Usage:
    with bind_fault_context("partition-1", correlation_id=run_id):
        fault.activate(platform)

    # In structlog configuration
    processors = [..., fault_context_processor, ...]
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

# Empty string means "not set"
_fault_id: ContextVar[str] = ContextVar("fault_id", default="")
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Generate a new correlation ID (UUID4)."""
    return str(uuid4())


def get_fault_id() -> str:
    """Fault id bound to the current context, or empty string."""
    return _fault_id.get()


def get_correlation_id() -> str:
    """Correlation id bound to the current context, or empty string."""
    return _correlation_id.get()


@contextmanager
def bind_fault_context(
    fault_id: str, correlation_id: str | None = None
) -> Iterator[str]:
    """Bind a fault id (and correlation id) for the duration of the block.

    Previous values are restored on exit, including when the block raises.

    Args:
        fault_id: Id of the fault being applied.
        correlation_id: Harness run id; a fresh one is generated when
            neither this argument nor an enclosing context provides one.

    Yields:
        The correlation id in effect inside the block.
    """
    effective = correlation_id or get_correlation_id() or generate_correlation_id()
    fault_token = _fault_id.set(fault_id)
    correlation_token = _correlation_id.set(effective)
    try:
        yield effective
    finally:
        _correlation_id.reset(correlation_token)
        _fault_id.reset(fault_token)


def fault_context_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding fault_id and correlation_id to log entries.

    Values already present in the event are left alone.
    """
    fault_id = get_fault_id()
    if fault_id:
        event_dict.setdefault("fault_id", fault_id)
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
