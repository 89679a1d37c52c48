# src/logging/context.py — v1
"""Contextual logging support — attach operation, category, document to records."""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator

# Context variables for structured logging — set per cache operation.
_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation", default=None
)
_category: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "category", default=None
)
_document: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "document", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    operation: str | None = None
    category: str | None = None
    document: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        operation=_operation.get(),
        category=_category.get(),
        document=_document.get(),
    )


@contextmanager
def operation_context(operation: str, category: str | None = None) -> Iterator[None]:
    """Scope operation-level context to a block; previous values are restored."""
    op_token = _operation.set(operation)
    cat_token = _category.set(category)
    try:
        yield
    finally:
        _category.reset(cat_token)
        _operation.reset(op_token)


def set_document_context(document: str | None) -> None:
    """Set the document currently being resolved."""
    _document.set(document)


def clear_context() -> None:
    """Reset all context variables."""
    _operation.set(None)
    _category.set(None)
    _document.set(None)
