"""Tracers that start spans."""

from __future__ import annotations

from dataclasses import dataclass

from lightotel.span import Span
from lightotel.trace_context import TraceContext


@dataclass(eq=False)
class Tracer:
    """A named, versioned source of spans."""

    name: str
    version: str = ""

    def start_span(self, name: str, parent_context: TraceContext | None = None) -> Span:
        """Start a span, continuing the parent's trace when the parent is valid."""
        parent = parent_context if parent_context is not None else TraceContext()
        if parent.is_valid():
            context = TraceContext(parent.trace_id, TraceContext.generate_span_id())
        else:
            context = TraceContext.create()
        return Span(name, context, parent)