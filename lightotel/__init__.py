"""Lightweight tracing: trace contexts, spans, tracers, a tracer provider and an example."""

__version__ = "0.1.0"
__all__ = ["trace_context", "span", "tracer", "provider", "hello_world"]