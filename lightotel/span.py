"""Spans: timed operations with attributes, events and a status."""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass, field

from lightotel.trace_context import TraceContext

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass
class SpanEvent:
    """A named point in time within a span."""

    name: str
    timestamp: int
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SpanAttribute:
    """An attribute recorded on a span, stored as text with its type name."""

    key: str
    value: str
    type: str


def _encode_value(value: object) -> tuple[str, str]:
    if isinstance(value, bool):
        return ("true" if value else "false", "bool")
    if isinstance(value, int):
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise OverflowError(f"integer attribute out of 64-bit range: {value}")
        return (str(value), "int64")
    if isinstance(value, float):
        return (f"{value:g}", "double")
    if isinstance(value, str):
        return (value, "string")
    raise TypeError(f"unsupported attribute type: {type(value).__name__}")


@dataclass(eq=False)
class Span:
    """A single operation within a trace.

    Times are monotonic nanosecond readings; ``end_time`` stays ``None``
    until the span is ended.
    """

    name: str
    context: TraceContext
    parent_context: TraceContext = field(default_factory=TraceContext)
    start_time: int = field(default_factory=time.perf_counter_ns)
    end_time: int | None = None
    attributes: list[SpanAttribute] = field(default_factory=list)
    events: list[SpanEvent] = field(default_factory=list)
    status_code: str = ""
    status_message: str = ""

    def set_attribute(self, key: str, value: str | int | float | bool) -> None:
        """Record an attribute; strings, 64-bit ints, floats and bools are accepted."""
        text, type_name = _encode_value(value)
        self.attributes.append(SpanAttribute(key, text, type_name))

    def add_event(self, name: str, attributes: Mapping[str, str] | None = None) -> None:
        """Record a named event, timestamped now."""
        self.events.append(
            SpanEvent(name, time.perf_counter_ns(), dict(attributes or {}))
        )

    def set_status(self, code: str, message: str = "") -> None:
        """Set the span's status code and message."""
        self.status_code = code
        self.status_message = message

    def end(self) -> None:
        """Mark the span as finished; later calls leave the end time alone."""
        if self.end_time is None:
            self.end_time = time.perf_counter_ns()

    def is_ended(self) -> bool:
        """Return True once the span has been ended."""
        return self.end_time is not None

    def __enter__(self) -> Span:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.end()