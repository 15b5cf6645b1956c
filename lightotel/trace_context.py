"""Trace and span identifiers carried between spans."""

from __future__ import annotations

import secrets
from dataclasses import dataclass

_ID_BITS = 64
_ID_HEX_WIDTH = 16


def _random_hex_id() -> str:
    return f"{secrets.randbits(_ID_BITS):0{_ID_HEX_WIDTH}x}"


@dataclass(frozen=True)
class TraceContext:
    """The trace id and span id that identify a span within a trace."""

    trace_id: str = ""
    span_id: str = ""

    def is_valid(self) -> bool:
        """Return True when both the trace id and the span id are set."""
        return bool(self.trace_id) and bool(self.span_id)

    @staticmethod
    def generate_trace_id() -> str:
        """Return a new random trace id as 16 lower-case hex digits."""
        return _random_hex_id()

    @staticmethod
    def generate_span_id() -> str:
        """Return a new random span id as 16 lower-case hex digits."""
        return _random_hex_id()

    @classmethod
    def create(cls) -> TraceContext:
        """Return a context with freshly generated trace and span ids."""
        return cls(cls.generate_trace_id(), cls.generate_span_id())