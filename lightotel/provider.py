"""A process-wide registry of tracers, plus shortcuts that use it."""

from __future__ import annotations

from typing import ClassVar

from lightotel.span import Span
from lightotel.trace_context import TraceContext
from lightotel.tracer import Tracer

_DEFAULT_TRACER_NAME = "default"


class TracerProvider:
    """Hands out tracers, one per name and version.

    The first tracer created becomes the global tracer unless one has
    been set explicitly with :meth:`set_tracer`.
    """

    _instance: ClassVar[TracerProvider | None] = None

    def __init__(self) -> None:
        self._tracers: dict[str, Tracer] = {}
        self.global_tracer: Tracer | None = None

    @classmethod
    def get_instance(cls) -> TracerProvider:
        """Return the shared provider, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @staticmethod
    def _key(name: str, version: str) -> str:
        return f"{name}:{version}"

    def get_tracer(self, name: str, version: str = "") -> Tracer:
        """Return the tracer for this name and version, creating it if needed."""
        key = self._key(name, version)
        tracer = self._tracers.get(key)
        if tracer is None:
            tracer = Tracer(name, version)
            self._tracers[key] = tracer
            if self.global_tracer is None:
                self.global_tracer = tracer
        return tracer

    def set_tracer(self, tracer: Tracer) -> None:
        """Make ``tracer`` the global tracer and the one used by default."""
        self.global_tracer = tracer
        self._tracers[self._key(_DEFAULT_TRACER_NAME, "")] = tracer


def get_tracer(name: str, version: str = "") -> Tracer:
    """Return a tracer from the shared provider."""
    return TracerProvider.get_instance().get_tracer(name, version)


def start_span(name: str, parent_context: TraceContext | None = None) -> Span:
    """Start a span on the shared provider's default tracer."""
    return get_tracer(_DEFAULT_TRACER_NAME).start_span(name, parent_context)