# lightotel

A small tracing library with no dependencies. It follows the shape of the
OpenTelemetry tracing API: tracers start spans, and spans record attributes,
events, a status and their start and end times. Every span carries a trace
context, which is a trace id and a span id.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from lightotel.provider import get_tracer, start_span

tracer = get_tracer("checkout", "1.0.0")

root = tracer.start_span("HandleOrder")
root.set_attribute("order_id", "ord-1")
root.set_attribute("items", 3)
root.set_attribute("total", 42.5)
root.set_attribute("express", True)

# A child span keeps the parent's trace id and gets a new span id.
child = tracer.start_span("ChargeCard", root.context)
child.add_event("charge_sent", {"gateway": "primary"})
child.set_status("OK")
child.end()

root.set_status("OK")
root.end()

print(root.context.trace_id, root.context.span_id)
```

A `Span` is also a context manager and ends itself when the block exits,
whether or not an exception was raised; it does not change the status:

```python
with start_span("Cleanup") as span:
    span.set_attribute("files_removed", 12)
```

### Spans (`lightotel.span`)

- `set_attribute(key, value)` appends a `SpanAttribute` to `span.attributes`,
  in the order the calls are made. It holds the key, the value as text and its
  type: `"string"` for `str`, `"int64"` for `int`, `"double"` for `float`
  (written in `%g` form, so `95.5` becomes `"95.5"`) and `"bool"` for `bool`
  (`"true"` or `"false"`). An integer outside the signed 64-bit range raises
  `OverflowError`; any other type raises `TypeError`.
- `add_event(name, attributes=None)` appends a `SpanEvent` to `span.events`
  with the current time and a copy of the given string mapping.
- `set_status(code, message="")` sets `status_code` and `status_message`.
- `end()` records `end_time`; calling it again keeps the first end time.
  `is_ended()` tells whether it has been called.

`start_time`, `end_time` and event timestamps are monotonic nanosecond
readings from `time.perf_counter_ns()`; `end_time` is `None` until the span
is ended. `span.context` and `span.parent_context` are the span's own and its
parent's `TraceContext`.

### Tracers (`lightotel.tracer`)

`Tracer(name, version="")` has a `start_span(name, parent_context=None)`
method. When the parent context is valid, the new span reuses its trace id and
gets a fresh span id; otherwise the span starts a new trace with fresh ids.

### The provider (`lightotel.provider`)

`TracerProvider.get_instance()` returns the single provider for the process.
Its `get_tracer(name, version="")` hands back the same tracer every time it
is asked for the same name and version, creating it the first time. The first
tracer it creates becomes `global_tracer`, unless one is set first.
`set_tracer(tracer)` makes a tracer the `global_tracer` and the one returned
by `get_tracer("default")`.

The module-level `get_tracer(name, version="")` asks the shared provider, and
`start_span(name, parent_context=None)` starts a span on the shared
provider's `"default"` tracer.

### Trace contexts (`lightotel.trace_context`)

`TraceContext` is a frozen dataclass with `trace_id` and `span_id`, both
empty by default. `TraceContext.create()` makes a context with fresh random
ids, each 16 lower-case hexadecimal digits; `generate_trace_id()` and
`generate_span_id()` make single ids of the same form. `is_valid()` is true
when both ids are set.

## Example

The package comes with a small demonstration (`lightotel.hello_world`) that
traces a simulated request, database query and API call, pausing briefly for
each, and then prints the root span's trace id and span id:

```
lightotel-hello-world
```

## What it does not do

Spans are kept only in the objects the caller holds. Nothing collects,
exports, prints or sends finished spans anywhere, and there is no notion of a
current span: a parent context has to be passed to `start_span` by hand.