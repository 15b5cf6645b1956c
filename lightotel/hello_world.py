"""Example program that records a small trace of simulated work."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence

from lightotel.provider import get_tracer, start_span
from lightotel.span import Span


def process_request(request_id: str) -> Span:
    """Trace a simulated request and return its finished span."""
    with start_span("ProcessRequest") as span:
        span.set_attribute("request_id", request_id)
        span.set_attribute("user_id", 12345)
        span.set_attribute("priority", "high")
        time.sleep(0.1)
        span.add_event("request_processed", {"status": "success"})
        span.set_status("OK")
    return span


def database_query(query: str) -> Span:
    """Trace a simulated database query and return its finished span."""
    with start_span("DatabaseQuery") as span:
        span.set_attribute("query", query)
        span.set_attribute("database", "users_db")
        time.sleep(0.05)
        span.add_event("query_executed", {"rows_returned": "10"})
        span.set_status("OK")
    return span


def external_api_call(endpoint: str) -> Span:
    """Trace a simulated external API call and return its finished span."""
    with start_span("ExternalAPICall") as span:
        span.set_attribute("endpoint", endpoint)
        span.set_attribute("method", "GET")
        time.sleep(0.2)
        span.add_event("api_response_received", {"status_code": "200"})
        span.set_status("OK")
    return span


def main(argv: Sequence[str] | None = None) -> int:
    """Run the example and print the root span's ids."""
    if argv is None:
        argv = sys.argv[1:]
    print("=== Lightweight OpenTelemetry C++ Tracing Example ===")

    tracer = get_tracer("hello_world_example", "1.0.0")

    root_span = tracer.start_span("MainOperation")
    root_span.set_attribute("operation_type", "user_request")
    root_span.set_attribute("user_agent", "example-client")

    print("Starting main operation...")

    process_request("req-12345")

    context = root_span.context

    db_span = tracer.start_span("DatabaseOperation", context)
    db_span.set_attribute("operation", "read")

    database_query("SELECT * FROM users WHERE id = 12345")

    api_span = tracer.start_span("ExternalAPIOperation", context)
    api_span.set_attribute("service", "payment_gateway")

    external_api_call("/api/v1/payments/validate")

    db_span.set_status("OK")
    db_span.end()

    api_span.set_status("OK")
    api_span.end()

    root_span.set_status("OK")
    root_span.end()

    print("Operation completed successfully!")
    print(f"Trace ID: {context.trace_id}")
    print(f"Span ID: {context.span_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())