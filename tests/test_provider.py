import pytest

from lightotel.provider import TracerProvider, get_tracer, start_span
from lightotel.trace_context import TraceContext
from lightotel.tracer import Tracer


@pytest.fixture
def provider():
    return TracerProvider.get_instance()


def test_get_tracer(provider):
    tracer = provider.get_tracer("test_tracer", "1.0.0")
    assert tracer.name == "test_tracer"
    assert tracer.version == "1.0.0"


def test_get_same_tracer(provider):
    tracer1 = provider.get_tracer("same_tracer", "1.0.0")
    tracer2 = provider.get_tracer("same_tracer", "1.0.0")
    assert tracer1 is tracer2


def test_get_different_tracers(provider):
    tracer1 = provider.get_tracer("tracer1", "1.0.0")
    tracer2 = provider.get_tracer("tracer2", "1.0.0")
    assert tracer1 is not tracer2
    assert tracer1.name == "tracer1"
    assert tracer2.name == "tracer2"


def test_get_tracer_with_different_versions(provider):
    tracer1 = provider.get_tracer("versioned_tracer", "1.0.0")
    tracer2 = provider.get_tracer("versioned_tracer", "2.0.0")
    assert tracer1 is not tracer2
    assert tracer1.version == "1.0.0"
    assert tracer2.version == "2.0.0"


def test_set_tracer(provider):
    custom_tracer = Tracer("custom_tracer", "1.0.0")
    provider.set_tracer(custom_tracer)
    global_tracer = provider.get_tracer("default")
    assert global_tracer.name == "custom_tracer"
    assert provider.global_tracer is custom_tracer


def test_get_tracer_without_version(provider):
    tracer = provider.get_tracer("no_version_tracer")
    assert tracer.name == "no_version_tracer"
    assert tracer.version == ""


def test_tracer_singleton():
    first = TracerProvider.get_instance()
    second = TracerProvider.get_instance()
    assert first is second
    tracer = first.get_tracer("singleton_check", "1")
    assert second.get_tracer("singleton_check", "1") is tracer
    assert tracer.name == "singleton_check"


def test_tracer_spans(provider):
    tracer = provider.get_tracer("span_test_tracer")
    span = tracer.start_span("test_span")
    assert span.context.is_valid()


def test_multiple_tracers_with_spans(provider):
    tracer1 = provider.get_tracer("tracer1")
    tracer2 = provider.get_tracer("tracer2")
    span1 = tracer1.start_span("span1")
    span2 = tracer2.start_span("span2")
    assert span1.context.trace_id != span2.context.trace_id


def test_first_tracer_becomes_global():
    fresh = TracerProvider()
    assert fresh.global_tracer is None
    first = fresh.get_tracer("first")
    fresh.get_tracer("second")
    assert fresh.global_tracer is first


def test_set_tracer_on_fresh_provider():
    fresh = TracerProvider()
    custom = Tracer("mine", "3")
    fresh.set_tracer(custom)
    assert fresh.get_tracer("default") is custom
    assert fresh.get_tracer("default", "3") is not custom


def test_module_get_tracer_uses_shared_provider(provider):
    assert get_tracer("shared_tracer", "9") is provider.get_tracer("shared_tracer", "9")


def test_module_start_span_without_parent():
    span = start_span("root")
    assert span.name == "root"
    assert span.context.is_valid()
    assert not span.parent_context.is_valid()


def test_module_start_span_with_parent():
    parent = TraceContext.create()
    span = start_span("child", parent)
    assert span.context.trace_id == parent.trace_id
    assert span.context.span_id != parent.span_id
    assert span.parent_context == parent