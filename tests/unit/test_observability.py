"""Unit tests for observability module."""

import json
import logging

from prometheus_client import REGISTRY
import pytest

from maglo_search.observability import (
    SEARCH_LATENCY,
    JsonFormatter,
    bind_table,
    configure_logging,
    create_span,
    get_metrics,
    get_metrics_content_type,
    get_trace_context,
    init_tracing,
    set_trace_context,
    track_latency,
)
from maglo_search.observability import tracing as tracing_module
from maglo_search.observability.context import update_span_id


def _record(msg="test message", **extra):
    record = logging.LogRecord(
        name="maglo_search.service_layer.search_table",
        level=logging.INFO,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
class TestJsonFormatter:
    """Tests for structured JSON logging."""

    def test_format_includes_trace_context(self):
        set_trace_context("aa" * 16, "bb" * 8, table="invoices")
        data = json.loads(JsonFormatter().format(_record()))

        assert data["message"] == "test message"
        assert data["level"] == "INFO"
        assert data["trace_id"] == "aa" * 16
        assert data["span_id"] == "bb" * 8
        assert data["table"] == "invoices"
        assert data["component"] == "search_table"

    def test_format_includes_extra_fields(self):
        data = json.loads(JsonFormatter().format(_record(query_tokens=2, rows=10)))

        assert data["query_tokens"] == 2
        assert data["rows"] == 10
        assert "pathname" not in data

    def test_format_truncates_and_redacts(self):
        formatter = JsonFormatter()
        data = json.loads(formatter.format(_record("x" * 3000, password="hunter2", note="y" * 600)))

        assert data["message"].endswith("...")
        assert len(data["message"]) == formatter.MAX_MESSAGE_LEN + 3
        assert data["password"] == "[REDACTED]"
        assert len(data["note"]) == 503

    def test_json_default_handles_set_and_bytes(self):
        formatter = JsonFormatter()
        assert formatter._json_default({"b", "a"}) == ["a", "b"]
        assert formatter._json_default(b"abc") == "abc"

    def test_json_default_handles_unorderable_set(self):
        assert len(JsonFormatter()._json_default({1, "a"})) == 2


@pytest.mark.unit
class TestConfigureLogging:
    def test_json_handler(self, restore_root_logger):
        configure_logging("debug", json_output=True)

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)

    def test_plain_handler_and_overrides(self, restore_root_logger):
        configure_logging("warning", json_output=False, logger_levels={"maglo_search.cli": "debug"})

        assert restore_root_logger.level == logging.WARNING
        assert not isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)
        assert logging.getLogger("maglo_search.cli").level == logging.DEBUG
        logging.getLogger("maglo_search.cli").setLevel(logging.NOTSET)


@pytest.mark.unit
class TestTraceContext:
    """Tests for trace context propagation."""

    def test_get_trace_context_generates_ids(self):
        ctx = get_trace_context()
        assert len(ctx["trace_id"]) == 32
        assert len(ctx["span_id"]) == 16

    def test_update_span_id_preserves_trace_id(self):
        set_trace_context("aa" * 16, "bb" * 8, table="alpha")
        update_span_id("cc" * 8)
        ctx = get_trace_context()

        assert ctx["trace_id"] == "aa" * 16
        assert ctx["span_id"] == "cc" * 8
        assert ctx["table"] == "alpha"

    def test_bind_table(self):
        bind_table("transactions")
        assert get_trace_context()["table"] == "transactions"


@pytest.mark.unit
class TestTracing:
    def test_init_tracing_applies_resource_attributes(self):
        provider = init_tracing("test-service", resource_attributes={"service.version": "2.0.0"})
        assert provider.resource.attributes["service.version"] == "2.0.0"

    def test_get_tracer_initializes_when_missing(self):
        tracing_module._tracer_holder["tracer"] = None
        assert tracing_module.get_tracer() is not None

    def test_create_span_updates_span_id(self):
        init_tracing("test-service")
        with create_span("search.test", attributes={"search.table": "t"}) as span:
            expected = format(span.get_span_context().span_id, "016x")
            assert get_trace_context()["span_id"] == expected

    def test_create_span_reraises(self):
        init_tracing("test-service")
        with pytest.raises(RuntimeError):
            with create_span("search.fail"):
                raise RuntimeError("boom")


@pytest.mark.unit
class TestMetrics:
    def test_track_latency_observes(self):
        labels = {"table": "latency-test"}
        before = REGISTRY.get_sample_value("maglo_search_latency_seconds_count", labels) or 0.0

        with track_latency(SEARCH_LATENCY, table="latency-test"):
            pass

        assert REGISTRY.get_sample_value("maglo_search_latency_seconds_count", labels) == before + 1

    def test_get_metrics_exposes_search_metrics(self):
        SEARCH_LATENCY.labels(table="exposed").observe(0.001)
        assert b"maglo_search_latency_seconds" in get_metrics()
        assert get_metrics_content_type().startswith("text/plain")
