"""Metrics and tracing tests."""

import pytest
from prometheus_client import CollectorRegistry

from gridforge.monitoring import MetricsCollector, trace_operation


@pytest.fixture
def collector():
    """Collector on a private registry."""
    return MetricsCollector(registry=CollectorRegistry())


@pytest.mark.unit
def test_record_export(collector):
    collector.record_export("basalt", "success", 0.01, widgets=3)
    assert collector.registry.get_sample_value(
        "gridforge_exports_total", {"target": "basalt", "status": "success"}
    ) == 1.0
    assert collector.registry.get_sample_value("gridforge_exported_widgets_total", {"target": "basalt"}) == 3.0


@pytest.mark.unit
def test_record_import(collector):
    collector.record_import("error", 0.002, 512)
    assert collector.registry.get_sample_value("gridforge_imports_total", {"status": "error"}) == 1.0
    assert b"gridforge_import_bytes" in collector.export()


@pytest.mark.unit
def test_trace_operation_reraises():
    with pytest.raises(RuntimeError):
        with trace_operation("failing", target="basalt"):
            raise RuntimeError("boom")
