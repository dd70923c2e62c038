"""
Metrics Collection
Prometheus metrics for exports and imports
"""

import time

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram, generate_latest


class MetricsCollector:
    """
    Collects Prometheus metrics for the design engine.
    """

    def __init__(self, registry: CollectorRegistry = REGISTRY) -> None:
        self.registry = registry

        # Export metrics
        self.exports_total = Counter(
            "gridforge_exports_total",
            "Total number of exports",
            ["target", "status"],
            registry=registry,
        )
        self.export_duration = Histogram(
            "gridforge_export_duration_seconds",
            "Export duration in seconds",
            ["target"],
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
            registry=registry,
        )
        self.exported_widgets = Counter(
            "gridforge_exported_widgets_total",
            "Total number of widgets written by exports",
            ["target"],
            registry=registry,
        )

        # Import metrics
        self.imports_total = Counter(
            "gridforge_imports_total",
            "Total number of imports",
            ["status"],
            registry=registry,
        )
        self.import_duration = Histogram(
            "gridforge_import_duration_seconds",
            "Import duration in seconds",
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
            registry=registry,
        )
        self.import_bytes = Histogram(
            "gridforge_import_bytes",
            "Size of imported sources in bytes",
            buckets=[256, 1024, 4096, 16384, 65536, 262144, 1048576],
            registry=registry,
        )

        # Error metrics
        self.errors_total = Counter(
            "gridforge_errors_total",
            "Total number of errors",
            ["error_type", "component"],
            registry=registry,
        )

        self.start_time = time.time()

    def record_export(self, target: str, status: str, duration: float, widgets: int = 0) -> None:
        """Record an export."""
        self.exports_total.labels(target=target, status=status).inc()
        self.export_duration.labels(target=target).observe(duration)
        if widgets:
            self.exported_widgets.labels(target=target).inc(widgets)

    def record_import(self, status: str, duration: float, size: int) -> None:
        """Record an import."""
        self.imports_total.labels(status=status).inc()
        self.import_duration.observe(duration)
        self.import_bytes.observe(size)

    def record_error(self, error_type: str, component: str) -> None:
        """Record an error."""
        self.errors_total.labels(error_type=error_type, component=component).inc()

    def export(self) -> bytes:
        """Metrics in Prometheus text format."""
        return generate_latest(self.registry)


# Global metrics collector instance
metrics_collector = MetricsCollector()
