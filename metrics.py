"""
Prometheus metrics for geography value conversion.
Counts decoded/encoded values and decode failures by reason.
"""
import logging
from prometheus_client import Counter, start_http_server, REGISTRY

logger = logging.getLogger(__name__)

# Counters - Conversion
geography_values_decoded_total = Counter(
    "geography_values_decoded_total",
    "Total geography column values decoded successfully",
    ["geometry"],
    registry=REGISTRY,
)
geography_values_encoded_total = Counter(
    "geography_values_encoded_total",
    "Total geography values encoded for writing",
    ["geometry"],
    registry=REGISTRY,
)

# Counters - Data Quality
geography_decode_failures_total = Counter(
    "geography_decode_failures_total",
    "Total geography column values that failed to decode",
    ["geometry", "reason"],
    registry=REGISTRY,
)


def start_metrics_server(port: int = 9090) -> None:
    """Start the Prometheus metrics HTTP server in a daemon thread."""
    try:
        start_http_server(port, addr="0.0.0.0")
        logger.info("Metrics server started on port %s", port)
    except OSError as e:
        logger.warning("Could not start metrics server on port %s: %s", port, e)


def record_decoded(geometry: str) -> None:
    """Record a successfully decoded value."""
    geography_values_decoded_total.labels(geometry=geometry).inc()


def record_encoded(geometry: str) -> None:
    """Record an encoded value."""
    geography_values_encoded_total.labels(geometry=geometry).inc()


def record_decode_failure(geometry: str, reason: str) -> None:
    """Record a value that failed to decode."""
    geography_decode_failures_total.labels(geometry=geometry, reason=reason).inc()
