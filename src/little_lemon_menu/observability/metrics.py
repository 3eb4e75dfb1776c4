"""Custom metrics for the menu service."""

from opentelemetry import metrics

# Get meter for menu service
meter = metrics.get_meter("little-lemon-menu")

menu_load_counter = meter.create_counter(
    name="menu_load_total",
    description="Total number of menu loads by source (cache, remote, none)",
    unit="1",
)

menu_fetch_failure_counter = meter.create_counter(
    name="menu_fetch_failure_total",
    description="Total number of failed remote menu fetches",
    unit="1",
)

menu_fetch_duration_histogram = meter.create_histogram(
    name="menu_fetch_duration_seconds",
    description="Duration of remote menu fetches",
    unit="s",
)

cache_write_failure_counter = meter.create_counter(
    name="menu_cache_write_failure_total",
    description="Total number of failed writes to the local menu cache",
    unit="1",
)


def record_menu_load(source: str, item_count: int) -> None:  # noqa: ARG001
    """Record a completed menu load.

    Args:
        source: Where the items came from ("cache", "remote" or "none")
        item_count: Number of menu items loaded
    """
    menu_load_counter.add(1, {"source": source})


def record_menu_fetch_failure() -> None:
    """Record a failed remote menu fetch."""
    menu_fetch_failure_counter.add(1)


def record_menu_fetch_duration(duration_seconds: float) -> None:
    """Record the duration of a remote menu fetch.

    Args:
        duration_seconds: Duration in seconds
    """
    menu_fetch_duration_histogram.record(duration_seconds)


def record_cache_write_failure() -> None:
    """Record a failed write to the local menu cache."""
    cache_write_failure_counter.add(1)
