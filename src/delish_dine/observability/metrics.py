"""Custom metrics for the restaurant service."""

from opentelemetry import metrics

meter = metrics.get_meter("delish-dine")

records_created_counter = meter.create_counter(
    name="restaurant_records_created_total",
    description="Total number of records created by collection",
    unit="1",
)

validation_failure_counter = meter.create_counter(
    name="restaurant_validation_failures_total",
    description="Total number of rejected payloads by resource",
    unit="1",
)

order_items_histogram = meter.create_histogram(
    name="restaurant_order_items",
    description="Number of line items per created order",
    unit="1",
)


def record_created(collection: str) -> None:
    """Record a newly created record.

    Args:
        collection: Collection name (e.g., "orders", "reservations")
    """
    records_created_counter.add(1, {"collection": collection})


def record_validation_failure(resource: str, field: str | None = None) -> None:
    """Record a rejected payload.

    Args:
        resource: Resource the payload was meant for
        field: Field that failed validation, if known
    """
    attributes = {"resource": resource}
    if field:
        attributes["field"] = field
    validation_failure_counter.add(1, attributes)


def record_order_size(item_count: int) -> None:
    order_items_histogram.record(item_count)
