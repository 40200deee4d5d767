"""Structured logger for observability."""

import logging
from typing import Any, Optional

_logger = logging.getLogger("autolist")
_logger.setLevel(logging.INFO)

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(
    component: str,
    action: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log a structured event.

    Args:
        component: Component name (e.g., 'http', 'car_service', 'price_client')
        action: What happened (e.g., 'list', 'save', 'delete')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "component": component,
        "action": action,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


def log_store_operation(
    entity: str,
    operation: str,
    entity_id: Optional[int] = None,
    **kwargs: Any,
) -> None:
    """
    Log a mutation against a store.

    Args:
        entity: Entity type ('car' or 'price')
        operation: Operation name ('create', 'update', 'delete')
        entity_id: Identifier of the affected record
        **kwargs: Additional fields
    """
    log_event(
        component="store",
        action=operation,
        entity=entity,
        entity_id=entity_id,
        **kwargs,
    )


logger = _logger
