"""Structured logging configuration for application and audit events."""

import logging
import sys
from typing import Any
from uuid import UUID

import structlog

from taskviews.core.config import get_settings

settings = get_settings()

HUMAN_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_formatter(log_format: str) -> logging.Formatter:
    """Build the console formatter for ``LOG_FORMAT``.

    ``json`` renders each record as one JSON object through structlog, with
    the audit ``event_data`` kept as a nested object. Anything else gives the
    plain human format.
    """
    if log_format != "json":
        return logging.Formatter(HUMAN_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ExtraAdder(allow=["event_data"]),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(default=str),
        ],
    )


# Create logger for audit events (view changes, moves)
audit_logger = logging.getLogger("taskviews.audit")
audit_logger.setLevel(logging.INFO)

# Create logger for application events
app_logger = logging.getLogger("taskviews")
app_logger.setLevel(settings.LOG_LEVEL.upper())

# Create console handler with structured format
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(settings.LOG_LEVEL.upper())
console_handler.setFormatter(build_formatter(settings.LOG_FORMAT))

# Audit records propagate to the application logger's handler
if not app_logger.handlers:
    app_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the application namespace.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        Logger that writes through the application handler.
    """
    if name == "taskviews" or name.startswith("taskviews."):
        return logging.getLogger(name)
    return logging.getLogger(f"taskviews.{name}")


def log_task_moved(
    view_id: UUID,
    task_id: UUID,
    from_status_id: UUID | None,
    to_status_id: UUID,
    position: int,
) -> None:
    """
    Log a task move inside a view.

    Args:
        view_id: View the move happened in.
        task_id: Moved task.
        from_status_id: Global status before the move.
        to_status_id: Global status after the move.
        position: Final position in the destination column.
    """
    event = {
        "event": "tasks.views.task_moved",
        "view_id": str(view_id),
        "task_id": str(task_id),
        "from_status_id": str(from_status_id) if from_status_id else None,
        "to_status_id": str(to_status_id),
        "position": position,
    }
    audit_logger.info(
        f"Task moved - view_id={view_id}, task_id={task_id}, "
        f"from_status_id={from_status_id}, to_status_id={to_status_id}, position={position}",
        extra={"event_data": event},
    )


def log_task_view_action(
    action: str,
    view_id: UUID,
    details: dict[str, Any] | None = None,
) -> None:
    """
    Log a task view lifecycle action.

    Args:
        action: Action suffix (e.g., 'created', 'renamed', 'statuses_updated').
        view_id: Affected view.
        details: Additional details (optional).
    """
    event: dict[str, Any] = {"event": f"tasks.views.{action}", "view_id": str(view_id)}
    message = f"Task view {action} - view_id={view_id}"
    if details:
        event["details"] = details
        message += f", details={details}"

    audit_logger.info(message, extra={"event_data": event})
