"""JSON and human-readable formatters for fare engine logs."""

import json
import logging
from datetime import UTC, datetime

# Attributes copied from the record when ContextFilter has set them
CONTEXT_FIELDS = ("vehicle_type", "quote_id", "correlation_id")


def _context_of(record: logging.LogRecord) -> dict[str, object]:
    return {field: getattr(record, field) for field in CONTEXT_FIELDS if hasattr(record, field)}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, stamped with the record's creation time."""

    def __init__(self, environment: str = "development"):
        super().__init__()
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "env": self.environment,
        }
        log_data.update(_context_of(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class DevFormatter(logging.Formatter):
    """Readable single-line format with quote context appended as key=value pairs."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        # "-" is the placeholder DefaultCorrelationFilter sets
        context = {key: value for key, value in _context_of(record).items() if value != "-"}
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        first, newline, rest = line.partition("\n")
        return f"{first} [{pairs}]{newline}{rest}"
