# auditdesk/config/logging.py

import json
import logging
from datetime import datetime, timezone

from auditdesk.core.context import correlation_id_ctx, tenant_id_ctx


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "correlation_id": correlation_id_ctx.get(),
            "tenant_id": tenant_id_ctx.get(),
        }
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


def configure_logging(log_level: str):
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())

    package_logger = logging.getLogger("auditdesk")
    package_logger.setLevel(log_level)
    package_logger.addHandler(handler)
    package_logger.propagate = False
