# auditdesk/core/context.py

import contextvars
from contextlib import contextmanager
from typing import Iterator, Optional

# Set by callers per request/task; read by the JSON log formatter
correlation_id_ctx = contextvars.ContextVar("correlation_id", default=None)
tenant_id_ctx = contextvars.ContextVar("tenant_id", default=None)


@contextmanager
def bind_context(correlation_id: Optional[str] = None, tenant_id: Optional[str] = None) -> Iterator[None]:
    """Set correlation/tenant ids for log records emitted inside the block."""
    corr_token = correlation_id_ctx.set(correlation_id)
    tenant_token = tenant_id_ctx.set(tenant_id)
    try:
        yield
    finally:
        tenant_id_ctx.reset(tenant_token)
        correlation_id_ctx.reset(corr_token)
