# app/shared/middleware/__init__.py (async version)

from app.shared.middleware.exception_middleware import AsyncExceptionMiddleware
from app.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware

# Export all for easy imports
__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
]
