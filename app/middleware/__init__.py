"""HTTP middleware. Applied in app.main; last added = outermost."""

from app.middleware.errors import UnhandledErrorMiddleware
from app.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware", "UnhandledErrorMiddleware"]
