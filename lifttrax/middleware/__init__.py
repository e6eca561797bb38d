"""
Middleware package for the application.
"""

from lifttrax.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
