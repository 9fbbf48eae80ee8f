"""
Application package initializer.

The API is a thin facade over an upstream employee-data service.  It
is organised into ``core`` (settings, logging, errors), ``schemas``
(pydantic models), ``services`` (upstream access and directory logic)
and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
