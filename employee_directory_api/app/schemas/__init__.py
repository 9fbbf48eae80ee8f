"""
Pydantic schema definitions for API payloads.

Employee records and the request body for creating one live in
``employee``; the upstream response wrapper lives in ``envelope``.
"""
