"""
Top‑level router for version 1 of the API.

Aggregates resource routers under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import employees

router = APIRouter()

router.include_router(employees.router, prefix="/employee", tags=["employee"])
