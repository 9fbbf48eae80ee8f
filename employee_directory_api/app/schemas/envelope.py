"""
Pydantic model for the upstream response wrapper.

Every upstream response has the shape ``{"data": ..., "status": ...,
"error": ...}``.  ``data`` is left untyped here; the envelope codec
reshapes it into employee records once the caller knows whether it
expects one or many.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class Envelope(BaseModel):
    """Schema for an upstream response envelope."""

    model_config = ConfigDict(extra="ignore")

    data: Any = None
    status: Optional[str] = None
    error: Optional[str] = None
