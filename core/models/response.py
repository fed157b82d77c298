"""Response data models."""
from pydantic import BaseModel
from typing import Optional


class OkResponse(BaseModel):
    """Acknowledgement for operations with nothing else to return."""
    ok: bool = True


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str
    detail: Optional[str] = None
