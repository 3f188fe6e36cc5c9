# src/common/schemas.py

from pydantic import BaseModel

class SubmissionResponse(BaseModel):
    """Body returned by every submission endpoint; failures carry no detail."""
    success: bool
