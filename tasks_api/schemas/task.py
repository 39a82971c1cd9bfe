"""
Pydantic schemas for Tasks API.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class TaskPayload(BaseModel):
    """Schema for creating or replacing a task.

    ``title`` is optional at the schema level so a missing title reaches
    ``validate_task_payload`` and is reported as a 400. Any ``id`` sent by
    the client is ignored.
    """
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(None, max_length=255, description="Task title")
    description: Optional[str] = Field(None, description="Task description")


class TaskResponse(BaseModel):
    """Schema for task response"""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Task ID")
    title: str = Field(..., description="Task title")
    description: Optional[str] = Field(None, description="Task description")


class ErrorDetail(BaseModel):
    """Body of an error response"""
    type: str
    status_code: int
    message: str
    path: str
    timestamp: float


class ErrorResponse(BaseModel):
    """Schema for error responses"""
    error: ErrorDetail
