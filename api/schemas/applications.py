"""Job application schemas."""

import uuid
from typing import Literal
from pydantic import BaseModel


class ApplicationResponse(BaseModel):
    """Result of a job application submission."""

    success: bool = True
    status: Literal["created", "attached"]
    application_id: uuid.UUID

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "status": "created",
                "application_id": "5b0c8a52-0c61-4a8e-9a53-5f7e2d6c1c11",
            }
        }
